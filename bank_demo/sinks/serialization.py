"""Shared serialization utilities for sinks."""

from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_demo.models import Account, AccountKind, Customer, Transaction


def transaction_to_dict(transaction: Transaction) -> dict:
    return {k: serialize_value(v) for k, v in asdict(transaction).items()}


def account_to_dict(account: Account) -> dict:
    """Convert an account and its transaction log to a dict."""
    data: dict[str, Any] = {
        "account_number": account.account_number,
        "kind": account.kind,
        "owner_tax_id": account.owner.tax_id,
        "balance": account.balance,
        "available_funds": account.available_funds,
    }
    if account.kind is AccountKind.CURRENT:
        data["overdraft_limit"] = account.policy.overdraft_limit
    else:
        data["interest_rate"] = account.policy.interest_rate
    data["transactions"] = [transaction_to_dict(t) for t in account.transactions]
    return serialize_value(data)


def customer_to_dict(customer: Customer) -> dict:
    """Convert a customer with all of its accounts to a dict."""
    return {
        "name": customer.name,
        "tax_id": customer.tax_id,
        "total_balance": serialize_value(customer.total_balance),
        "accounts": [account_to_dict(a) for a in customer.accounts],
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
