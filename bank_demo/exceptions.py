"""Custom exception hierarchy for bank-demo."""


class BankingError(Exception):
    """Base exception for all bank-demo errors."""


class InsufficientFunds(BankingError):
    """Raised when a withdrawal exceeds what the account allows."""


class InvalidAmount(BankingError):
    """Raised when an amount is not a positive number."""


class EntityNotFoundError(BankingError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when an account number is not known."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a foreign key reference is violated."""


class DuplicateEntityError(BankingError):
    """Raised when an entity identifier is already taken."""


class DuplicateAccountError(DuplicateEntityError):
    """Raised when an account number is already in use."""


class DuplicateCustomerError(DuplicateEntityError):
    """Raised when a tax id is already registered."""


class AccountOwnershipError(BankingError):
    """Raised when an account is attached to a customer that does not own it."""


class ConfigurationError(BankingError):
    """Raised when configuration is invalid or missing."""
