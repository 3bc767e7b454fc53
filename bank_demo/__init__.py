"""In-memory banking model: customers, savings and current accounts."""

__version__ = "0.1.0"
