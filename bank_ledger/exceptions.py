"""Custom exception hierarchy for bank-ledger."""


class LedgerError(Exception):
    """Base exception for all bank-ledger errors."""


class ValidationError(LedgerError):
    """Raised when an account identity field has an invalid format."""


class InvalidAmountError(LedgerError):
    """Raised when a deposit or withdrawal amount is not a positive number."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when no account with the requested number is held."""


class DuplicateAccountError(LedgerError):
    """Raised when an account number is already present in the book."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
