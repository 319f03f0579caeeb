class LedgerError(Exception):
    """Base exception for all vacation-ledger errors."""


class InvalidConfiguration(LedgerError, ValueError):
    """Raised when a VacationConfig cannot be built from the given values."""
