"""
Error taxonomy for the payroll record keeper.

Every domain error carries the HTTP status it maps to, so the API layer
can translate it with a single exception handler.
"""
from typing import Any, Dict


class PayrollError(Exception):
    """Base class for payroll record keeper errors."""
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to the JSON body returned by the API."""
        return {"error": self.message}


class ValidationError(PayrollError):
    """A required field is missing or malformed."""
    status_code = 400


class AuthError(PayrollError):
    """The bearer token is missing or does not match the admin key."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized. Valid API key required."):
        super().__init__(message)


class NotFoundError(PayrollError):
    """A referenced employee or payroll entry does not exist."""
    status_code = 404


class ConflictError(PayrollError):
    """A unique key is already taken."""
    status_code = 409


class PersistenceError(PayrollError):
    """The data file could not be read, parsed or written."""
    status_code = 500
