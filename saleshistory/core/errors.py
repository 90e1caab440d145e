"""
Exceptions for the sales history dialog.

    SalesHistoryError (base)
    ├── StoreUnavailable - invoice store unreachable or a query failed
    └── MissingRowData   - a selection names a row or invoice id that is not rendered

Both are handled inside the presenter; neither reaches the user as a dialog.
"""

from typing import Any, Dict, Optional


class SalesHistoryError(Exception):
    """Base exception for all sales history errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class StoreUnavailable(SalesHistoryError):
    """The invoice store could not answer a query (connection lost, bad schema, ...)."""


class MissingRowData(SalesHistoryError):
    """A selection event references a row whose backing invoice id cannot be found."""
