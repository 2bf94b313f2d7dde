"""
Exception hierarchy for the Royal Mail barcode validator.

Validation failures are never raised; they are returned as
``ValidationResult`` objects. Exceptions are reserved for callers that
break a function's contract and for the server confirmation step.
"""

from __future__ import annotations


class BarcodeError(Exception):
    """Base class for all barcode package errors."""


class InvalidInputError(BarcodeError, ValueError):
    """Raised when a function receives input outside its contract."""


class ConfirmationError(BarcodeError):
    """Raised when the server rejects a barcode confirmation."""

    def __init__(self, barcode: str, message: str):
        super().__init__(message)
        self.barcode = barcode
        self.message = message
