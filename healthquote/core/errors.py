"""
Errors raised by the quote model.
"""
from __future__ import annotations

from typing import Any


class InvalidArgument(ValueError):
    """
    Raised when a product code outside its enumeration is supplied.

    Attributes:
        field: Human-readable name of the product field ("hospital", "extras").
        code: The offending code value.
    """

    def __init__(self, field: str, code: Any, reason: str = "") -> None:
        self.field = field
        self.code = code
        message = f'Invalid {field} code "{code}".'
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


__all__ = ["InvalidArgument"]
