"""
Domain layer module.

This module contains the error taxonomy raised when a Result is misused at an
extraction site.

Key components:
- exceptions.py: ResultError hierarchy (unwrap and default-type failures)
"""

from resultkit.domain.exceptions import (
    ResultError,
    UnsupportedDefaultTypeError,
    UnwrapError,
    UnwrapOnFailureError,
    UnwrapOnSuccessError,
)

__all__ = [
    "ResultError",
    "UnwrapError",
    "UnwrapOnFailureError",
    "UnwrapOnSuccessError",
    "UnsupportedDefaultTypeError",
]
