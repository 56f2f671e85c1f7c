"""
Shared utilities module.

This module contains the Result type and its helpers, along with the
configuration and logging setup used by applications built on it.
"""

from resultkit.shared.combinators import collect_results, flatten, from_optional, is_err, is_ok
from resultkit.shared.defaults import default_for, supported_default_types
from resultkit.shared.result import Err, Ok, Result

__all__ = [
    "Ok",
    "Err",
    "Result",
    "default_for",
    "supported_default_types",
    "collect_results",
    "flatten",
    "from_optional",
    "is_err",
    "is_ok",
]
