"""
resultkit: a Rust-style Result type for Python.

    from resultkit import Err, Ok, Result

    def parse_port(raw: str) -> Result[int, str]:
        if not raw.isdigit():
            return Err(f"not a number: {raw!r}")
        return Ok(int(raw))

    parse_port("80").map(lambda p: p + 1).unwrap_or(0)  # 81
"""

from resultkit.domain.exceptions import (
    ResultError,
    UnsupportedDefaultTypeError,
    UnwrapError,
    UnwrapOnFailureError,
    UnwrapOnSuccessError,
)
from resultkit.shared.combinators import collect_results, flatten, from_optional, is_err, is_ok
from resultkit.shared.defaults import default_for, supported_default_types
from resultkit.shared.result import Err, Ok, Result

__version__ = "0.1.0"

__all__ = [
    "Ok",
    "Err",
    "Result",
    "ResultError",
    "UnwrapError",
    "UnwrapOnFailureError",
    "UnwrapOnSuccessError",
    "UnsupportedDefaultTypeError",
    "collect_results",
    "default_for",
    "flatten",
    "from_optional",
    "is_err",
    "is_ok",
    "supported_default_types",
]
