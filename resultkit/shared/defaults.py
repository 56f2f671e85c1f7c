"""Canonical default values for unwrap_or_default().

Defaults come from a closed whitelist keyed by exact type. Types outside the
whitelist are rejected instead of guessed, so a missing default surfaces as an
error at the call site rather than as a fabricated value.
"""

import logging
import re
from collections.abc import Callable, Mapping
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType
from typing import Any, TypeVar, cast, get_args, get_origin

import httpx

from resultkit.domain.exceptions import UnsupportedDefaultTypeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Exact type -> zero-argument factory. Mutable defaults are built per call.
_DEFAULT_FACTORIES: Mapping[type, Callable[[], Any]] = MappingProxyType(
    {
        # Numeric zero (int is arbitrary precision, so it covers big integers)
        int: int,
        float: float,
        complex: complex,
        Decimal: Decimal,
        Fraction: Fraction,
        # Empty text
        str: str,
        bytes: bytes,
        # False
        bool: bool,
        # Empty collections
        list: list,
        tuple: tuple,
        dict: dict,
        set: set,
        frozenset: frozenset,
        # Zero duration and epoch timestamps
        timedelta: timedelta,
        datetime: lambda: EPOCH,
        date: EPOCH.date,
        # Empty pattern and empty locator
        re.Pattern: lambda: re.compile(""),
        httpx.URL: lambda: httpx.URL(""),
        # Unit
        type(None): lambda: None,
    }
)


def supported_default_types() -> frozenset[type]:
    """Return the set of types unwrap_or_default() knows how to default."""
    return frozenset(_DEFAULT_FACTORIES)


def default_for(target: type[T]) -> T:
    """Build the canonical default value for ``target``.

    Args:
        target: A whitelisted type, or a parameterised generic of one
            (``list[int]``, ``re.Pattern[bytes]``)

    Returns:
        A fresh default instance of ``target``

    Raises:
        UnsupportedDefaultTypeError: If ``target`` is not whitelisted
    """
    origin = get_origin(target) or target

    if origin is re.Pattern and get_args(target) == (bytes,):
        logger.debug("Resolved default for re.Pattern[bytes]")
        return cast(T, re.compile(b""))

    try:
        factory = _DEFAULT_FACTORIES[origin]
    except (KeyError, TypeError):
        # TypeError covers unhashable type expressions
        raise UnsupportedDefaultTypeError(target) from None

    logger.debug(f"Resolved default for {getattr(origin, '__qualname__', origin)}")
    return cast(T, factory())
