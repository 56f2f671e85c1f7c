"""Free-function helpers for composing Results."""

from collections.abc import Iterable
from typing import TypeGuard, TypeVar

from resultkit.shared.result import Err, Ok, Result

T = TypeVar("T")
E = TypeVar("E")


def is_ok(result: Result[T, E]) -> TypeGuard[Ok[T]]:
    """Narrow ``result`` to Ok.

    Args:
        result: The Result to check

    Returns:
        True if the Result is Ok, False if Err
    """
    return isinstance(result, Ok)


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Narrow ``result`` to Err.

    Args:
        result: The Result to check

    Returns:
        True if the Result is Err, False if Ok
    """
    return isinstance(result, Err)


def flatten(result: Result[Result[T, E], E]) -> Result[T, E]:
    """Collapse one level of nesting.

    Ok(Ok(v))  -> Ok(v)
    Ok(Err(e)) -> Err(e)
    Err(e)     -> Err(e)
    """
    return result.flatten()


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect Results into a Result of list, stopping at the first Err.

    Values keep their input order. Results after the first Err are not
    consumed from ``results``.

    Args:
        results: Results to collect

    Returns:
        Ok with every value if all succeeded, otherwise the first Err
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def from_optional(value: T | None, error: E) -> Result[T, E]:
    """Wrap ``value`` in Ok, or return Err(error) when it is None."""
    if value is None:
        return Err(error)
    return Ok(value)
