"""Result type for functional error handling.

This module implements a Rust-style Result type that makes error handling
explicit in type signatures without relying on exceptions for control flow.

A Result is exactly one of two frozen variants:

- ``Ok(value)``: the operation succeeded with ``value``
- ``Err(error)``: the operation failed with ``error`` (any type, not only exceptions)

Both variants expose the same combinator set, so callers can chain
transformations without checking the variant first, or pattern match when
they need to branch:

    match parse_version(n):
        case Ok(version):
            ...
        case Err(reason):
            ...

Only the extraction methods (``unwrap``, ``expect``, ``unwrap_err``,
``expect_err``, ``unwrap_or_default``) can raise; every other method is total.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union, final

from resultkit.domain.exceptions import UnwrapOnFailureError, UnwrapOnSuccessError
from resultkit.shared.defaults import default_for

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Map target type
F = TypeVar("F")  # Error map target type

UNWRAP_ON_ERR_MESSAGE = "called `Result.unwrap()` on an `Err` value"
UNWRAP_ERR_ON_OK_MESSAGE = "called `Result.unwrap_err()` on an `Ok` value"


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result containing a value."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __hash__(self) -> int:
        return hash(("Ok", self.value))

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __invert__(self) -> T:
        """Shortcut for unwrap(): ``~Ok(1) + ~Ok(2) == 3``."""
        return self.value

    # Predicates

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return True

    def is_ok_and(self, predicate: Callable[[T], bool]) -> bool:
        """Return True if this is Ok and the value matches ``predicate``."""
        return predicate(self.value)

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return False

    def is_err_and(self, predicate: Callable[[Any], bool]) -> bool:
        """Always False for Ok; ``predicate`` is not called."""
        return False

    # Optional conversion

    def ok(self) -> T | None:
        """Return the value, discarding the variant."""
        return self.value

    def err(self) -> None:
        """Return None since there is no error."""
        return None

    # Transformation

    def map(self, func: Callable[[T], U]) -> "Result[U, Any]":
        """Transform the success value."""
        return Ok(func(self.value))

    def map_err(self, func: Callable[[Any], F]) -> "Result[T, F]":
        """Return self unchanged since this is Ok."""
        return self

    def map_or(self, default: U, func: Callable[[T], U]) -> U:
        """Apply ``func`` to the value; ``default`` is evaluated but ignored."""
        return func(self.value)

    def map_or_else(self, default_func: Callable[[Any], U], func: Callable[[T], U]) -> U:
        """Apply ``func`` to the value; ``default_func`` is never called."""
        return func(self.value)

    def inspect(self, func: Callable[[T], Any]) -> "Ok[T]":
        """Call ``func`` with the value for its side effect and return self."""
        func(self.value)
        return self

    def inspect_err(self, func: Callable[[Any], Any]) -> "Ok[T]":
        """Return self without calling ``func``."""
        return self

    def iter(self) -> Iterator[T]:
        """Return an iterator yielding the value exactly once."""
        yield self.value

    # Chaining

    def and_(self, other: "Result[U, E]") -> "Result[U, E]":
        """Return ``other`` since this is Ok."""
        return other

    def and_then(self, func: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """Chain an operation that itself returns a Result."""
        return func(self.value)

    def or_(self, other: "Result[T, F]") -> "Result[T, F]":
        """Return self unchanged; ``other`` is ignored."""
        return self

    def or_else(self, func: Callable[[Any], "Result[T, F]"]) -> "Result[T, F]":
        """Return self unchanged without calling ``func``."""
        return self

    def flatten(self) -> "Result[Any, Any]":
        """Collapse ``Ok(Ok(v))`` to ``Ok(v)`` and ``Ok(Err(e))`` to ``Err(e)``.

        Raises:
            TypeError: If the contained value is not itself a Result
        """
        if not isinstance(self.value, (Ok, Err)):
            raise TypeError(f"flatten() requires a nested Result, got {self!r}")
        return self.and_then(_identity)

    # Extraction

    def unwrap(self) -> T:
        """Get the value (safe because this is Ok)."""
        return self.value

    def expect(self, message: str) -> T:
        """Get the value; ``message`` is only used on Err."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrapOnSuccessError carrying the success value."""
        raise UnwrapOnSuccessError(UNWRAP_ERR_ON_OK_MESSAGE, self.value)

    def expect_err(self, message: str) -> NoReturn:
        """Raise UnwrapOnSuccessError with ``message`` and the success value."""
        raise UnwrapOnSuccessError(message, self.value)

    def unwrap_or(self, default: T) -> T:
        """Get the value or default (returns value because this is Ok)."""
        return self.value

    def unwrap_or_else(self, func: Callable[[Any], T]) -> T:
        """Get the value; ``func`` is never called."""
        return self.value

    def unwrap_or_default(self, target: type[T]) -> T:
        """Get the value; ``target`` is only consulted on Err."""
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def __hash__(self) -> int:
        return hash(("Err", self.error))

    def __iter__(self) -> Iterator[Any]:
        return self.iter()

    def __invert__(self) -> NoReturn:
        """Shortcut for unwrap(), which always raises on Err."""
        self.unwrap()

    # Predicates

    def is_ok(self) -> bool:
        """Check if this is a success result."""
        return False

    def is_ok_and(self, predicate: Callable[[Any], bool]) -> bool:
        """Always False for Err; ``predicate`` is not called."""
        return False

    def is_err(self) -> bool:
        """Check if this is an error result."""
        return True

    def is_err_and(self, predicate: Callable[[E], bool]) -> bool:
        """Return True if the error matches ``predicate``."""
        return predicate(self.error)

    # Optional conversion

    def ok(self) -> None:
        """Return None since there is no value."""
        return None

    def err(self) -> E | None:
        """Return the error, discarding the variant."""
        return self.error

    # Transformation

    def map(self, func: Callable[[Any], U]) -> "Result[U, E]":
        """Transform the success value (does nothing for Err)."""
        return self

    def map_err(self, func: Callable[[E], F]) -> "Result[Any, F]":
        """Transform the error value."""
        return Err(func(self.error))

    def map_or(self, default: U, func: Callable[[Any], U]) -> U:
        """Return ``default`` without calling ``func``."""
        return default

    def map_or_else(self, default_func: Callable[[E], U], func: Callable[[Any], U]) -> U:
        """Compute the result from the error; ``func`` is never called."""
        return default_func(self.error)

    def inspect(self, func: Callable[[Any], Any]) -> "Err[E]":
        """Return self without calling ``func``."""
        return self

    def inspect_err(self, func: Callable[[E], Any]) -> "Err[E]":
        """Call ``func`` with the error for its side effect and return self."""
        func(self.error)
        return self

    def iter(self) -> Iterator[Any]:
        """Return an empty iterator."""
        return iter(())

    # Chaining

    def and_(self, other: "Result[U, E]") -> "Result[U, E]":
        """Propagate this error; ``other`` is ignored."""
        return self

    def and_then(self, func: Callable[[Any], "Result[U, E]"]) -> "Result[U, E]":
        """Propagate this error without calling ``func``."""
        return self

    def or_(self, other: "Result[T, F]") -> "Result[T, F]":
        """Return ``other`` since this is Err."""
        return other

    def or_else(self, func: Callable[[E], "Result[T, F]"]) -> "Result[T, F]":
        """Recover from the error with an operation that returns a Result."""
        return func(self.error)

    def flatten(self) -> "Err[E]":
        """Return self unchanged; there is no nested Result to collapse."""
        return self

    # Extraction

    def unwrap(self) -> NoReturn:
        """Raise UnwrapOnFailureError carrying the error value."""
        self._raise_unwrap(UNWRAP_ON_ERR_MESSAGE)

    def expect(self, message: str) -> NoReturn:
        """Raise UnwrapOnFailureError with ``message`` and the error value."""
        self._raise_unwrap(message)

    def unwrap_err(self) -> E:
        """Get the error value."""
        return self.error

    def expect_err(self, message: str) -> E:
        """Get the error value; ``message`` is only used on Ok."""
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Get the value or default (returns default because this is Err)."""
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        """Compute a value from the error."""
        return func(self.error)

    def unwrap_or_default(self, target: type[T]) -> T:
        """Return the canonical default of ``target``.

        Raises:
            UnsupportedDefaultTypeError: If ``target`` has no registered default
        """
        return default_for(target)

    def _raise_unwrap(self, message: str) -> NoReturn:
        exc = UnwrapOnFailureError(message, self.error)
        if isinstance(self.error, BaseException):
            raise exc from self.error
        raise exc


def _identity(value: Any) -> Any:
    return value


# Type alias for clearer function signatures
Result = Union[Ok[T], Err[E]]
