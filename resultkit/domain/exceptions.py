"""
Exception hierarchy for resultkit.

Ordinary failures travel as Err values and never raise. The exceptions here
are reserved for misuse at an extraction site: unwrapping the wrong variant,
or asking for a default of a type that has no canonical zero value.
"""


class ResultError(Exception):
    """
    Base exception for all resultkit errors.

    Catching ResultError catches every exception raised by this package.
    """

    pass


class UnwrapError(ResultError):
    """
    Exception raised when a value is extracted from the wrong variant.

    Attributes:
        message: Diagnostic message (fixed for unwrap/unwrap_err, caller-supplied
            for expect/expect_err)
        payload: The payload of the variant that was actually present
    """

    def __init__(self, message: str, payload: object = None) -> None:
        """
        Initialize UnwrapError.

        Args:
            message: Diagnostic message naming the failed operation
            payload: Payload of the opposite variant, kept for debugging
        """
        super().__init__(message)
        self.message = message
        self.payload = payload

    def __str__(self) -> str:
        """Return message followed by the offending payload."""
        return f"{self.message}: {self.payload!r}"


class UnwrapOnFailureError(UnwrapError):
    """Raised by unwrap()/expect() when called on an Err. Payload is the error value."""

    pass


class UnwrapOnSuccessError(UnwrapError):
    """Raised by unwrap_err()/expect_err() when called on an Ok. Payload is the success value."""

    pass


class UnsupportedDefaultTypeError(ResultError, TypeError):
    """
    Exception raised when unwrap_or_default() is asked for an unknown type.

    Attributes:
        target: The type that has no registered default
    """

    def __init__(self, target: object) -> None:
        """
        Initialize UnsupportedDefaultTypeError.

        Args:
            target: The unrecognized type (or type expression)
        """
        self.target = target
        name = target.__qualname__ if isinstance(target, type) else repr(target)
        super().__init__(
            f"Type {name} is not supported, please use unwrap_or or unwrap_or_else"
        )
