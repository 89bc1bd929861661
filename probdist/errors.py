"""Exception types raised by probdist.

Every error derives from :class:`StatsError`. Parameter and domain problems
additionally derive from :class:`ValueError` so callers that already guard
distribution construction with ``except ValueError`` keep working.
"""

__all__ = [
    "StatsError",
    "BadParamsError",
    "DomainError",
    "PreconditionError",
]


class StatsError(Exception):
    """Base class for all errors raised by probdist."""


class BadParamsError(StatsError, ValueError):
    """Raised when a distribution is constructed with invalid parameters."""

    def __init__(self, message: str = "Bad distribution parameters"):
        super().__init__(message)


class DomainError(StatsError, ValueError):
    """Raised when a special function is evaluated outside its domain.

    Attributes:
        function: Name of the special function that rejected the call.
        argument: Name of the offending argument.
        value: The offending value.
    """

    def __init__(self, function: str, argument: str, value: float, reason: str):
        self.function = function
        self.argument = argument
        self.value = value
        super().__init__(f"{function}: {argument}={value!r} {reason}")


class PreconditionError(StatsError, ValueError):
    """Raised when a method's precondition on the distribution parameters fails."""
