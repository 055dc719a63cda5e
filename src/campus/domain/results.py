"""Result types for validation and workflow outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class FailureType(str, Enum):
    """Kinds of failure a validating operation can report.

    Each kind maps to one HTTP status code at the web boundary.
    """

    INVALID_INPUT = "invalid_input"
    ENTITY_DOES_NOT_EXIST = "entity_does_not_exist"
    ENTITY_ALREADY_EXISTS = "entity_already_exists"
    DATABASE_ERROR = "database_error"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of an operation that may fail with a human-readable message.

    A result is successful when it carries no error. Failed results always
    carry both a message and a failure type.

    Attributes:
        value: The produced value (None for failed or void results).
        error: Failure message, None on success.
        failure_type: Machine-checkable failure kind, None on success.
    """

    value: T | None = None
    error: str | None = None
    failure_type: FailureType | None = None

    @property
    def is_success(self) -> bool:
        """Check if the operation succeeded."""
        return self.error is None

    @property
    def is_failure(self) -> bool:
        """Check if the operation failed."""
        return self.error is not None

    def get_value(self) -> T:
        """Return the produced value.

        Raises:
            ValueError: If called on a failed result.
        """
        if self.is_failure:
            raise ValueError(f"Cannot get the value of a failed result: {self.error}")
        return self.value  # type: ignore[return-value]

    @classmethod
    def ok(cls, value: T | None = None) -> Result[T]:
        """Create a successful result.

        Args:
            value: Optional value carried by the result.

        Returns:
            A Result with no error.
        """
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        error: str,
        failure_type: FailureType = FailureType.INVALID_INPUT,
    ) -> Result[T]:
        """Create a failed result.

        Args:
            error: Human-readable failure message.
            failure_type: Failure kind, defaults to INVALID_INPUT.

        Returns:
            A Result carrying the error and its kind.
        """
        return cls(error=error, failure_type=failure_type)


def guard_against_none(arguments: list[tuple[object, str]]) -> str | None:
    """Return the message for the first missing argument, if any.

    Args:
        arguments: Pairs of (value, argument name) in checking order.

    Returns:
        "<name> is null or undefined" for the first None value, else None.
    """
    for argument, name in arguments:
        if argument is None:
            return f"{name} is null or undefined"
    return None
