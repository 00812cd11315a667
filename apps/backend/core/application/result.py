"""
Result Pipeline

Every use case step returns either Success(value) or Failure(kind, errors).
Steps are chained with `flow`; the first Failure short-circuits the rest and
is handed back to the caller unchanged.

Expected failures (bad input, conflicts, missing records, bad credentials)
travel as Failure values. Exceptions are reserved for programming errors.

Usage:
    result = flow(
        command,
        validate_registration,
        build_user,
        users.create,
        issue_token,
    )
    if result.is_success:
        render(result.value)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Mapping, TypeVar, Union


T = TypeVar("T")
U = TypeVar("U")


class FailureKind(str, Enum):
    """Why an operation did not succeed."""
    VALIDATION_ERROR = "ValidationError"  # Malformed or missing input
    CONFLICT = "Conflict"  # Uniqueness violation
    NOT_FOUND = "NotFound"  # Referenced entity absent
    UNAUTHORIZED = "Unauthorized"  # No usable identity
    INVALID_TOKEN = "InvalidToken"  # Token malformed, expired or tampered
    INVALID_CREDENTIALS = "InvalidCredentials"  # Login mismatch (never says which part)


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def bind(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        return fn(self.value)

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        return Success(fn(self.value))

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """
    A failed step.

    `errors` maps a field (or subject such as "user", "token") to the
    human-readable messages explaining the failure.
    """
    kind: FailureKind
    errors: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return False

    def bind(self, fn: Callable[[Any], "Result[U]"]) -> "Failure":
        return self

    def map(self, fn: Callable[[Any], U]) -> "Failure":
        return self

    def unwrap(self):
        raise RuntimeError(f"unwrap() called on {self.kind.value} failure: {dict(self.errors)}")

    @property
    def messages(self) -> list[str]:
        """Flat list of "<field> <message>" strings."""
        return [f"{name} {message}" for name, items in self.errors.items() for message in items]


Result = Union[Success[T], Failure]
Step = Callable[[Any], "Result[Any]"]


def flow(value: Any, *steps: Step) -> "Result[Any]":
    """
    Thread `value` through `steps` left to right.

    Each step receives the previous success value. The first Failure stops
    the pipeline: no later step runs.
    """
    result: Result = Success(value)
    for step in steps:
        result = step(result.value)
        if not result.is_success:
            return result
    return result


# ============================================================================
# Failure constructors
# ============================================================================

def failure(kind: FailureKind, subject: str, *messages: str) -> Failure:
    return Failure(kind=kind, errors={subject: tuple(messages)})


def validation_error(field_name: str, *messages: str) -> Failure:
    return failure(FailureKind.VALIDATION_ERROR, field_name, *messages)


def conflict(field_name: str, message: str = "has already been taken") -> Failure:
    return failure(FailureKind.CONFLICT, field_name, message)


def not_found(subject: str, message: str = "not found") -> Failure:
    return failure(FailureKind.NOT_FOUND, subject, message)


def unauthorized(message: str = "You need to be authorized") -> Failure:
    return failure(FailureKind.UNAUTHORIZED, "token", message)


def invalid_token(message: str = "is invalid or expired") -> Failure:
    return failure(FailureKind.INVALID_TOKEN, "token", message)


def invalid_credentials() -> Failure:
    return failure(FailureKind.INVALID_CREDENTIALS, "email or password", "is invalid")


# ============================================================================
# Field error accumulation
# ============================================================================

class FieldErrors:
    """
    Collects field-level validation messages so that every bad field is
    reported in a single ValidationError.
    """

    def __init__(self):
        self._errors: dict[str, list[str]] = {}

    def add(self, field_name: str, message: str) -> None:
        self._errors.setdefault(field_name, []).append(message)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def to_failure(self) -> Failure:
        return Failure(
            kind=FailureKind.VALIDATION_ERROR,
            errors={name: tuple(messages) for name, messages in self._errors.items()},
        )

    def result(self, value: T) -> "Result[T]":
        """Success(value) when nothing was collected, else the ValidationError."""
        if self._errors:
            return self.to_failure()
        return Success(value)
