"""Result pattern for catalog outcomes.

Catalog operations that can be rejected (a duplicate insert, a delete of an
unknown song) return a Result instead of raising, so the caller always gets a
definite outcome and the catalog is never left half-updated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, overload

T = TypeVar('T')  # Success type
E = TypeVar('E', bound=Exception)  # Error type


class Result(ABC, Generic[T, E]):
    """Either a successful outcome carrying a value or a failed one carrying an error."""

    @abstractmethod
    def is_success(self) -> bool:
        ...

    @abstractmethod
    def is_failure(self) -> bool:
        ...

    @abstractmethod
    def value(self) -> T:
        """Get the success value.

        Raises:
            ValueError: If the result is a failure.
        """
        ...

    @abstractmethod
    def error(self) -> E:
        """Get the error.

        Raises:
            ValueError: If the result is a success.
        """
        ...

    @overload
    def match(self, *, success: Callable[[T], Any]) -> Any: ...

    @overload
    def match(self, *, failure: Callable[[E], Any]) -> Any: ...

    @overload
    def match(self, *, success: Callable[[T], Any], failure: Callable[[E], Any]) -> Any: ...

    def match(self, *, success: Callable[[T], Any] | None = None,
              failure: Callable[[E], Any] | None = None) -> Any:
        """Dispatch on the outcome; the branch that is not given yields None."""
        if self.is_success() and success:
            return success(self.value())
        elif self.is_failure() and failure:
            return failure(self.error())
        return None


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def value(self) -> T:
        return self._value

    def error(self) -> E:
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def value(self) -> T:
        raise ValueError(f"Cannot get value from Failure result: {self._error}")

    def error(self) -> E:
        return self._error


def success(value: T) -> Result[T, Any]:
    """Create a Success result."""
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    """Create a Failure result."""
    return Failure(error)


class DomainError(Exception):
    """Base class for catalog errors."""
    pass


class ValidationError(DomainError):
    """Raised when a song field is not a non-empty string."""
    pass


class NotFoundError(DomainError):
    """Raised when a resource is not found."""
    pass


class SongNotFoundError(NotFoundError):
    """No song with the requested name is in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"The song name '{name}' was not found in the music library.")
        self.name = name


class DuplicateError(DomainError):
    """Raised when a duplicate is detected."""
    pass


class DuplicateNameError(DuplicateError):
    """A song with the same name is already in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(f"A song with the name '{name}' is already in the music library.")
        self.name = name
