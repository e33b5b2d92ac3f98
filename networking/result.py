"""
Result Types

Tagged success/failure values returned by every RemoteApi operation.
A result is exactly one of the two, so "no value and no error" cannot exist.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from networking.errors import ApiError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """
    Successful operation.

    Attributes:
        value: Decoded result (None for operations with no payload)
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    Failed operation.

    Attributes:
        error: What went wrong
    """

    error: ApiError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return str(self.error)


Result = Union[Success[T], Failure]
