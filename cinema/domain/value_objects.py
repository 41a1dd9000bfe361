"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from cinema.domain.errors import (
    InvalidAccountIdError,
    InvalidTicketCountError,
    InvalidTicketTypeError,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class TicketType(Enum):
    """Closed set of ticket types."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def from_string(cls, value: object) -> Self:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidTicketTypeError(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidTicketTypeError(value) from None

    @property
    def occupies_seat(self) -> bool:
        return self is not TicketType.INFANT


@dataclass(frozen=True)
class AccountId:
    """Identifier of the account paying for a purchase."""

    value: int

    def __post_init__(self) -> None:
        if not _is_int(self.value) or self.value <= 0:
            raise InvalidAccountIdError(self.value)


@dataclass(frozen=True)
class Money:
    """Whole-unit price representation with validation."""

    amount: int

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def __mul__(self, quantity: int) -> "Money":
        return Money(self.amount * quantity)

    def __str__(self) -> str:
        return str(self.amount)


@dataclass(frozen=True)
class TicketTypeRequest:
    """A number of tickets requested for one ticket type."""

    type: TicketType
    count: int

    def __post_init__(self) -> None:
        if not isinstance(self.type, TicketType):
            # Accept the plain name and normalise it to the enum member.
            object.__setattr__(self, "type", TicketType.from_string(self.type))
        if not _is_int(self.count) or self.count < 0:
            raise InvalidTicketCountError(self.count)
