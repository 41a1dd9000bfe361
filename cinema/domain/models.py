"""Domain models for a single purchase.

These are pure, request-scoped objects. Nothing here is persisted.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Self

from cinema.domain.value_objects import AccountId, Money, TicketType, TicketTypeRequest

PRICE_TABLE: Mapping[TicketType, Money] = MappingProxyType(
    {
        TicketType.ADULT: Money(20),
        TicketType.CHILD: Money(5),
        TicketType.INFANT: Money(0),
    }
)

MAX_TICKETS_PER_PURCHASE = 20

PURCHASE_SUCCESS_MESSAGE = "Cinema tickets purchased and seats reservation is successful"


@dataclass(frozen=True)
class PurchaseOrder:
    """An account and the ticket requests it wants to buy, in order."""

    account_id: AccountId
    ticket_requests: tuple[TicketTypeRequest, ...]


@dataclass(frozen=True)
class TicketTally:
    """Ticket counts aggregated per type."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @classmethod
    def from_requests(cls, requests: tuple[TicketTypeRequest, ...]) -> Self:
        """Sum counts per type. Repeated types accumulate."""
        counts = dict.fromkeys(TicketType, 0)
        for request in requests:
            counts[request.type] += request.count
        return cls(
            adults=counts[TicketType.ADULT],
            children=counts[TicketType.CHILD],
            infants=counts[TicketType.INFANT],
        )

    def count_for(self, ticket_type: TicketType) -> int:
        return {
            TicketType.ADULT: self.adults,
            TicketType.CHILD: self.children,
            TicketType.INFANT: self.infants,
        }[ticket_type]

    @property
    def total_tickets(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def seats(self) -> int:
        return sum(self.count_for(t) for t in TicketType if t.occupies_seat)


@dataclass(frozen=True)
class PurchaseQuote:
    """Outcome of validating an order: what to charge and how many seats."""

    account_id: AccountId
    tally: TicketTally
    total_amount: Money

    @property
    def seats(self) -> int:
        return self.tally.seats


@dataclass(frozen=True)
class PurchaseConfirmation:
    """Returned once payment and seat reservation have both gone through."""

    account_id: AccountId
    total_amount: Money
    seats_reserved: int
    message: str = PURCHASE_SUCCESS_MESSAGE

    def __str__(self) -> str:
        return self.message
