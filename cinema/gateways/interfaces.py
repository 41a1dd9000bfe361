"""Gateway interfaces for the third-party services a purchase depends on.

Gateways must be swappable. They return nothing the purchase flow reads
and signal failure by raising.
"""

from abc import ABC, abstractmethod


class TicketPaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def make_payment(self, account_id: int, total_amount: int) -> None:
        """Charge total_amount to the account."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats against an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve seat_count seats for the account."""
        ...
