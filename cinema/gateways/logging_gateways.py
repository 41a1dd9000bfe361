"""Default gateways that record requests in the log instead of calling out.

Used until real payment and seating providers are configured through
CINEMA_PAYMENT_GATEWAY and CINEMA_SEAT_RESERVATION_GATEWAY.
"""

import logging

from cinema.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

logger = logging.getLogger(__name__)


class LoggingTicketPaymentGateway(TicketPaymentGateway):
    """Payment gateway that only logs the charge."""

    def make_payment(self, account_id: int, total_amount: int) -> None:
        logger.info("Charging account %s amount %s", account_id, total_amount)


class LoggingSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that only logs the reservation."""

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        logger.info("Reserving %s seat(s) for account %s", seat_count, account_id)
