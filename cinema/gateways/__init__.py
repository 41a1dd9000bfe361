from cinema.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway
from cinema.gateways.logging_gateways import (
    LoggingSeatReservationGateway,
    LoggingTicketPaymentGateway,
)

__all__ = [
    "TicketPaymentGateway",
    "SeatReservationGateway",
    "LoggingTicketPaymentGateway",
    "LoggingSeatReservationGateway",
]
