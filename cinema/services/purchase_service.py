"""Ticket purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration
- Return domain models or raise domain errors

The rules run in a fixed order and only the first violation is reported:
at least one adult, no more infants than adults, at most 20 tickets.
"""

import logging
from collections.abc import Iterable, Mapping

from django.conf import settings
from django.utils.module_loading import import_string

from cinema.domain.errors import (
    InvalidTicketRequestsError,
    NoAdultTicketError,
    TooManyInfantsError,
    TooManyTicketsError,
)
from cinema.domain.models import (
    MAX_TICKETS_PER_PURCHASE,
    PRICE_TABLE,
    PurchaseConfirmation,
    PurchaseOrder,
    PurchaseQuote,
    TicketTally,
)
from cinema.domain.value_objects import AccountId, Money, TicketTypeRequest
from cinema.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway

logger = logging.getLogger(__name__)

DEFAULT_PAYMENT_GATEWAY = "cinema.gateways.logging_gateways.LoggingTicketPaymentGateway"
DEFAULT_SEAT_RESERVATION_GATEWAY = (
    "cinema.gateways.logging_gateways.LoggingSeatReservationGateway"
)

# "noOfTickets" is accepted as an alias of "count".
_COUNT_KEYS = ("count", "noOfTickets")


def _to_ticket_request(item: object) -> TicketTypeRequest:
    if isinstance(item, TicketTypeRequest):
        return item
    if not isinstance(item, Mapping):
        raise InvalidTicketRequestsError(
            "Each ticket request must have a type and a count"
        )
    if "type" not in item:
        raise InvalidTicketRequestsError("Ticket request is missing its type")
    for key in _COUNT_KEYS:
        if key in item:
            return TicketTypeRequest(type=item["type"], count=item[key])
    raise InvalidTicketRequestsError("Ticket request is missing its count")


def build_order(account_id: object, ticket_type_requests: object) -> PurchaseOrder:
    """Turn raw caller input into a PurchaseOrder.

    Raises:
        ContractError: If the account id or any ticket request is malformed,
            or if no ticket requests were given.
    """
    account = AccountId(account_id)
    if isinstance(ticket_type_requests, (str, bytes, Mapping)) or not isinstance(
        ticket_type_requests, Iterable
    ):
        raise InvalidTicketRequestsError("Ticket requests must be a list")
    requests = tuple(_to_ticket_request(item) for item in ticket_type_requests)
    if not requests:
        raise InvalidTicketRequestsError("At least one ticket request is required")
    return PurchaseOrder(account_id=account, ticket_requests=requests)


def quote_order(order: PurchaseOrder) -> PurchaseQuote:
    """Validate an order and work out its charge and seat count.

    Pure: no collaborators are called and nothing is kept between calls.

    Raises:
        NoAdultTicketError: If the order has no adult ticket.
        TooManyInfantsError: If infants outnumber adults.
        TooManyTicketsError: If more than 20 tickets are requested.
    """
    tally = TicketTally.from_requests(order.ticket_requests)

    if tally.adults < 1:
        raise NoAdultTicketError()
    if tally.infants > tally.adults:
        raise TooManyInfantsError(infants=tally.infants, adults=tally.adults)
    if tally.total_tickets > MAX_TICKETS_PER_PURCHASE:
        raise TooManyTicketsError(
            total=tally.total_tickets, limit=MAX_TICKETS_PER_PURCHASE
        )

    total = Money(0)
    for ticket_type, price in PRICE_TABLE.items():
        total = total + price * tally.count_for(ticket_type)
    return PurchaseQuote(account_id=order.account_id, tally=tally, total_amount=total)


class TicketPurchaseService:
    """Service for purchasing cinema tickets."""

    def __init__(
        self,
        payment_gateway: TicketPaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway

    def purchase_tickets(
        self, account_id: object, ticket_type_requests: object
    ) -> PurchaseConfirmation:
        """Validate a purchase, take payment, then reserve seats.

        Gateway errors propagate unchanged. Seats are only reserved once
        payment has succeeded. str() of the result is the success message.

        Raises:
            ContractError: If the input is malformed.
            InvalidPurchaseError: If the purchase breaks a business rule.
        """
        quote = quote_order(build_order(account_id, ticket_type_requests))
        account = quote.account_id.value

        self._payment_gateway.make_payment(account, quote.total_amount.amount)
        self._seat_reservation_gateway.reserve_seat(account, quote.seats)

        logger.info(
            "Purchase completed for account %s: %s ticket(s), amount %s, %s seat(s)",
            account,
            quote.tally.total_tickets,
            quote.total_amount,
            quote.seats,
        )
        return PurchaseConfirmation(
            account_id=quote.account_id,
            total_amount=quote.total_amount,
            seats_reserved=quote.seats,
        )


def get_purchase_service() -> TicketPurchaseService:
    """Build a TicketPurchaseService from the gateways named in settings."""
    payment_cls = import_string(
        getattr(settings, "CINEMA_PAYMENT_GATEWAY", DEFAULT_PAYMENT_GATEWAY)
    )
    reservation_cls = import_string(
        getattr(
            settings, "CINEMA_SEAT_RESERVATION_GATEWAY", DEFAULT_SEAT_RESERVATION_GATEWAY
        )
    )
    return TicketPurchaseService(
        payment_gateway=payment_cls(),
        seat_reservation_gateway=reservation_cls(),
    )
