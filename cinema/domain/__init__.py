from cinema.domain.errors import (
    ContractError,
    DomainError,
    ErrorCode,
    InvalidPurchaseError,
)
from cinema.domain.models import (
    MAX_TICKETS_PER_PURCHASE,
    PRICE_TABLE,
    PurchaseConfirmation,
    PurchaseOrder,
    PurchaseQuote,
    TicketTally,
)
from cinema.domain.value_objects import AccountId, Money, TicketType, TicketTypeRequest

__all__ = [
    "AccountId",
    "Money",
    "TicketType",
    "TicketTypeRequest",
    "PurchaseOrder",
    "PurchaseQuote",
    "PurchaseConfirmation",
    "TicketTally",
    "PRICE_TABLE",
    "MAX_TICKETS_PER_PURCHASE",
    "DomainError",
    "ContractError",
    "InvalidPurchaseError",
    "ErrorCode",
]
