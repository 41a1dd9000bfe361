from cinema.services.purchase_service import (
    TicketPurchaseService,
    build_order,
    get_purchase_service,
    quote_order,
)

__all__ = [
    "TicketPurchaseService",
    "build_order",
    "quote_order",
    "get_purchase_service",
]
