from cinema.handlers.views import TicketPurchaseView

__all__ = ["TicketPurchaseView"]
