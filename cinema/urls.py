from django.urls import path

from cinema.handlers import TicketPurchaseView

urlpatterns = [
    path("purchases", TicketPurchaseView.as_view(), name="ticket-purchase"),
]
