"""Pytest configuration and shared fixtures."""

import sys

import pytest
from rest_framework.test import APIClient

from cinema.gateways.interfaces import SeatReservationGateway, TicketPaymentGateway
from cinema.services import TicketPurchaseService


class RecordingPaymentGateway(TicketPaymentGateway):
    """Payment gateway that remembers every charge."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def make_payment(self, account_id: int, total_amount: int) -> None:
        self.calls.append((account_id, total_amount))


class RecordingSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that remembers every reservation."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        self.calls.append((account_id, seat_count))


class RecordingGateways:
    """Recorders that the settings-configured gateways forward to."""

    def __init__(self) -> None:
        self.payment = RecordingPaymentGateway()
        self.reservation = RecordingSeatReservationGateway()


# Set per test by the recording_gateways fixture.
active_recorders: RecordingGateways | None = None


class SharedPaymentGateway(TicketPaymentGateway):
    def make_payment(self, account_id: int, total_amount: int) -> None:
        active_recorders.payment.make_payment(account_id, total_amount)


class SharedSeatReservationGateway(SeatReservationGateway):
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        active_recorders.reservation.reserve_seat(account_id, seat_count)


@pytest.fixture
def payment_gateway() -> RecordingPaymentGateway:
    return RecordingPaymentGateway()


@pytest.fixture
def reservation_gateway() -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway()


@pytest.fixture
def service(payment_gateway, reservation_gateway) -> TicketPurchaseService:
    return TicketPurchaseService(payment_gateway, reservation_gateway)


@pytest.fixture
def recording_gateways(settings, monkeypatch) -> RecordingGateways:
    """Point the configured gateways at fresh recorders and return them."""
    recorders = RecordingGateways()
    monkeypatch.setattr(sys.modules[__name__], "active_recorders", recorders)
    settings.CINEMA_PAYMENT_GATEWAY = "tests.conftest.SharedPaymentGateway"
    settings.CINEMA_SEAT_RESERVATION_GATEWAY = "tests.conftest.SharedSeatReservationGateway"
    return recorders


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()
