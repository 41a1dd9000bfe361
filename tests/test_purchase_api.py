"""Integration tests for the purchase endpoint.

Run with: pytest tests/test_purchase_api.py -v
"""

import pytest
from rest_framework.test import APIClient

PURCHASE_URL = "/api/purchases"


def body(account_id=1, **counts):
    return {
        "account_id": account_id,
        "ticket_type_requests": [
            {"type": ticket_type, "count": count} for ticket_type, count in counts.items()
        ],
    }


class TestTicketPurchase:
    """Tests for POST /api/purchases"""

    def test_purchase_succeeds(self, api_client: APIClient, recording_gateways):
        """Given a valid order, charges, reserves and returns the confirmation."""
        response = api_client.post(
            PURCHASE_URL, body(ADULT=5, INFANT=1, CHILD=1), format="json"
        )

        assert response.status_code == 201
        assert response.json() == {
            "account_id": 1,
            "total_amount": 105,
            "seats_reserved": 6,
            "message": "Cinema tickets purchased and seats reservation is successful",
        }
        assert recording_gateways.payment.calls == [(1, 105)]
        assert recording_gateways.reservation.calls == [(1, 6)]

    @pytest.mark.parametrize(
        ("counts", "code"),
        [
            ({"ADULT": 5, "INFANT": 3, "CHILD": 18}, "TOO_MANY_TICKETS"),
            ({"ADULT": 5, "INFANT": 7, "CHILD": 1}, "TOO_MANY_INFANTS"),
            ({"INFANT": 7, "CHILD": 1}, "NO_ADULT_TICKET"),
        ],
    )
    def test_business_rule_violation_returns_422(
        self, api_client: APIClient, recording_gateways, counts, code
    ):
        response = api_client.post(PURCHASE_URL, body(**counts), format="json")

        assert response.status_code == 422
        assert response.json()["code"] == code
        assert recording_gateways.payment.calls == []
        assert recording_gateways.reservation.calls == []

    def test_unknown_ticket_type_returns_400(
        self, api_client: APIClient, recording_gateways
    ):
        response = api_client.post(
            PURCHASE_URL, body(ADUL=7, INFANT=7, CHILD=1), format="json"
        )

        assert response.status_code == 400
        assert response.json() == {
            "code": "INVALID_TICKET_TYPE",
            "message": "Invalid ticket type: 'ADUL'",
        }
        assert recording_gateways.payment.calls == []

    @pytest.mark.parametrize("account_id", [0, -3])
    def test_non_positive_account_returns_400(
        self, api_client: APIClient, recording_gateways, account_id
    ):
        response = api_client.post(
            PURCHASE_URL, body(account_id=account_id, ADULT=1), format="json"
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ACCOUNT_ID"

    @pytest.mark.parametrize(
        "payload",
        [
            {"account_id": "abc", "ticket_type_requests": [{"type": "ADULT", "count": 1}]},
            {"account_id": 1, "ticket_type_requests": []},
            {"account_id": 1, "ticket_type_requests": [{"type": "ADULT", "count": -1}]},
            {"account_id": 1, "ticket_type_requests": [{"type": "ADULT"}]},
            {"ticket_type_requests": [{"type": "ADULT", "count": 1}]},
            {"account_id": "1", "ticket_type_requests": [{"type": "ADULT", "count": 1}]},
            {"account_id": "1.0", "ticket_type_requests": [{"type": "ADULT", "count": 1}]},
            {"account_id": 1.0, "ticket_type_requests": [{"type": "ADULT", "count": 1}]},
            {"account_id": True, "ticket_type_requests": [{"type": "ADULT", "count": 1}]},
            {"account_id": 1, "ticket_type_requests": [{"type": "ADULT", "count": "2"}]},
            {"account_id": 1, "ticket_type_requests": [{"type": "ADULT", "count": 2.0}]},
            {"account_id": 1, "ticket_type_requests": [{"type": "ADULT", "count": False}]},
        ],
    )
    def test_malformed_body_returns_400(
        self, api_client: APIClient, recording_gateways, payload
    ):
        response = api_client.post(PURCHASE_URL, payload, format="json")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"
        assert recording_gateways.payment.calls == []

    def test_get_not_allowed(self, api_client: APIClient):
        assert api_client.get(PURCHASE_URL).status_code == 405

    def test_padded_ticket_type_is_not_trimmed(
        self, api_client: APIClient, recording_gateways
    ):
        """Whitespace around a type name is rejected the same way the service rejects it."""
        response = api_client.post(
            PURCHASE_URL,
            {"account_id": 1, "ticket_type_requests": [{"type": " ADULT ", "count": 1}]},
            format="json",
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TICKET_TYPE"
        assert recording_gateways.payment.calls == []
