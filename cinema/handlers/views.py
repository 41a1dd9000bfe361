"""HTTP handler for ticket purchases.

The view checks the body shape, hands the order to the purchase service
and turns domain errors into responses: malformed input is a 400, a broken
business rule is a 422. Gateway failures are left to Django.
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from cinema.domain.errors import ContractError, DomainError, InvalidPurchaseError
from cinema.handlers.serializers import (
    PurchaseConfirmationSerializer,
    PurchaseRequestSerializer,
)
from cinema.services import get_purchase_service

logger = logging.getLogger(__name__)


def _error_response(error: DomainError, status_code: int) -> Response:
    return Response(
        {"code": error.code.value, "message": error.message},
        status=status_code,
    )


class TicketPurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {"code": "INVALID_REQUEST", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        data = serializer.validated_data

        try:
            confirmation = get_purchase_service().purchase_tickets(
                data["account_id"],
                [dict(item) for item in data["ticket_type_requests"]],
            )
        except ContractError as e:
            logger.warning("Malformed purchase request: %s", e)
            return _error_response(e, status.HTTP_400_BAD_REQUEST)
        except InvalidPurchaseError as e:
            logger.warning("Purchase rejected: %s", e)
            return _error_response(e, status.HTTP_422_UNPROCESSABLE_ENTITY)

        return Response(
            PurchaseConfirmationSerializer(confirmation).data,
            status=status.HTTP_201_CREATED,
        )
