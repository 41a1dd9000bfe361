"""Serializers for purchase requests and confirmations.

Request serializers check shape only. Ticket type names and every
business rule are left to the purchase service.
"""

from rest_framework import serializers


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that only accepts JSON integers.

    Strings, floats and booleans are rejected rather than coerced.
    """

    def to_internal_value(self, data):
        if type(data) is not int:
            self.fail("invalid")
        return super().to_internal_value(data)


class TicketTypeRequestSerializer(serializers.Serializer):
    """Serializer for one {type, count} pair."""

    type = serializers.CharField(trim_whitespace=False)
    count = StrictIntegerField(min_value=0)


class PurchaseRequestSerializer(serializers.Serializer):
    """Serializer for POST /api/purchases bodies."""

    account_id = StrictIntegerField()
    ticket_type_requests = TicketTypeRequestSerializer(many=True, allow_empty=False)


class PurchaseConfirmationSerializer(serializers.Serializer):
    """Serializer for PurchaseConfirmation domain model."""

    account_id = serializers.IntegerField(source="account_id.value")
    total_amount = serializers.IntegerField(source="total_amount.amount")
    seats_reserved = serializers.IntegerField()
    message = serializers.CharField()
