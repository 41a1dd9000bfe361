"""Domain error codes for the cinema module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    INVALID_TICKET_COUNT = "INVALID_TICKET_COUNT"
    INVALID_TICKET_REQUESTS = "INVALID_TICKET_REQUESTS"
    NO_ADULT_TICKET = "NO_ADULT_TICKET"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ContractError(DomainError, TypeError):
    """Raised when input does not have the shape a purchase requires.

    This is a caller bug (wrong type, unknown ticket type, non-positive
    account id), never a business rule failure.
    """


class InvalidPurchaseError(DomainError):
    """Raised when a well-formed purchase breaks a business rule."""


class InvalidAccountIdError(ContractError):
    """Raised when an account ID is not a positive integer."""

    def __init__(self, account_id: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account ID must be a positive integer",
        )
        self.account_id = account_id


class InvalidTicketTypeError(ContractError):
    """Raised when a ticket type is not one of ADULT, CHILD, INFANT."""

    def __init__(self, ticket_type: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message=f"Invalid ticket type: {ticket_type!r}",
        )
        self.ticket_type = ticket_type


class InvalidTicketCountError(ContractError):
    """Raised when a ticket count is not a non-negative integer."""

    def __init__(self, count: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_COUNT,
            message="Ticket count must be a non-negative integer",
        )
        self.count = count


class InvalidTicketRequestsError(ContractError):
    """Raised when the ticket requests are missing, empty or malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_REQUESTS,
            message=reason,
        )


class NoAdultTicketError(InvalidPurchaseError):
    """Raised when a purchase contains no adult ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ADULT_TICKET,
            message="You have to purchase at least one adult ticket",
        )


class TooManyInfantsError(InvalidPurchaseError):
    """Raised when infants outnumber adults."""

    def __init__(self, infants: int, adults: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_INFANTS,
            message=(
                "Number of Infant tickets cannot be greater than "
                "the Number of Adult tickets."
            ),
        )
        self.infants = infants
        self.adults = adults


class TooManyTicketsError(InvalidPurchaseError):
    """Raised when a purchase exceeds the ticket cap."""

    def __init__(self, total: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TOO_MANY_TICKETS,
            message=f"Only a maximum of {limit} tickets can be purchased at a time",
        )
        self.total = total
        self.limit = limit
