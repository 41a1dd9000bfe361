import logging

from django.core.management.base import BaseCommand, CommandError

from cinema.domain.errors import DomainError
from cinema.services import get_purchase_service

logger = logging.getLogger(__name__)


def parse_ticket_argument(value: str) -> dict:
    """Parse a TYPE=COUNT argument such as ADULT=2."""
    ticket_type, sep, count = value.partition("=")
    if not sep or not ticket_type or not count:
        raise CommandError(f"Expected TYPE=COUNT, got {value!r}")
    try:
        parsed_count = int(count)
    except ValueError:
        raise CommandError(f"Ticket count must be an integer, got {count!r}") from None
    return {"type": ticket_type.strip().upper(), "count": parsed_count}


class Command(BaseCommand):
    help = "Purchase cinema tickets for an account, e.g. purchase_tickets 1 ADULT=2 CHILD=1"

    def add_arguments(self, parser):
        parser.add_argument("account_id", type=int)
        parser.add_argument(
            "tickets",
            nargs="+",
            metavar="TYPE=COUNT",
            help="Ticket type (ADULT, CHILD, INFANT) and how many to buy",
        )

    def handle(self, *args, **options):
        requests = [parse_ticket_argument(value) for value in options["tickets"]]
        try:
            confirmation = get_purchase_service().purchase_tickets(
                options["account_id"], requests
            )
        except DomainError as e:
            logger.warning("Purchase from command line rejected: %s", e)
            raise CommandError(str(e)) from e

        self.stdout.write(self.style.SUCCESS(confirmation.message))
        self.stdout.write(
            f"Charged {confirmation.total_amount} for "
            f"{confirmation.seats_reserved} seat(s)"
        )
