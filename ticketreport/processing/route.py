import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from tqdm import tqdm

from .base import BaseTicketProcessor
from ..config import Settings, settings as default_settings
from ..models import RouteReport, Ticket

MISSING_CARRIER = "N/A"


class RouteProcessor(BaseTicketProcessor):
    """Minimum flight time per carrier and price statistics for one origin -> destination route.

    Departure is local to the origin zone, arrival local to the destination zone; both are
    converted to instants before subtracting, so differing UTC offsets and DST rules on either
    side are accounted for.
    """

    def __init__(self, config: Settings | None = None):
        self.config = config or default_settings
        self.origin_zone = ZoneInfo(self.config.origin_tz)
        self.destination_zone = ZoneInfo(self.config.destination_tz)

    # ---------------- core steps -----------------
    def select_route(self, tickets: list[Ticket]) -> list[Ticket]:
        selected = self.filter_by_route(tickets, self.config.origin_name, self.config.destination_name)
        logging.info(f"{len(selected)} of {len(tickets)} tickets match {self.config.route_label()}")
        return selected

    def flight_minutes(self, ticket: Ticket) -> int:
        departure = self.parse_local_datetime(ticket.departure_date, ticket.departure_time, 'departure')
        arrival = self.parse_local_datetime(ticket.arrival_date, ticket.arrival_time, 'arrival')
        # fold=0: ambiguous wall time takes the earlier offset, a skipped one is pushed past the gap.
        # Convert to UTC: aware datetimes sharing one tzinfo subtract as plain wall clocks.
        dep_instant = departure.replace(tzinfo=self.origin_zone).astimezone(timezone.utc)
        arr_instant = arrival.replace(tzinfo=self.destination_zone).astimezone(timezone.utc)
        minutes = int((arr_instant - dep_instant).total_seconds()) // 60
        if minutes <= 0:
            logging.warning("Non-positive flight duration %d min for %s", minutes, ticket)
        return minutes

    def min_duration_by_carrier(self, tickets: list[Ticket]) -> dict[str, int]:
        pairs = (
            (t.carrier or MISSING_CARRIER, self.flight_minutes(t))
            for t in tqdm(tickets, desc='Computing flight durations', leave=False, disable=None)
        )
        return self.min_by_key(pairs)

    # ---------------- public API -----------------
    def process_tickets(self, tickets: list[Ticket]) -> RouteReport | None:
        """Return the route report or None when no ticket matches the route."""
        selected = self.select_route(tickets)
        if not selected:
            return None
        return RouteReport(
            origin_name=self.config.origin_name,
            destination_name=self.config.destination_name,
            min_durations=self.min_duration_by_carrier(selected),
            prices=self.price_stats(t.price for t in selected),
            ticket_count=len(selected),
        )
