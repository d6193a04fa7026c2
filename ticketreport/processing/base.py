import logging
import re
import statistics
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from typing import Iterable

from ..models import PriceStats, Ticket

DATE_FORMAT = "%d.%m.%y"  # d.M.yy, two-digit year in 2000-2099
TIME_FORMAT = "%H:%M"  # H:mm
# strptime is lenient about digit counts ("22:5", "1.1.9"); the patterns are not
_DATE_PATTERN = re.compile(r"\d{1,2}\.\d{1,2}\.\d{2}")
_TIME_PATTERN = re.compile(r"\d{1,2}:\d{2}")
_WHITESPACE = re.compile(r"\s+")


class BaseTicketProcessor(ABC):
    """Common helpers for concrete ticket processors."""

    # ---------------- Parsing helpers -----------------
    @staticmethod
    def _strip_whitespace(value: str | None, field: str) -> str:
        if value is None:
            raise ValueError(f"Missing {field}")
        return _WHITESPACE.sub("", value)

    @staticmethod
    def _parse_date(date_str: str) -> date:
        if not _DATE_PATTERN.fullmatch(date_str):
            raise ValueError(f"Date string '{date_str}' does not match d.M.yy")
        parsed = datetime.strptime(date_str, DATE_FORMAT).date()
        # strptime maps %y 69-99 to the 1900s
        return parsed.replace(year=2000 + parsed.year % 100)

    @staticmethod
    def _parse_time(time_str: str) -> time:
        if not _TIME_PATTERN.fullmatch(time_str):
            raise ValueError(f"Time string '{time_str}' does not match H:mm")
        return datetime.strptime(time_str, TIME_FORMAT).time()

    def parse_local_datetime(self, date_str: str | None, time_str: str | None, field: str) -> datetime:
        d = self._parse_date(self._strip_whitespace(date_str, f"{field}_date"))
        t = self._parse_time(self._strip_whitespace(time_str, f"{field}_time"))
        return datetime.combine(d, t)

    # ---------------- Filtering / grouping -----------------
    @staticmethod
    def _normalize_name(name: str | None) -> str:
        return (name or "").strip().casefold()

    def filter_by_route(self, tickets: Iterable[Ticket], origin_name: str, destination_name: str) -> list[Ticket]:
        origin = self._normalize_name(origin_name)
        destination = self._normalize_name(destination_name)
        return [
            t for t in tickets
            if self._normalize_name(t.origin_name) == origin
            and self._normalize_name(t.destination_name) == destination
        ]

    @staticmethod
    def min_by_key(pairs: Iterable[tuple[str, int]]) -> dict[str, int]:
        """Fold (key, value) pairs keeping the smallest value per key; result is sorted by key."""
        minimums: dict[str, int] = {}
        for key, value in pairs:
            current = minimums.get(key)
            if current is None or value < current:
                minimums[key] = value
        return dict(sorted(minimums.items()))

    @staticmethod
    def price_stats(prices: Iterable[int]) -> PriceStats:
        ordered = sorted(prices)
        if not ordered:
            raise ValueError("Cannot compute price statistics without prices")
        mean = statistics.fmean(ordered)
        median = float(statistics.median(ordered))
        logging.debug("Prices %s -> mean %.2f, median %.2f", ordered, mean, median)
        return PriceStats(mean=mean, median=median, difference=mean - median, count=len(ordered))

    @abstractmethod
    def process_tickets(self, tickets: list[Ticket]):  # pragma: no cover
        raise NotImplementedError
