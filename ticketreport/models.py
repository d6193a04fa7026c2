from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ticket:
    """Single airline ticket as read from the input JSON.

    origin / destination keep IATA codes; *_name keep human-readable city names.
    Dates and times are kept as raw strings local to the respective airport's zone
    (``d.M.yy`` and ``H:mm``); they are parsed only when a duration is computed.
    """
    origin: str | None
    origin_name: str | None
    destination: str | None
    destination_name: str | None
    departure_date: str | None
    departure_time: str | None
    arrival_date: str | None
    arrival_time: str | None
    carrier: str | None
    price: int
    stops: int = 0


@dataclass(frozen=True, slots=True)
class PriceStats:
    """Mean / median of ticket prices; difference = mean - median (skew signal)."""
    mean: float
    median: float
    difference: float
    count: int


@dataclass(frozen=True, slots=True)
class RouteReport:
    """Aggregated numbers for a single origin -> destination route.

    min_durations maps carrier code to the shortest flight in minutes, ordered by carrier code.
    """
    origin_name: str
    destination_name: str
    min_durations: dict[str, int]
    prices: PriceStats
    ticket_count: int
