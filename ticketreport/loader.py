"""Ticket loader: JSON file -> list of :class:`Ticket`.

The input is tolerant in the same places a hand-edited ``tickets.json`` tends to be sloppy:
text fields may be missing or null, ``stops`` defaults to 0 and a non-object root or a
missing ``tickets`` array simply yields no tickets. ``price`` is the one required field.
"""
import json
import logging
import math
from pathlib import Path
from typing import Any

import dacite

from .models import Ticket

TEXT_FIELDS = (
    'origin', 'origin_name', 'destination', 'destination_name',
    'departure_date', 'departure_time', 'arrival_date', 'arrival_time', 'carrier',
)


def _optional_text(raw: dict[str, Any], field: str) -> str | None:
    value = raw.get(field)
    return None if value is None else str(value)


def _float_to_int(value: float) -> int:
    if not math.isfinite(value):
        raise ValueError(f"Number {value} is not finite")
    return int(value)


def _convert_price_to_int(price: str | int | float) -> int:
    if isinstance(price, bool):
        raise ValueError(f'Wrong price type {type(price)}')
    if isinstance(price, int):
        return price
    if isinstance(price, float):
        return _float_to_int(price)
    if isinstance(price, str):
        text = price.strip()
        try:
            return int(text)
        except ValueError:
            return _float_to_int(float(text))
    raise ValueError(f'Wrong price type {type(price)}')


def _convert_stops(stops: Any) -> int:
    """Stops are informational only, anything non-numeric counts as 0."""
    if stops is None:
        return 0
    try:
        return _convert_price_to_int(stops)
    except ValueError:
        logging.debug("Non-numeric stops %r treated as 0", stops)
        return 0


def parse_ticket(raw: dict[str, Any]) -> Ticket:
    data: dict[str, Any] = {field: _optional_text(raw, field) for field in TEXT_FIELDS}
    data['stops'] = _convert_stops(raw.get('stops'))
    if raw.get('price') is not None:
        data['price'] = _convert_price_to_int(raw['price'])
    return dacite.from_dict(data_class=Ticket, data=data)


def parse_tickets(document: Any) -> list[Ticket]:
    if not isinstance(document, dict):
        logging.warning("Tickets document root is %s, not an object; no tickets loaded", type(document).__name__)
        return []
    raw_tickets = document.get('tickets')
    if not isinstance(raw_tickets, list):
        logging.warning("No 'tickets' array in document")
        return []

    tickets = []
    for idx, raw in enumerate(raw_tickets):
        if not isinstance(raw, dict):
            raise ValueError(f"Ticket #{idx} is not an object: {raw!r}")
        try:
            tickets.append(parse_ticket(raw))
        except (dacite.DaciteError, ValueError) as e:
            raise ValueError(f"Ticket #{idx} is invalid: {e}") from e
    return tickets


def load_tickets(path: Path | str) -> list[Ticket]:
    path = Path(path)
    # utf-8-sig: exported tickets.json files often start with a BOM
    with open(path, 'rt', encoding='utf-8-sig') as f:
        document = json.load(f)
    tickets = parse_tickets(document)
    logging.info("Loaded %d tickets from %s", len(tickets), path)
    return tickets
