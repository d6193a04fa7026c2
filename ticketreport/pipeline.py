"""High-level orchestration: load tickets, build the route report and print it.

Usage patterns:

1. Print the report for a tickets file:
   ticket-report tickets.json

2. Additionally save an HTML version of the report:
   ticket-report tickets.json --html report.html
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from ticketreport.config import settings
from ticketreport.loader import load_tickets
from ticketreport.logging_config import LOG_LEVELS, resolve_level, setup_logging
from ticketreport.processing.route import RouteProcessor
from ticketreport.report import render_html, render_no_tickets, render_text


def run_pipeline(tickets_path: Path, html_path: Path | None = None, out: TextIO | None = None) -> str:
    """Load -> filter -> compute -> aggregate -> report. Returns the text written to ``out``."""
    out = out or sys.stdout
    tickets = load_tickets(tickets_path)

    processor = RouteProcessor(settings)
    logging.info(f"Processing {len(tickets)} tickets for {settings.route_label()}")
    report = processor.process_tickets(tickets)

    if report is None:
        text = render_no_tickets(settings)
    else:
        text = render_text(report, settings)
        if html_path is not None:
            html_path.write_text(render_html(report, settings), encoding="utf-8")
            logging.info(f"HTML report written to {html_path}")
    out.write(text)
    return text


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ticket-report",
        description=f"Minimum flight time per carrier and price statistics for {settings.route_label()}",
    )
    p.add_argument("tickets", type=Path, help="Path to tickets.json")
    p.add_argument("--html", type=Path, default=None, help="Also write the report as HTML to this file")
    p.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=settings.log_level,
                   help="Log level (LOG_LEVEL env var sets the default)")
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if not args.tickets.exists():
        parser.error(f"File not found: {args.tickets}")
    # argparse does not check a default taken from LOG_LEVEL against choices
    try:
        resolve_level(args.log_level)
    except ValueError as e:
        parser.error(str(e))

    setup_logging(args.log_level)

    try:
        run_pipeline(args.tickets, html_path=args.html)
    except Exception:  # noqa: BLE001
        logging.exception("Pipeline failed")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
