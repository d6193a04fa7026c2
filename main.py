"""
Script entry point, equivalent to the ``ticket-report`` console script.
"""

from ticketreport.pipeline import main_cli


if __name__ == '__main__':
    raise SystemExit(main_cli())
