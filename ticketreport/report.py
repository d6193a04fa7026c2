"""Plain-text and HTML rendering of a :class:`RouteReport`."""
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import Settings, settings as default_settings
from .models import RouteReport

TEMPLATES_DIR = Path(__file__).resolve().parent / 'templates'


def format_duration(total_minutes: int) -> str:
    """Render minutes as ``"12h 05m"``."""
    sign = '-' if total_minutes < 0 else ''
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours}h {minutes:02d}m"


def format_money(value: float) -> str:
    return f"{value:.2f}"


def _environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(['html', 'xml', 'html.j2']),
        keep_trailing_newline=True,
    )
    env.filters['duration'] = format_duration
    env.filters['money'] = format_money
    return env


def render_no_tickets(config: Settings | None = None) -> str:
    config = config or default_settings
    return f"Нет билетов {config.route_label()} в файле.\n"


def render_text(report: RouteReport, config: Settings | None = None) -> str:
    config = config or default_settings
    tpl = _environment().get_template('route_report.txt.j2')
    return tpl.render(report=report, route=f"{report.origin_name} → {report.destination_name}",
                      currency=config.currency_label)


def render_html(report: RouteReport, config: Settings | None = None) -> str:
    config = config or default_settings
    tpl = _environment().get_template('route_report.html.j2')
    rendered = tpl.render(report=report, route=f"{report.origin_name} → {report.destination_name}",
                          currency=config.currency_label)
    soup = BeautifulSoup(rendered, 'lxml')
    return soup.prettify()
