from __future__ import annotations

from datetime import date, datetime

from ..core.constants import DATE_FORMAT

_SHORT_MONTHS_ES = ("Ene", "Feb", "Mar", "Abr", "May", "Jun", "Jul", "Ago", "Sept", "Oct", "Nov", "Dic")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def is_iso_date(value) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parse_iso_date(value)
    except ValueError:
        return False
    return True


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def today_iso() -> str:
    return today_local().strftime(DATE_FORMAT)


def format_short_date(value: str) -> str:
    """Render `2024-01-10` as `Ene 10` for report cells."""
    if not value:
        return ""
    d = parse_iso_date(value)
    return f"{_SHORT_MONTHS_ES[d.month - 1]} {d.day}"


def calculate_current_week(start_date: str, total_weeks: int, *, today: date | None = None) -> int:
    """Academic week the term is in, clamped to `total_weeks`.

    Returns 0 before the term starts. Days 0-6 of the term are week 1,
    days 7-13 week 2, and so on.
    """
    if not start_date:
        return 0
    today = today or today_local()
    diff_days = (today - parse_iso_date(start_date)).days
    if diff_days < 0:
        return 0
    return min(diff_days // 7 + 1, int(total_weeks))
