from datetime import date, datetime


def parse_day(value: str) -> date:
    """Parse a calendar day.

    Accepts common formats:
      - 'YYYY-MM-DD'
      - 'DD Mon YYYY' (e.g. '03 Nov 2022')
      - 'MM/DD/YYYY'
    """
    s = (value or "").strip()
    candidates = [
        "%Y-%m-%d",
        "%d %b %Y",
        "%m/%d/%Y",
    ]
    for fmt in candidates:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise ValueError("Date must be in formats like '2022-11-03' or '03 Nov 2022'")


_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_day(d: date) -> str:
    """Format a date as 'DD Mon YYYY' regardless of locale. Example: 2022-11-03 -> '03 Nov 2022'"""
    return f"{d.day:02d} {_MONTHS[d.month - 1]} {d.year}"


def speed_mph(minutes: int, distance_mi: float) -> float:
    """Average speed for a distance covered in `minutes`."""
    if minutes <= 0:
        return 0.0
    return distance_mi / minutes * 60.0


def pace_min_per_mile(minutes: int, distance_mi: float) -> float:
    """Minutes per mile. Example: 30 min over 3.0 mi -> 10.0"""
    if distance_mi <= 0:
        return 0.0
    return minutes / distance_mi
