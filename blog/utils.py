import datetime
import math

EXCERPT_DISPLAY_LIMIT = 150
MONTHS = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)


def calculate_reading_time(text: str) -> int:
    words = text.split()
    return math.ceil(len(words) / 200) or 1


def format_display_date(value: str | None) -> str:
    """Format an ISO date as ``JAN 1, 2024``; unparseable values pass through."""
    if not value:
        return ""
    try:
        parsed = datetime.date.fromisoformat(value[:10])
    except ValueError:
        return value
    return f"{MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def truncate_excerpt(excerpt: str | None, limit: int = EXCERPT_DISPLAY_LIMIT) -> str:
    if not excerpt:
        return ""
    if len(excerpt) > limit:
        return f"{excerpt[:limit]}..."
    return excerpt
