"""
TASKNOTE - Date/Time Conversion
===============================
Turns the free text typed after /by, /from, /to and /on into a datetime.
"""

from datetime import datetime
from typing import List

INPUT_FORMATS: List[str] = [
    "%Y-%m-%d %H%M",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%d/%m/%Y %H%M",
    "%d/%m/%Y",
]

DISPLAY_FORMAT = "%b %d %Y %H:%M"  # e.g. Jan 02 2024 09:00


class DateTimeParseError(ValueError):
    """Text does not match any accepted datetime format"""

    def __init__(self, text: str):
        super().__init__(
            f"'{text}' does not match any of: YYYY-MM-DD HHMM, YYYY-MM-DD HH:MM, "
            f"YYYY-MM-DD, DD/MM/YYYY HHMM, DD/MM/YYYY"
        )
        self.text = text


def parse_datetime(text: str) -> datetime:
    """Parse user text into a datetime; date-only input means midnight"""
    cleaned = " ".join(text.split())
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    raise DateTimeParseError(text)


def format_datetime(value: datetime) -> str:
    return value.strftime(DISPLAY_FORMAT)
