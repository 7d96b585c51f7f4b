# app/utils/parsing.py
import math
import re
from datetime import date, time, datetime

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# strptime accepts single-digit fields; the wire formats are zero-padded
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)

def parse_amount(text: str | None) -> float | None:
    """Parse a textual money amount. Returns None when it isn't a finite number."""
    if text is None:
        return None
    try:
        value = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value

def parse_date(text: str | None) -> date | None:
    if not text or not DATE_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None

def parse_time(text: str | None) -> time | None:
    if not text or not TIME_RE.fullmatch(text):
        return None
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except ValueError:
        return None
