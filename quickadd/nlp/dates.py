from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from dateparser.search import search_dates
from dateutil.relativedelta import relativedelta

from ..models import Weekday

logger = logging.getLogger(__name__)

_DIGIT_RE = re.compile(r"\d")

# (text, now) -> detected moment or None
DateDetector = Callable[[str, datetime], "datetime | None"]

WEEKDAY_NAMES = [day.value for day in Weekday]

# Scanned unconditionally during title cleanup once any due date exists.
DATE_KEYWORDS = [
    "day after tomorrow",
    "this weekend",
    "next week",
    "next month",
    "today",
    "tomorrow",
    *WEEKDAY_NAMES,
]


@dataclass(frozen=True)
class Calendar:
    start_of_week: Weekday = Weekday.sunday

    def start_of_day(self, moment: datetime) -> datetime:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)

    def weekday_of(self, moment: datetime) -> Weekday:
        return Weekday.from_python(moment.weekday())


def _this_weekend(today: datetime, calendar: Calendar) -> datetime:
    days = (Weekday.saturday.number - calendar.weekday_of(today).number) % 7
    return today + timedelta(days=days or 7)


# First hit wins. "day after tomorrow" must be tried before "tomorrow".
_PHRASES: list[tuple[str, Callable[[datetime, Calendar], datetime]]] = [
    ("today", lambda today, cal: today),
    ("day after tomorrow", lambda today, cal: today + timedelta(days=2)),
    ("tomorrow", lambda today, cal: today + timedelta(days=1)),
    ("next week", lambda today, cal: today + timedelta(weeks=1)),
    ("next month", lambda today, cal: today + relativedelta(months=1)),
    ("this weekend", _this_weekend),
]


def _match_phrase(lower: str, today: datetime, calendar: Calendar) -> datetime | None:
    for phrase, resolve in _PHRASES:
        if phrase in lower:
            logger.debug("date phrase %r matched", phrase)
            return resolve(today, calendar)
    return None


def _match_weekday(lower: str, today: datetime, calendar: Calendar) -> datetime | None:
    """Resolve a named weekday to its next occurrence, never today."""
    current = calendar.weekday_of(today).number
    for day in Weekday:
        if day.value in lower:
            diff = day.number - current
            if diff <= 0:
                diff += 7
            logger.debug("weekday %s matched, %d days ahead", day.value, diff)
            return today + timedelta(days=diff)
    return None


def dateparser_detector(date_order: str = "MDY") -> DateDetector:
    """Build a fallback detector around dateparser's free-text search.

    Handles absolute forms such as 'Jan 15', '5pm' or 'March 3rd'. The
    first match carrying a digit wins; bare words like 'May', 'Sat' or
    'now' are ignored.
    """

    def detect(text: str, now: datetime) -> datetime | None:
        # dateparser works on wall-clock time; now's tzinfo is re-attached below
        settings = {
            "PREFER_DATES_FROM": "future",
            "RELATIVE_BASE": now.replace(tzinfo=None),
            "DATE_ORDER": date_order,
        }
        matches = search_dates(text, settings=settings, languages=["en"])
        match = next((m for m in matches or [] if _DIGIT_RE.search(m[0])), None)
        if match is None:
            return None
        matched_phrase, dt = match
        logger.debug("detector matched %r", matched_phrase)
        if now.tzinfo is not None:
            dt = dt.replace(tzinfo=now.tzinfo) if dt.tzinfo is None else dt.astimezone(now.tzinfo)
        return dt

    return detect


def extract_due_date(
    text: str,
    now: datetime,
    calendar: Calendar | None = None,
    detector: DateDetector | None = None,
) -> datetime | None:
    """
    Infer a due date from free text.
    Keyword phrases, then weekday names, then the fallback detector.
    Returns None when nothing matches; detector failures count as no match.
    """
    calendar = calendar or Calendar()
    lower = text.lower()
    today = calendar.start_of_day(now)

    due = _match_phrase(lower, today, calendar)
    if due is None:
        due = _match_weekday(lower, today, calendar)
    if due is not None or detector is None or not text.strip():
        return due

    try:
        return detector(text, now)
    except Exception:
        logger.exception("date detection failed for %r", text)
        return None
