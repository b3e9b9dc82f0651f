from __future__ import annotations

import logging
import re
from datetime import datetime
from zoneinfo import ZoneInfo

from ..config import settings
from ..models import Priority, RepeatFrequency, Weekday
from ..schemas import ParsedTask
from ..utils.text import collapse_whitespace, contains_any, remove_phrases
from .dates import DATE_KEYWORDS, Calendar, DateDetector, dateparser_detector, extract_due_date

logger = logging.getLogger(__name__)

TAG_PAT = re.compile(r"#(\w+)")
BANG_PAT = re.compile(r"!!!|!!|!")

# Checked top to bottom; "!!!" contains "!!" contains "!".
PRIORITY_MARKERS = [
    (Priority.high, ["!!!", "!high", "#p1", "#high"]),
    (Priority.medium, ["!!", "!med", "#p2", "#medium"]),
    (Priority.low, ["!", "!low", "#p3", "#low"]),
]
PRIORITY_TAGS = {"#p1", "#p2", "#p3", "#high", "#medium", "#low"}

REPEAT_MARKERS = [
    (RepeatFrequency.daily, ["every day", "daily"]),
    (RepeatFrequency.weekly, ["every week", "weekly"]),
    (RepeatFrequency.monthly, ["every month", "monthly"]),
    (RepeatFrequency.yearly, ["every year", "yearly", "annually"]),
]
REPEAT_KEYWORDS = [
    "every day",
    "every week",
    "every month",
    "every year",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "annually",
]

# "maybe later" goes first so the two-word phrase is removed whole
SOMEDAY_KEYWORDS = ["maybe later", "someday"]


def _extract_priority(lower: str) -> Priority:
    for priority, markers in PRIORITY_MARKERS:
        if contains_any(lower, markers):
            return priority
    return Priority.none


def _extract_repeat(lower: str) -> RepeatFrequency | None:
    for freq, markers in REPEAT_MARKERS:
        if contains_any(lower, markers):
            return freq
    return None


def _extract_someday(lower: str) -> bool:
    return contains_any(lower, SOMEDAY_KEYWORDS)


def _extract_tags(text: str) -> tuple[str, ...]:
    """#word tokens in order of appearance, minus priority shorthand."""
    return tuple(m.group(1) for m in TAG_PAT.finditer(text) if m.group(0).lower() not in PRIORITY_TAGS)


def _clean_title(
    text: str,
    has_due: bool,
    has_repeat: bool,
    is_someday: bool,
) -> str:
    result = TAG_PAT.sub("", text)
    result = BANG_PAT.sub("", result)
    if has_due:
        result = remove_phrases(result, DATE_KEYWORDS)
    if has_repeat:
        result = remove_phrases(result, REPEAT_KEYWORDS)
    if is_someday:
        result = remove_phrases(result, SOMEDAY_KEYWORDS)
    return collapse_whitespace(result)


class TextParser:
    """
    Turns one line of quick-add text into a ParsedTask.
    - priority via !, !!, !!! or #p1..#p3 / #high #medium #low
    - recurrence via 'every week', 'daily', ...
    - someday via 'someday' / 'maybe later'
    - tags via #word
    - due date via keywords, weekday names, then the fallback detector
    - strips all of the above from the title
    """

    def __init__(
        self,
        calendar: Calendar | None = None,
        detector: DateDetector | None = None,
        timezone: str | None = None,
    ):
        self.calendar = calendar or Calendar(start_of_week=settings.start_of_week)
        self.detector = detector or dateparser_detector(settings.date_order)
        self.timezone = ZoneInfo(timezone or settings.timezone)

    def parse(self, text: str, now: datetime | None = None) -> ParsedTask:
        if now is None:
            now = datetime.now(self.timezone)
        lower = text.lower()

        priority = _extract_priority(lower)
        repeat = _extract_repeat(lower)
        someday = _extract_someday(lower)
        tags = _extract_tags(text)
        due = extract_due_date(text, now, self.calendar, self.detector)

        title = _clean_title(
            text,
            has_due=due is not None,
            has_repeat=repeat is not None,
            is_someday=someday,
        )
        logger.debug(
            "parsed %r: priority=%s repeat=%s someday=%s tags=%s due=%s",
            text,
            priority.value,
            repeat.value if repeat else None,
            someday,
            tags,
            due,
        )
        return ParsedTask(
            title=title,
            due_date=due,
            priority=priority,
            tag_names=tags,
            repeat_frequency=repeat,
            is_someday=someday,
        )


def parse(text: str, now: datetime | None = None, start_of_week: Weekday | None = None) -> ParsedTask:
    """Parse with the configured timezone and dateparser as the fallback detector."""
    parser = TextParser(calendar=Calendar(start_of_week=start_of_week or settings.start_of_week))
    return parser.parse(text, now=now)
