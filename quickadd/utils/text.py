import re
from collections.abc import Iterable

_SPACE_RUN_RE = re.compile(r"\s{2,}")


def collapse_whitespace(text: str) -> str:
    return _SPACE_RUN_RE.sub(" ", text).strip()


def contains_any(text: str, needles: Iterable[str]) -> bool:
    return any(n in text for n in needles)


def remove_phrases(text: str, phrases: Iterable[str]) -> str:
    """Drop every case-insensitive occurrence of each phrase, in the given order."""
    for phrase in phrases:
        text = re.sub(re.escape(phrase), "", text, flags=re.IGNORECASE)
    return text
