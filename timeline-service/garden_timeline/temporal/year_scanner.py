"""
year_scanner.py — Find numeric year mentions and resolve their calendar.

    original text
        ↓ to_ascii_digits
    normalized text ──► 3–4 digit tokens (offset, token)
        ↓
    context window (original text) ──► CalendarSystem
        ↓
    Gregorian year (approximate)

Year tokens are runs of exactly 3 or 4 ASCII digits with an ASCII word
boundary on each side: "1350ه.ش" matches (Persian letters are not ASCII
word characters), "a1350" and "12345" do not.
"""

import re
from dataclasses import dataclass
from typing import Iterator, List

from garden_timeline.core.config import CONTEXT_WINDOW_CHARS
from garden_timeline.temporal.calendar_converter import to_gregorian
from garden_timeline.temporal.calendar_rules import (
    build_context_window,
    disambiguate,
)
from garden_timeline.temporal.calendar_system import CalendarSystem
from garden_timeline.utils.normalize import to_ascii_digits


_YEAR_TOKEN_RE = re.compile(r"\b(\d{3,4})\b", re.ASCII)


@dataclass(frozen=True)
class YearMention:
    """A raw 3–4 digit token in normalized text."""
    offset: int
    token: str


@dataclass(frozen=True)
class YearCandidate:
    """A year mention after calendar resolution."""
    raw_token: str
    context_window: str
    system: CalendarSystem
    gregorian_year: int


def scan_year_mentions(normalized: str) -> Iterator[YearMention]:
    """Yield every 3–4 digit token of already digit-normalized text."""
    for m in _YEAR_TOKEN_RE.finditer(normalized or ""):
        yield YearMention(offset=m.start(1), token=m.group(1))


def resolve_mention(
    original: str,
    mention: YearMention,
    width: int = CONTEXT_WINDOW_CHARS,
) -> YearCandidate:
    """Disambiguate one mention against the original text and convert it."""
    window = build_context_window(original, mention.offset, mention.token, width)
    system = disambiguate(window)
    return YearCandidate(
        raw_token=mention.token,
        context_window=window.full,
        system=system,
        gregorian_year=to_gregorian(system, int(mention.token)),
    )


def extract_year_candidates(
    original: str,
    width: int = CONTEXT_WINDOW_CHARS,
) -> List[YearCandidate]:
    """
    Extract calendar-resolved year candidates from raw document text.

    No range filtering happens here; see temporal_engine.is_plausible_year.
    """
    if not original:
        return []
    normalized = to_ascii_digits(original)
    return [
        resolve_mention(original, mention, width)
        for mention in scan_year_mentions(normalized)
    ]
