"""
century_parser.py — Century-level mentions → representative midpoint years.

Supports:
  - English: "5th century", "19 century", "10th Century" → Gregorian
  - Persian: "قرن 10", "سده ۱۲"                          → Shamsi, converted

Midpoint of century N is (N - 1) * 100 + 50.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from garden_timeline.temporal.calendar_converter import to_gregorian
from garden_timeline.temporal.calendar_system import CalendarSystem
from garden_timeline.utils.normalize import to_ascii_digits


_ASCII_WORD = "0-9A-Za-z_"

_EN_CENTURY_RE = re.compile(
    rf"(?<![{_ASCII_WORD}])([0-9]{{1,2}})(?:st|nd|rd|th)?\s*century(?![{_ASCII_WORD}])",
    re.IGNORECASE,
)
# No boundary before قرن/سده; only the number must end on one.
_FA_CENTURY_RE = re.compile(rf"(?:قرن|سده)\s*([0-9]{{1,2}})(?![{_ASCII_WORD}])")
_NUMBER_RE = re.compile(r"[0-9]{1,2}")


@dataclass(frozen=True)
class CenturyMention:
    raw_phrase: str
    century: int
    language: str
    system: CalendarSystem
    midpoint_year: int
    gregorian_year: int


def century_midpoint(century: int) -> int:
    """Representative year for a 1-based century number."""
    return (century - 1) * 100 + 50


def _century_number(phrase: str) -> Optional[int]:
    m = _NUMBER_RE.search(phrase)
    if not m:
        return None
    return int(m.group(0))


def _build_mentions(
    phrases: List[str],
    language: str,
    system: CalendarSystem,
) -> List[CenturyMention]:
    mentions = []
    for phrase in phrases:
        century = _century_number(phrase)
        if century is None:
            continue
        midpoint = century_midpoint(century)
        mentions.append(
            CenturyMention(
                raw_phrase=phrase,
                century=century,
                language=language,
                system=system,
                midpoint_year=midpoint,
                gregorian_year=to_gregorian(system, midpoint),
            )
        )
    return mentions


def parse_english_centuries(normalized: str) -> List[CenturyMention]:
    """English century phrases; midpoints are already Gregorian."""
    phrases = [m.group(0) for m in _EN_CENTURY_RE.finditer(normalized or "")]
    return _build_mentions(phrases, "en", CalendarSystem.GREGORIAN)


def parse_persian_centuries(original: str) -> List[CenturyMention]:
    """Persian قرن/سده phrases; midpoints are assumed Hijri Shamsi."""
    text = to_ascii_digits(original)
    phrases = [m.group(0) for m in _FA_CENTURY_RE.finditer(text)]
    return _build_mentions(phrases, "fa", CalendarSystem.SHAMSI)


def extract_century_mentions(original: str) -> List[CenturyMention]:
    """All English and Persian century mentions in a document, English first."""
    if not original:
        return []
    normalized = to_ascii_digits(original)
    return parse_english_centuries(normalized) + parse_persian_centuries(original)
