"""
calendar_rules.py — Decide which calendar a bare year token belongs to.

A context window of original (non-normalized) text around the token is
checked against an ordered rule table. First matching rule wins:

    1. shamsi_marker      "هجری شمسی" / "ه.ش" / trailing "ه…" or "ش…"
    2. qamari_marker      "هجری قمری" / "ه.ق" / trailing "ق…"
    3. gregorian_marker   trailing "م…" (میلادی)
    4. default            Gregorian

When a window carries markers for two calendars, the earlier rule wins.
The one exception is the bare trailing "ه" of rule 1: a token directly
followed by "ه.ق" or "هجری قمری" is Qamari.
Persian markers are checked regardless of the UI language.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from garden_timeline.core.config import CONTEXT_WINDOW_CHARS
from garden_timeline.temporal.calendar_system import CalendarSystem


SHAMSI_PHRASE = "هجری شمسی"
SHAMSI_ABBREVIATION = "ه.ش"
QAMARI_PHRASE = "هجری قمری"
QAMARI_ABBREVIATION = "ه.ق"


@dataclass(frozen=True)
class ContextWindow:
    """Lower-cased text around one year token."""
    before: str
    token: str
    after: str

    @property
    def full(self) -> str:
        return self.before + self.token + self.after

    @property
    def trailing(self) -> str:
        """Text after the token with surrounding whitespace trimmed."""
        return self.after.strip()


def build_context_window(
    original: str,
    start: int,
    token: str,
    width: int = CONTEXT_WINDOW_CHARS,
) -> ContextWindow:
    """
    Slice up to ``width`` chars before and after a token of ``original``.

    ``start`` is the token offset; the digit normalizer preserves offsets
    so positions found in normalized text index the original directly.
    """
    end = start + len(token)
    before = original[max(0, start - width):start]
    after = original[end:end + width]
    return ContextWindow(
        before=before.lower(),
        token=token,
        after=after.lower(),
    )


# ======================================================================
# RULE TABLE
# ======================================================================

def _is_shamsi(window: ContextWindow) -> bool:
    full = window.full
    if SHAMSI_PHRASE in full or SHAMSI_ABBREVIATION in full:
        return True
    trailing = window.trailing
    # Bare "ه" cue does not claim an explicit Qamari marker ("ه.ق", "هجری قمری")
    if trailing.startswith((QAMARI_ABBREVIATION, QAMARI_PHRASE)):
        return False
    return trailing.startswith(("ه", "ش"))


def _is_qamari(window: ContextWindow) -> bool:
    full = window.full
    return (
        QAMARI_PHRASE in full
        or QAMARI_ABBREVIATION in full
        or window.trailing.startswith("ق")
    )


def _is_explicit_gregorian(window: ContextWindow) -> bool:
    return window.trailing.startswith("م")


def _always(window: ContextWindow) -> bool:
    return True


CalendarRule = Tuple[str, Callable[[ContextWindow], bool], CalendarSystem]

CALENDAR_RULES: Tuple[CalendarRule, ...] = (
    ("shamsi_marker", _is_shamsi, CalendarSystem.SHAMSI),
    ("qamari_marker", _is_qamari, CalendarSystem.QAMARI),
    ("gregorian_marker", _is_explicit_gregorian, CalendarSystem.GREGORIAN),
    ("default", _always, CalendarSystem.GREGORIAN),
)


def match_rule(
    window: ContextWindow,
    rules: Optional[Tuple[CalendarRule, ...]] = None,
) -> CalendarRule:
    """Return the first rule whose predicate accepts ``window``."""
    for rule in rules or CALENDAR_RULES:
        _, predicate, _ = rule
        if predicate(window):
            return rule
    # Unreachable with the default table (last rule always matches)
    return CALENDAR_RULES[-1]


def disambiguate(window: ContextWindow) -> CalendarSystem:
    """Classify the calendar of the token inside ``window``."""
    return match_rule(window)[2]


def rule_names() -> List[str]:
    return [name for name, _, _ in CALENDAR_RULES]
