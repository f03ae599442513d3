"""
temporal_engine.py — Per-document temporal extraction.

Pipeline:
    Document content
        ↓
    Year Mention Scanner + Calendar Disambiguator + Converter
        ↓
    Century Mention Scanner/Converter
        ↓
    Range Filter (MIN_YEAR < year < MAX_YEAR)
        ↓
    Sorted unique Gregorian years

Core design principles:
  ✅ No I/O, no shared state — safe to call concurrently
  ✅ 100% deterministic — same input → same output always
  ✅ Total — any string (including "") yields a (possibly empty) result
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from garden_timeline.core.config import CONTEXT_WINDOW_CHARS, MAX_YEAR, MIN_YEAR
from garden_timeline.temporal.century_parser import (
    CenturyMention,
    extract_century_mentions,
)
from garden_timeline.temporal.year_scanner import (
    YearCandidate,
    extract_year_candidates,
)

logger = logging.getLogger(__name__)


def is_plausible_year(
    year: int,
    min_year: int = MIN_YEAR,
    max_year: int = MAX_YEAR,
) -> bool:
    """Range filter: both bounds exclusive."""
    return min_year < year < max_year


@dataclass
class TemporalProfile:
    """Everything the temporal stages found in one document."""
    candidates: List[YearCandidate] = field(default_factory=list)
    centuries: List[CenturyMention] = field(default_factory=list)
    years: List[int] = field(default_factory=list)

    @property
    def rejected(self) -> List[int]:
        """Computed years dropped by the range filter (in scan order)."""
        valid = set(self.years)
        found = [c.gregorian_year for c in self.candidates]
        found += [c.gregorian_year for c in self.centuries]
        return [y for y in found if y not in valid]


class TemporalExtractor:
    """
    Turns free text into the set of plausible Gregorian years it mentions.

    Window width and year bounds default to service configuration and can
    be overridden per instance.
    """

    def __init__(
        self,
        window: int = CONTEXT_WINDOW_CHARS,
        min_year: int = MIN_YEAR,
        max_year: int = MAX_YEAR,
    ):
        self.window = window
        self.min_year = min_year
        self.max_year = max_year

    def profile(self, content: Optional[str]) -> TemporalProfile:
        text = content or ""
        candidates = extract_year_candidates(text, self.window)
        centuries = extract_century_mentions(text)

        years = set()
        for year in [c.gregorian_year for c in candidates] + [
            c.gregorian_year for c in centuries
        ]:
            if is_plausible_year(year, self.min_year, self.max_year):
                years.add(year)

        profile = TemporalProfile(
            candidates=candidates,
            centuries=centuries,
            years=sorted(years),
        )
        logger.debug(
            "[TEMPORAL] %d year tokens, %d century phrases → %d valid years",
            len(candidates), len(centuries), len(profile.years),
        )
        return profile

    def extract_years(self, content: Optional[str]) -> List[int]:
        """Sorted unique plausible Gregorian years mentioned in ``content``."""
        return self.profile(content).years


_default_extractor = TemporalExtractor()


def extract_document_years(content: Optional[str]) -> List[int]:
    """Sorted unique plausible years using the configured defaults."""
    return _default_extractor.extract_years(content)
