"""
timeline_aggregator.py — Year × topic aggregation over a document collection.

Architecture:
    Documents
        ↓
    Per document: unique plausible years   (temporal_engine)
                  matched topic labels     (topic_classifier)
        ↓
    Cartesian product years × topics → +1 each
        ↓
    YearlyTopicCounts  (year → {label → count})

Rules:
  - A year seen for the first time gets a row with EVERY label at 0.
  - A document needs ≥1 valid year AND ≥1 topic to count at all.
  - Repeated mentions of a year inside one document count once.
  - Document order never changes the result; chunk aggregates can be merged.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from garden_timeline.services.topic_classifier import TopicTable
from garden_timeline.temporal.temporal_engine import TemporalExtractor

logger = logging.getLogger(__name__)


def get_content(doc: Any) -> str:
    """Read ``content`` from a dict-like or attribute-style document."""
    if isinstance(doc, Mapping):
        content = doc.get("content")
    else:
        content = getattr(doc, "content", None)
    if content is None:
        return ""
    return content if isinstance(content, str) else str(content)


class YearlyTopicCounts:
    """
    Growing mapping year → (topic label → count).

    Iteration is deterministic: ascending years, labels in table order.
    Counts only ever increase.
    """

    def __init__(self, labels: Iterable[str]):
        self.labels: Tuple[str, ...] = tuple(labels)
        self._rows: Dict[int, Dict[str, int]] = {}

    def _row(self, year: int) -> Dict[str, int]:
        row = self._rows.get(year)
        if row is None:
            row = {label: 0 for label in self.labels}
            self._rows[year] = row
        return row

    def add(self, years: Iterable[int], topics: Iterable[str]) -> bool:
        """
        Count one document: +1 for every (year, topic) pair.

        Years are deduplicated here as well. Returns False (and changes
        nothing) when either side is empty.
        """
        unique_years = sorted(set(years))
        unique_topics = list(dict.fromkeys(topics))
        if not unique_years or not unique_topics:
            return False

        unknown = [t for t in unique_topics if t not in self.labels]
        if unknown:
            raise KeyError(f"Unknown topic label(s): {unknown}")

        for year in unique_years:
            row = self._row(year)
            for topic in unique_topics:
                row[topic] += 1
        return True

    def merge(self, other: "YearlyTopicCounts") -> "YearlyTopicCounts":
        """Fold another aggregate (same label set) into this one."""
        if set(other.labels) != set(self.labels):
            raise ValueError("Cannot merge aggregates built from different topic tables")
        for year, counts in other.items():
            row = self._row(year)
            for label, count in counts.items():
                row[label] += count
        return self

    def years(self) -> List[int]:
        return sorted(self._rows)

    def items(self) -> Iterator[Tuple[int, Dict[str, int]]]:
        for year in self.years():
            row = self._rows[year]
            yield year, {label: row[label] for label in self.labels}

    def get(self, year: int) -> Optional[Dict[str, int]]:
        row = self._rows.get(year)
        if row is None:
            return None
        return {label: row[label] for label in self.labels}

    def to_dict(self) -> Dict[int, Dict[str, int]]:
        return dict(self.items())

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, year: object) -> bool:
        return year in self._rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, YearlyTopicCounts):
            return NotImplemented
        return self.labels == other.labels and self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"YearlyTopicCounts(years={len(self)}, labels={list(self.labels)})"


def aggregate_documents(
    documents: Iterable[Any],
    table: TopicTable,
    extractor: Optional[TemporalExtractor] = None,
) -> YearlyTopicCounts:
    """
    Aggregate a document collection into year × topic counts.

    Args:
        documents: dicts or objects exposing ``content``.
        table:     topic dictionary of the active language.
        extractor: temporal extractor; defaults to configured settings.

    Returns:
        A fresh YearlyTopicCounts owned by this call.
    """
    extractor = extractor or TemporalExtractor()
    counts = YearlyTopicCounts(table.labels)

    total = counted = 0
    for doc in documents:
        total += 1
        content = get_content(doc)
        years = extractor.extract_years(content)
        if not years:
            continue
        topics = table.classify(content)
        if counts.add(years, topics):
            counted += 1

    logger.info(
        "[AGGREGATE] %d/%d documents contributed, %d distinct years (%s)",
        counted, total, len(counts), table.language,
    )
    return counts
