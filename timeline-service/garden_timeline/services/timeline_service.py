"""
timeline_service.py — Documents + language → per-year topic time series.

Pipeline:
    Documents
        ↓
    Temporal extraction (per document)   → unique valid years
    Topic classification (per document)  → topic labels
        ↓
    Aggregator                           → YearlyTopicCounts
        ↓
    Series builder                       → [TimeSeriesPoint] ascending
        ↓
    Timeline analysis                    → status, span, labels

Pure and re-entrant: every call owns its own aggregate. Callers may
memoize on (documents, language); nothing is cached here.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from garden_timeline.core import startup
from garden_timeline.core.config import DEFAULT_LANGUAGE, MIN_CHART_POINTS
from garden_timeline.services.formatters.timeline_formatter import (
    TimeSeriesPoint,
    build_series,
    year_span,
)
from garden_timeline.services.timeline_aggregator import aggregate_documents
from garden_timeline.services.topic_classifier import TopicTable
from garden_timeline.temporal.temporal_engine import TemporalExtractor

logger = logging.getLogger(__name__)


class TimelineStatus(str, Enum):
    OK = "ok"
    NO_DOCUMENTS = "no_documents"
    NOT_ENOUGH_DATA = "not_enough_data"


@dataclass
class TimelineAnalysis:
    language: str
    status: TimelineStatus
    topics: List[str]
    points: List[TimeSeriesPoint] = field(default_factory=list)
    min_year: Optional[int] = None
    max_year: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "status": self.status.value,
            "topics": list(self.topics),
            "points": [p.to_dict() for p in self.points],
            "min_year": self.min_year,
            "max_year": self.max_year,
        }


def _resolve_table(language: Optional[str], table: Optional[TopicTable]) -> TopicTable:
    if table is not None:
        return table
    return startup.get_topic_table(language or DEFAULT_LANGUAGE)


def build_timeline(
    documents: Sequence[Any],
    language: Optional[str] = None,
    table: Optional[TopicTable] = None,
    extractor: Optional[TemporalExtractor] = None,
) -> List[TimeSeriesPoint]:
    """
    Compute the sparse, ascending per-topic time series of a collection.

    Args:
        documents: dicts or objects with a ``content`` field.
        language:  selects the configured topic table (ignored if ``table``).
        table:     injected topic table (e.g. synthetic dictionaries in tests).
        extractor: injected temporal extractor.

    Raises:
        UnsupportedLanguageError: if ``language`` has no configured table.
    """
    topic_table = _resolve_table(language, table)
    aggregate = aggregate_documents(documents, topic_table, extractor)
    return build_series(aggregate)


def analyze_timeline(
    documents: Sequence[Any],
    language: Optional[str] = None,
    table: Optional[TopicTable] = None,
    extractor: Optional[TemporalExtractor] = None,
    min_points: int = MIN_CHART_POINTS,
) -> TimelineAnalysis:
    """Time series plus the sparsity status the consuming chart needs."""
    topic_table = _resolve_table(language, table)

    if not documents:
        return TimelineAnalysis(
            language=topic_table.language,
            status=TimelineStatus.NO_DOCUMENTS,
            topics=topic_table.labels,
        )

    points = build_timeline(documents, table=topic_table, extractor=extractor)
    min_year, max_year = year_span(points)
    status = (
        TimelineStatus.OK if len(points) >= min_points
        else TimelineStatus.NOT_ENOUGH_DATA
    )

    logger.info(
        "[TIMELINE] %d documents → %d points (%s) status=%s",
        len(documents), len(points), topic_table.language, status.value,
    )
    return TimelineAnalysis(
        language=topic_table.language,
        status=status,
        topics=topic_table.labels,
        points=points,
        min_year=min_year,
        max_year=max_year,
    )
