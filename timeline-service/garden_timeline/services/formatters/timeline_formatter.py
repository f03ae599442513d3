"""
timeline_formatter.py — YearlyTopicCounts → ordered time series.

The series is sparse: years nobody mentioned are simply absent, never
zero-filled. Every point carries a count for every topic label.

Functions:
    build_series      — aggregate → [TimeSeriesPoint] ascending by year
    to_chart_rows     — flat {"year": y, label: count, ...} rows for a line chart
    year_span         — (min_year, max_year) of a series, or (None, None)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from garden_timeline.services.timeline_aggregator import YearlyTopicCounts


@dataclass(frozen=True)
class TimeSeriesPoint:
    year: int
    counts: Mapping[str, int]

    def __post_init__(self):
        object.__setattr__(self, "counts", MappingProxyType(dict(self.counts)))

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def to_dict(self) -> Dict[str, Any]:
        return {"year": self.year, "counts": dict(self.counts)}


def build_series(aggregate: YearlyTopicCounts) -> List[TimeSeriesPoint]:
    """One point per aggregated year, ascending, unique by construction."""
    return [
        TimeSeriesPoint(year=year, counts=counts)
        for year, counts in aggregate.items()
    ]


def to_chart_rows(series: Sequence[TimeSeriesPoint]) -> List[Dict[str, Any]]:
    """Flatten points to ``{"year": y, "<label>": n, ...}`` rows."""
    rows = []
    for point in series:
        row: Dict[str, Any] = {"year": point.year}
        row.update(point.counts)
        rows.append(row)
    return rows


def year_span(series: Sequence[TimeSeriesPoint]) -> Tuple[Optional[int], Optional[int]]:
    if not series:
        return None, None
    return series[0].year, series[-1].year
