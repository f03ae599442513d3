"""
test_timeline_format.py — Tests for the series builder and timeline analysis.

Tests:
1. build_series — ascending, unique, every label present, sparse
2. to_chart_rows / year_span helpers
3. build_timeline / analyze_timeline end to end on the shipped dictionaries
"""
import pytest

from garden_timeline.services.formatters.timeline_formatter import (
    TimeSeriesPoint,
    build_series,
    to_chart_rows,
    year_span,
)
from garden_timeline.services.timeline_aggregator import YearlyTopicCounts
from garden_timeline.services.timeline_service import (
    TimelineStatus,
    analyze_timeline,
    build_timeline,
)
from garden_timeline.services.topic_classifier import UnsupportedLanguageError


def _aggregate():
    counts = YearlyTopicCounts(["A", "B"])
    counts.add([1800], ["A"])
    counts.add([1600], ["B"])
    counts.add([1600, 1700], ["A"])
    return counts


# ── build_series ─────────────────────────────────────────────────


class TestBuildSeries:
    def test_ascending_and_unique(self):
        years = [p.year for p in build_series(_aggregate())]
        assert years == sorted(set(years)) == [1600, 1700, 1800]

    def test_every_label_present(self):
        for point in build_series(_aggregate()):
            assert list(point.counts) == ["A", "B"]

    def test_values(self):
        series = build_series(_aggregate())
        assert [dict(p.counts) for p in series] == [
            {"A": 1, "B": 1},
            {"A": 1, "B": 0},
            {"A": 1, "B": 0},
        ]

    def test_sparse_no_gap_filling(self):
        counts = YearlyTopicCounts(["A"])
        counts.add([1600, 1900], ["A"])
        assert [p.year for p in build_series(counts)] == [1600, 1900]

    def test_empty(self):
        assert build_series(YearlyTopicCounts(["A"])) == []

    def test_point_is_immutable(self):
        point = TimeSeriesPoint(year=1600, counts={"A": 1})
        with pytest.raises(TypeError):
            point.counts["A"] = 5
        with pytest.raises(AttributeError):
            point.year = 1700
        assert point.total == 1


class TestHelpers:
    def test_chart_rows(self):
        rows = to_chart_rows(build_series(_aggregate()))
        assert rows[0] == {"year": 1600, "A": 1, "B": 1}

    def test_year_span(self):
        assert year_span(build_series(_aggregate())) == (1600, 1800)
        assert year_span([]) == (None, None)


# ── end to end ───────────────────────────────────────────────────


class TestBuildTimeline:
    def test_garden_documents(self, garden_docs):
        series = build_timeline(garden_docs, "en")
        assert [p.to_dict() for p in series] == [
            {"year": 950, "counts": {"Design": 0, "History": 0, "Culture": 0, "Botany": 1}},
            {"year": 1971, "counts": {"Design": 1, "History": 1, "Culture": 0, "Botany": 0}},
        ]

    def test_persian_century_variant(self):
        docs = [{"content": "باغی که در قرن 10 با قنات ساخته شد"}]
        [point] = build_timeline(docs, "en")
        assert point.year == 1571
        assert dict(point.counts) == {"Design": 0, "History": 0, "Culture": 0, "Botany": 1}

    def test_persian_labels(self, garden_docs):
        series = build_timeline(garden_docs, "fa")
        assert list(series[0].counts) == ["طراحی", "تاریخ", "فرهنگ", "گیاه‌شناسی"]
        assert series[1].counts["تاریخ"] == 1

    def test_order_independent(self, garden_docs):
        assert build_timeline(garden_docs, "en") == build_timeline(garden_docs[::-1], "en")

    def test_injected_table(self, garden_docs, synthetic_table):
        [point] = build_timeline(garden_docs, table=synthetic_table)
        assert point.year == 950
        assert dict(point.counts) == {"Water": 1, "Trees": 0, "Rulers": 0}

    def test_out_of_range_years_excluded(self):
        docs = [{"content": "courtyard 3000"}, {"content": "courtyard 400"}, {"content": "5th century courtyard"}]
        assert build_timeline(docs, "en") == []

    def test_empty(self):
        assert build_timeline([], "en") == []

    def test_unknown_language(self, garden_docs):
        with pytest.raises(UnsupportedLanguageError):
            build_timeline(garden_docs, "de")


class TestAnalyzeTimeline:
    def test_ok(self, garden_docs):
        analysis = analyze_timeline(garden_docs, "en")
        assert analysis.status is TimelineStatus.OK
        assert analysis.topics == ["Design", "History", "Culture", "Botany"]
        assert (analysis.min_year, analysis.max_year) == (950, 1971)

    def test_no_documents(self):
        analysis = analyze_timeline([], "fa")
        assert analysis.status is TimelineStatus.NO_DOCUMENTS
        assert analysis.points == []
        assert analysis.min_year is None
        assert analysis.language == "fa"

    def test_not_enough_data(self, garden_docs):
        analysis = analyze_timeline(garden_docs[:1], "en")
        assert analysis.status is TimelineStatus.NOT_ENOUGH_DATA
        assert [p.year for p in analysis.points] == [1971]
        assert analysis.min_year == analysis.max_year == 1971

    def test_no_dates_at_all(self):
        analysis = analyze_timeline([{"content": "a courtyard"}], "en")
        assert analysis.status is TimelineStatus.NOT_ENOUGH_DATA
        assert analysis.points == []

    def test_to_dict(self, garden_docs):
        payload = analyze_timeline(garden_docs, "en").to_dict()
        assert payload["status"] == "ok"
        assert payload["points"][1]["year"] == 1971
