"""
Unit tests for the pure analytics functions.

No database: records are built in memory.
"""
from __future__ import annotations

from datetime import date, timedelta

import pytest

from jawlog.services.analytics import (
    DailyRecord,
    compute_average,
    compute_correlation,
    compute_statistics,
    compute_top_items,
    compute_weekly_trend,
    describe_correlation,
    pearson,
)


_END = date(2026, 10, 19)


def _rec(stress: int = 3, pain: int = 5, day_offset: int = 0, **kwargs) -> DailyRecord:
    return DailyRecord(
        date=_END - timedelta(days=day_offset),
        pain_score=pain,
        stress_level=stress,
        **kwargs,
    )


def _newest_first(pains: list[int]) -> list[DailyRecord]:
    """Records whose pain scores are given most-recent-first."""
    return [_rec(pain=p, day_offset=i) for i, p in enumerate(pains)]


# ---------------------------------------------------------------------------
# compute_average
# ---------------------------------------------------------------------------

class TestAverage:
    def test_empty_is_zero(self):
        assert compute_average([], "pain_score") == 0
        assert compute_average([], "stress_level") == 0.0

    def test_single_record(self):
        assert compute_average([_rec(stress=3, pain=5)], "pain_score") == 5.0

    def test_one_decimal(self):
        records = [_rec(pain=1), _rec(pain=2), _rec(pain=2)]
        assert compute_average(records, "pain_score") == 1.7

    def test_rounds_half_up(self):
        records = [_rec(pain=2), _rec(pain=3), _rec(pain=2), _rec(pain=2)]
        assert compute_average(records, "pain_score") == 2.3

    @pytest.mark.parametrize("pains", [[1, 10], [4, 4, 5], [9, 1, 3, 7, 2], [6]])
    def test_within_min_max(self, pains):
        records = [_rec(pain=p) for p in pains]
        avg = compute_average(records, "pain_score")
        assert min(pains) <= avg <= max(pains)

    def test_rejects_list_field(self):
        with pytest.raises(ValueError):
            compute_average([_rec()], "foods")


# ---------------------------------------------------------------------------
# compute_top_items
# ---------------------------------------------------------------------------

class TestTopItems:
    def test_tie_broken_by_first_appearance(self):
        records = [
            _rec(foods=("a", "b")),
            _rec(foods=("a",)),
            _rec(foods=("b", "c")),
        ]
        assert compute_top_items(records, "foods", 2) == [("a", 2), ("b", 2)]

    def test_not_alphabetical(self):
        records = [_rec(symptoms=("zeta", "alpha"))]
        assert compute_top_items(records, "symptoms") == [("zeta", 1), ("alpha", 1)]

    def test_higher_count_wins_over_order(self):
        records = [
            _rec(exercises=("walk",)),
            _rec(exercises=("yoga",)),
            _rec(exercises=("yoga",)),
        ]
        assert compute_top_items(records, "exercises", 1) == [("yoga", 2)]

    def test_never_more_than_k(self):
        records = [_rec(foods=tuple("abcdefg"))]
        assert len(compute_top_items(records, "foods", 3)) == 3

    def test_fewer_labels_than_k(self):
        records = [_rec(medications=("ibuprofen",))]
        assert compute_top_items(records, "medications", 3) == [("ibuprofen", 1)]

    def test_counts_are_true_occurrences(self):
        records = [
            _rec(foods=("coffee", "gum")),
            _rec(foods=("coffee",)),
            _rec(foods=("coffee", "steak", "gum")),
        ]
        flat = [f for r in records for f in r.foods]
        for label, count in compute_top_items(records, "foods", 3):
            assert count == flat.count(label)

    def test_empty_records(self):
        assert compute_top_items([], "foods") == []

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            compute_top_items([_rec()], "foods", 0)

    def test_rejects_numeric_field(self):
        with pytest.raises(ValueError):
            compute_top_items([_rec()], "pain_score")


# ---------------------------------------------------------------------------
# compute_weekly_trend
# ---------------------------------------------------------------------------

class TestWeeklyTrend:
    def test_seven_records_scenario(self):
        trend = compute_weekly_trend(_newest_first([8, 7, 9, 5, 4, 6, 5]))
        assert trend is not None
        assert trend.recent_mean == 8.0
        assert trend.prior_mean == 5.0
        assert trend.change_percent == 60.0
        assert trend.improving is False

    def test_input_order_does_not_matter(self):
        records = _newest_first([8, 7, 9, 5, 4, 6, 5])
        trend = compute_weekly_trend(list(reversed(records)))
        assert trend.change_percent == 60.0

    def test_improving_when_pain_drops(self):
        trend = compute_weekly_trend(_newest_first([2, 2, 2, 4, 4, 4, 4]))
        assert trend.change_percent == -50.0
        assert trend.improving is True

    def test_only_most_recent_seven_used(self):
        # Older records with extreme pain must not affect the result.
        trend = compute_weekly_trend(_newest_first([8, 7, 9, 5, 4, 6, 5, 10, 10, 10]))
        assert trend.change_percent == 60.0

    def test_short_prior_window(self):
        trend = compute_weekly_trend(_newest_first([6, 6, 6, 4]))
        assert trend.prior_mean == 4.0
        assert trend.change_percent == 50.0

    def test_single_record_unavailable(self):
        assert compute_weekly_trend(_newest_first([5])) is None

    def test_empty_prior_window_unavailable(self):
        assert compute_weekly_trend(_newest_first([5, 6])) is None
        assert compute_weekly_trend(_newest_first([5, 6, 7])) is None

    def test_zero_prior_mean_unavailable(self):
        assert compute_weekly_trend(_newest_first([5, 5, 5, 0, 0])) is None

    def test_custom_sort_key(self):
        records = _newest_first([8, 7, 9, 5, 4, 6, 5])
        # Sorting by the negated date flips "newest": windows swap roles.
        trend = compute_weekly_trend(records, sort_key=lambda r: -r.date.toordinal())
        assert trend.recent_mean == 5.0

    def test_does_not_mutate_input(self):
        records = list(reversed(_newest_first([8, 7, 9, 5, 4, 6, 5])))
        before = list(records)
        compute_weekly_trend(records)
        assert records == before


# ---------------------------------------------------------------------------
# compute_correlation
# ---------------------------------------------------------------------------

class TestCorrelation:
    def test_exact_positive_scenario(self):
        records = [_rec(stress=1, pain=2), _rec(stress=2, pain=4), _rec(stress=3, pain=6)]
        assert compute_correlation(records) == 1.0

    def test_perfect_positive_with_offset(self):
        records = [_rec(stress=s, pain=2 * s + 1) for s in range(1, 5)]
        assert compute_correlation(records) == pytest.approx(1.0)

    def test_perfect_negative(self):
        records = [_rec(stress=s, pain=11 - 2 * s) for s in range(1, 6)]
        assert compute_correlation(records) == pytest.approx(-1.0)

    def test_single_record_unavailable(self):
        assert compute_correlation([_rec(stress=3, pain=5)]) is None

    def test_empty_unavailable(self):
        assert compute_correlation([]) is None

    def test_constant_stress_is_zero(self):
        records = [_rec(stress=3, pain=p) for p in (1, 5, 9, 2)]
        assert compute_correlation(records) == 0

    def test_constant_pain_is_zero(self):
        records = [_rec(stress=s, pain=4) for s in (1, 2, 5)]
        assert compute_correlation(records) == 0.0

    def test_symmetric_magnitude(self):
        xs = [1, 2, 3, 4, 5, 2]
        ys = [3, 7, 4, 9, 8, 5]
        assert abs(pearson(xs, ys)) == pytest.approx(abs(pearson(ys, xs)))

    def test_within_bounds(self):
        records = [_rec(stress=s, pain=p) for s, p in [(1, 9), (5, 2), (3, 3), (2, 8), (4, 4)]]
        r = compute_correlation(records)
        assert -1.0 <= r <= 1.0

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            pearson([1, 2], [1])


class TestDescribeCorrelation:
    @pytest.mark.parametrize("r, label", [
        (0.9, "strong_positive"),
        (0.5, "moderate_positive"),
        (0.1, "weak"),
        (0.0, "weak"),
        (-0.2, "weak"),
        (-0.5, "moderate_negative"),
        (-0.95, "strong_negative"),
    ])
    def test_bands(self, r, label):
        assert describe_correlation(r).label == label

    def test_boundaries_use_magnitude(self):
        assert describe_correlation(0.7).label == "moderate_positive"
        assert describe_correlation(-0.7).label == "moderate_negative"
        assert describe_correlation(0.3).label == "weak"
        assert describe_correlation(-0.3).label == "weak"

    def test_descriptions(self):
        assert "higher pain" in describe_correlation(0.8).description
        assert "lower pain" in describe_correlation(-0.8).description
        assert describe_correlation(0.0).description == "No clear pattern between stress and pain"


# ---------------------------------------------------------------------------
# compute_statistics
# ---------------------------------------------------------------------------

class TestStatistics:
    def test_empty(self):
        stats = compute_statistics([])
        assert stats.record_count == 0
        assert stats.average_pain == 0
        assert stats.average_stress == 0
        assert stats.top_foods == []
        assert stats.weekly_trend is None
        assert stats.correlation is None
        assert stats.correlation_label is None
        assert stats.work_days == 0

    def test_full_bundle(self):
        records = [
            _rec(stress=4, pain=8, day_offset=0, foods=("coffee",), work_done=True, work_type="desk"),
            _rec(stress=4, pain=7, day_offset=1, foods=("coffee", "gum"), work_done=True, work_type="desk"),
            _rec(stress=5, pain=9, day_offset=2, symptoms=("clicking",)),
            _rec(stress=2, pain=5, day_offset=3, work_done=True, work_type="driving"),
            _rec(stress=1, pain=4, day_offset=4),
            _rec(stress=2, pain=6, day_offset=5, medications=("ibuprofen",)),
            _rec(stress=2, pain=5, day_offset=6),
        ]
        stats = compute_statistics(records)
        assert stats.record_count == 7
        assert stats.average_pain == 6.3
        assert stats.average_stress == 2.9
        assert stats.top_foods == [("coffee", 2), ("gum", 1)]
        assert stats.top_medications == [("ibuprofen", 1)]
        assert stats.top_symptoms == [("clicking", 1)]
        assert stats.top_exercises == []
        assert stats.weekly_trend.change_percent == 60.0
        assert stats.correlation > 0.7
        assert stats.correlation_label.label == "strong_positive"
        assert stats.work_days == 3
        assert stats.top_work_types == [("desk", 2), ("driving", 1)]


class TestDailyRecord:
    def test_from_row_handles_nulls(self):
        class Row:
            date = _END
            pain_score = 5
            stress_level = 2
            foods = None
            medications = ["a"]
            exercises = None
            symptoms = None
            work_done = None
            work_type = None

        rec = DailyRecord.from_row(Row())
        assert rec.foods == ()
        assert rec.medications == ("a",)
        assert rec.work_done is False
        assert rec.work_type == ""
