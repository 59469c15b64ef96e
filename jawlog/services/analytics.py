"""
Analytics — derived statistics over a user's daily logs.

Every function here is pure: it takes an already-fetched list of
`DailyRecord` values and returns plain numbers / dataclasses. No DB,
no HTTP, no mutation of the input list.

Public API
----------
compute_average(records, field)             -> float            (0.0 when empty)
compute_top_items(records, field, k=3)      -> list[(label, count)]
compute_weekly_trend(records, sort_key=...) -> WeeklyTrend | None
compute_correlation(records)                -> float | None     (None = unavailable)
describe_correlation(r)                     -> CorrelationLabel
compute_statistics(records)                 -> DerivedStatistics
"""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field as dc_field
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Iterable, Optional, Sequence


# ---------------------------------------------------------------------------
# Input / output types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DailyRecord:
    """Read-only snapshot of one day's log, detached from the ORM."""
    date: date
    pain_score: int
    stress_level: int
    foods: tuple[str, ...] = ()
    medications: tuple[str, ...] = ()
    exercises: tuple[str, ...] = ()
    symptoms: tuple[str, ...] = ()
    work_done: bool = False
    work_type: str = ""

    @classmethod
    def from_row(cls, row: Any) -> "DailyRecord":
        """Build from a `DailyLog` row (or anything with the same attributes)."""
        return cls(
            date=row.date,
            pain_score=row.pain_score,
            stress_level=row.stress_level,
            foods=tuple(row.foods or ()),
            medications=tuple(row.medications or ()),
            exercises=tuple(row.exercises or ()),
            symptoms=tuple(row.symptoms or ()),
            work_done=bool(row.work_done),
            work_type=row.work_type or "",
        )


NUMERIC_FIELDS = ("pain_score", "stress_level")
LIST_FIELDS = ("foods", "medications", "exercises", "symptoms")


@dataclass
class WeeklyTrend:
    """Recent-vs-prior pain comparison over the last 7 records."""
    change_percent: float   # signed, one decimal; negative = less pain
    improving: bool
    recent_mean: float      # mean pain of the 3 most recent records
    prior_mean: float       # mean pain of the next (up to) 4 older records


@dataclass
class CorrelationLabel:
    """Qualitative band for a stress/pain correlation coefficient."""
    label: str              # strong_positive | moderate_positive | weak | ...
    description: str


@dataclass
class DerivedStatistics:
    """Everything the insights view renders for one user."""
    record_count: int
    average_pain: float
    average_stress: float
    top_foods: list[tuple[str, int]]
    top_medications: list[tuple[str, int]]
    top_exercises: list[tuple[str, int]]
    top_symptoms: list[tuple[str, int]]
    weekly_trend: Optional[WeeklyTrend]
    correlation: Optional[float]
    correlation_label: Optional[CorrelationLabel]
    work_days: int = 0
    top_work_types: list[tuple[str, int]] = dc_field(default_factory=list)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TOP_K = 3
TREND_WINDOW = 7
TREND_RECENT = 3
MIN_CORRELATION_RECORDS = 2
MIN_TREND_RECORDS = 2

STRONG_THRESHOLD = 0.7
MODERATE_THRESHOLD = 0.3


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _round1(value: float) -> float:
    """Round half-up to one decimal place (2.25 -> 2.3, unlike round())."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def _by_date(record: DailyRecord) -> date:
    return record.date


# ---------------------------------------------------------------------------
# Averages
# ---------------------------------------------------------------------------

def compute_average(records: Sequence[DailyRecord], field: str) -> float:
    """
    Mean of a numeric field across all records, one decimal place.
    An empty list averages to 0.0 (display default, not an error).
    """
    if field not in NUMERIC_FIELDS:
        raise ValueError(f"Not a numeric field: {field!r}")
    if not records:
        return 0.0
    return _round1(_mean([getattr(r, field) for r in records]))


# ---------------------------------------------------------------------------
# Frequency counts
# ---------------------------------------------------------------------------

def _top_labels(labels: Iterable[str], k: int) -> list[tuple[str, int]]:
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    # Counter keeps insertion order and most_common() sorts stably, so equal
    # counts stay in first-appearance order.
    return Counter(labels).most_common(k)


def compute_top_items(
    records: Sequence[DailyRecord],
    field: str,
    k: int = TOP_K,
) -> list[tuple[str, int]]:
    """
    The k most frequent labels of a list-valued field across all records.

    Ties are broken by first appearance in the flattened sequence
    (record order, then position inside the record), not alphabetically.
    """
    if field not in LIST_FIELDS:
        raise ValueError(f"Not a list field: {field!r}")
    return _top_labels((label for r in records for label in getattr(r, field)), k)


# ---------------------------------------------------------------------------
# Weekly trend
# ---------------------------------------------------------------------------

def compute_weekly_trend(
    records: Sequence[DailyRecord],
    sort_key: Callable[[DailyRecord], Any] = _by_date,
) -> Optional[WeeklyTrend]:
    """
    Compare mean pain of the 3 most recent records against the next
    (up to) 4 older ones, within the most recent 7.

    Records are ordered newest-first by `sort_key` here, so callers may pass
    either order. Returns None ("unavailable") when there are fewer than 2
    records, when the prior window is empty, or when its mean is 0.
    """
    if len(records) < MIN_TREND_RECORDS:
        return None

    window = sorted(records, key=sort_key, reverse=True)[:TREND_WINDOW]
    recent, prior = window[:TREND_RECENT], window[TREND_RECENT:]
    if not prior:
        return None

    recent_mean = _mean([r.pain_score for r in recent])
    prior_mean = _mean([r.pain_score for r in prior])
    if prior_mean == 0:
        return None

    change = _round1((recent_mean - prior_mean) / prior_mean * 100)
    return WeeklyTrend(
        change_percent=change,
        improving=change < 0,
        recent_mean=_round1(recent_mean),
        prior_mean=_round1(prior_mean),
    )


# ---------------------------------------------------------------------------
# Correlation
# ---------------------------------------------------------------------------

def pearson(xs: Sequence[float], ys: Sequence[float]) -> Optional[float]:
    """
    Pearson r over two equal-length series.

    None when there are fewer than 2 points. 0.0 when either series has
    zero variance or the result is not finite.
    """
    n = len(xs)
    if n != len(ys):
        raise ValueError("Series must have the same length")
    if n < MIN_CORRELATION_RECORDS:
        return None

    sum_x = sum(xs)
    sum_y = sum(ys)
    sum_xy = sum(x * y for x, y in zip(xs, ys))
    sum_xx = sum(x * x for x in xs)
    sum_yy = sum(y * y for y in ys)

    denominator = (n * sum_xx - sum_x * sum_x) * (n * sum_yy - sum_y * sum_y)
    if denominator <= 0:
        return 0.0

    r = (n * sum_xy - sum_x * sum_y) / math.sqrt(denominator)
    if not math.isfinite(r):
        return 0.0
    return max(-1.0, min(1.0, r))


def compute_correlation(records: Sequence[DailyRecord]) -> Optional[float]:
    """Pearson r between stress level (x) and pain score (y)."""
    return pearson(
        [r.stress_level for r in records],
        [r.pain_score for r in records],
    )


def describe_correlation(r: float) -> CorrelationLabel:
    magnitude = abs(r)
    if magnitude > STRONG_THRESHOLD:
        strength = "strong"
    elif magnitude > MODERATE_THRESHOLD:
        strength = "moderate"
    else:
        return CorrelationLabel(
            label="weak",
            description="No clear pattern between stress and pain",
        )

    if r > 0:
        return CorrelationLabel(
            label=f"{strength}_positive",
            description="Higher stress tends to correlate with higher pain",
        )
    return CorrelationLabel(
        label=f"{strength}_negative",
        description="Higher stress tends to correlate with lower pain",
    )


# ---------------------------------------------------------------------------
# Bundle
# ---------------------------------------------------------------------------

def compute_statistics(records: Sequence[DailyRecord]) -> DerivedStatistics:
    """Everything the insights view shows, computed in one pass per metric."""
    correlation = compute_correlation(records)
    work_records = [r for r in records if r.work_done]
    return DerivedStatistics(
        record_count=len(records),
        average_pain=compute_average(records, "pain_score"),
        average_stress=compute_average(records, "stress_level"),
        top_foods=compute_top_items(records, "foods"),
        top_medications=compute_top_items(records, "medications"),
        top_exercises=compute_top_items(records, "exercises"),
        top_symptoms=compute_top_items(records, "symptoms"),
        weekly_trend=compute_weekly_trend(records),
        correlation=correlation,
        correlation_label=describe_correlation(correlation) if correlation is not None else None,
        work_days=len(work_records),
        top_work_types=_top_labels((r.work_type for r in work_records if r.work_type), TOP_K),
    )
