"""Fold shot observations into summary distance ranges."""

from __future__ import annotations

import math
from typing import Dict, Iterable, List

from clubgap.config import _Settings

from .chart import chart_scale
from .models import CategoryRange, Club, ClubRangeSummary, DistanceRange, Shot, ShotConfig
from .units import Metric


def shot_intervals(
    shots: Iterable[Shot], metric: Metric, display_unit: str
) -> list[tuple[float, float, float]]:
    """Return ``(median, low, high)`` per shot, converted to *display_unit*.

    Shots whose converted interval is not finite are left out.
    """
    intervals: list[tuple[float, float, float]] = []
    for shot in shots:
        median, variance = shot.distance(metric, display_unit)
        interval = (median, median - variance, median + variance)
        if not all(math.isfinite(value) for value in interval):
            continue
        intervals.append(interval)
    return intervals


def aggregate_range(
    shots: Iterable[Shot] | None, metric: Metric, display_unit: str
) -> DistanceRange | None:
    """Summarize *shots* as the widest band plus the mean of their medians.

    ``central`` is an average of per-shot medians, not a true median. With wildly
    asymmetric variances it can fall outside the bounds; that is left as is.
    """
    if not shots:
        return None
    intervals = shot_intervals([s for s in shots if s is not None], metric, display_unit)
    if not intervals:
        return None

    count = len(intervals)
    return DistanceRange(
        lower_bound=min(low for _, low, _ in intervals),
        central=sum(median / count for median, _, _ in intervals),
        upper_bound=max(high for _, _, high in intervals),
    )


def group_shots_by_category(
    shots: Iterable[Shot], shot_config: ShotConfig
) -> Dict[str, List[Shot]]:
    """Bucket shots under every category their shot type maps to."""
    grouped: Dict[str, List[Shot]] = {}
    for shot in shots:
        if shot is None or not shot.shot_type:
            continue
        for category_id in shot_config.category_ids_for(shot.shot_type):
            grouped.setdefault(category_id, []).append(shot)
    return grouped


def club_range_summary(
    club: Club,
    shot_config: ShotConfig,
    display_unit: str,
    settings: _Settings | None = None,
) -> ClubRangeSummary:
    """Carry and total ranges per category, all sharing one chart scale."""
    grouped = group_shots_by_category(club.shots, shot_config)
    categories: List[CategoryRange] = []
    for category in shot_config.categories:
        category_shots = grouped.get(category.id)
        if not category_shots:
            continue
        carry = aggregate_range(category_shots, "carry", display_unit)
        total = aggregate_range(category_shots, "total", display_unit)
        if carry is None or total is None:
            continue
        categories.append(
            CategoryRange(
                category_id=category.id,
                name=category.name or "Unknown Category",
                shot_count=len(category_shots),
                carry=carry,
                total=total,
            )
        )

    return ClubRangeSummary(
        club_id=club.id,
        name=club.name,
        display_unit=display_unit,
        categories=categories,
        scale=chart_scale(club.shots, display_unit, settings),
    )


__all__ = [
    "aggregate_range",
    "club_range_summary",
    "group_shots_by_category",
    "shot_intervals",
]
