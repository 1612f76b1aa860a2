"""Padded chart domains so every range bar on a chart shares one scale."""

from __future__ import annotations

import math
from typing import Iterable

from clubgap.config import CHART_DEFAULT_MIN, _Settings, get_settings

from .models import ChartScale, ClubGap, Shot


def _shot_bounds(shot: Shot, display_unit: str) -> list[float]:
    bounds: list[float] = []
    for metric in ("carry", "total"):
        median, variance = shot.distance(metric, display_unit)
        bounds.extend((median - variance, median + variance))
    return bounds


def _default_scale(settings: _Settings) -> ChartScale:
    return ChartScale(min_distance=CHART_DEFAULT_MIN, max_distance=settings.chart_default_max)


def chart_scale(
    shots: Iterable[Shot] | None,
    display_unit: str,
    settings: _Settings | None = None,
) -> ChartScale:
    """Return a ``[min, max]`` domain spanning carry and total bands of *shots*.

    Padding is a fraction of the spread (10% by default) but never less than
    the configured minimum padding, and the lower edge is clamped at zero.
    """
    settings = settings or get_settings()
    distances: list[float] = []
    for shot in shots or ():
        if shot is None:
            continue
        distances.extend(v for v in _shot_bounds(shot, display_unit) if math.isfinite(v))

    if not distances:
        return _default_scale(settings)

    low, high = min(distances), max(distances)
    padding = max(settings.chart_min_padding, (high - low) * settings.chart_padding_fraction)
    return ChartScale(min_distance=max(0.0, low - padding), max_distance=high + padding)


def gap_chart_scale(
    gaps: Iterable[ClubGap] | None, settings: _Settings | None = None
) -> ChartScale:
    """Domain shared by every club bar of a gapping chart.

    The rows are already in the display unit. Padding is the plain fraction of
    the spread with no minimum; the lower edge is clamped at zero.
    """
    settings = settings or get_settings()
    rows = [g for g in gaps or () if g is not None]
    lows = [g.min_distance for g in rows if math.isfinite(g.min_distance)]
    highs = [g.max_distance for g in rows if math.isfinite(g.max_distance)]
    if not lows or not highs:
        return _default_scale(settings)

    low, high = min(lows), max(highs)
    padding = (high - low) * settings.chart_padding_fraction
    return ChartScale(min_distance=max(0.0, low - padding), max_distance=high + padding)


__all__ = ["chart_scale", "gap_chart_scale"]
