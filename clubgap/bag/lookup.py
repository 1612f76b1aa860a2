"""Answer "which club/shot goes this far?" for a target distance."""

from __future__ import annotations

from typing import Iterable, List, NamedTuple

from .models import Club, DistanceRange, Shot, ShotSuggestion, SuggestionLabel
from .units import Metric, as_distance

NEAREST_SHORTER: SuggestionLabel = "Nearest Shorter"
NEAREST_LONGER: SuggestionLabel = "Nearest Longer"


class _Candidate(NamedTuple):
    club: Club
    shot: Shot
    median: float
    variance: float

    @property
    def low(self) -> float:
        return self.median - self.variance

    @property
    def high(self) -> float:
        return self.median + self.variance


def _band(shot: Shot, metric: Metric, display_unit: str) -> DistanceRange:
    median, variance = shot.distance(metric, display_unit)
    return DistanceRange(
        lower_bound=median - variance, central=median, upper_bound=median + variance
    )


def _suggest(
    candidate: _Candidate,
    query: float,
    metric: Metric,
    display_unit: str,
    *,
    is_exact: bool = False,
    label: SuggestionLabel | None = None,
) -> ShotSuggestion:
    return ShotSuggestion(
        club_id=candidate.club.id,
        club_name=candidate.club.name,
        shot=candidate.shot,
        metric=metric,
        median=candidate.median,
        variance=candidate.variance,
        lower_bound=candidate.low,
        upper_bound=candidate.high,
        diff=abs(query - candidate.median),
        is_exact=is_exact,
        label=label,
        carry=_band(candidate.shot, "carry", display_unit),
        total=_band(candidate.shot, "total", display_unit),
    )


def _candidates(
    clubs: Iterable[Club], metric: Metric, display_unit: str
) -> List[_Candidate]:
    candidates: List[_Candidate] = []
    for club in clubs:
        if club is None:
            continue
        for shot in club.shots:
            if shot is None:
                continue
            median, variance = shot.distance(metric, display_unit)
            candidates.append(_Candidate(club, shot, median, variance))
    return candidates


def lookup_distance(
    query: float,
    query_metric: Metric,
    clubs: Iterable[Club] | None,
    display_unit: str,
) -> List[ShotSuggestion]:
    """Find shots whose band covers *query*, else the closest on either side.

    Any exact match suppresses the nearest-neighbour fallback. The fallback
    returns at most a "Nearest Shorter" followed by a "Nearest Longer" entry;
    ties go to whichever shot was scanned first.
    """
    target = as_distance(query)
    if target <= 0:
        return []
    if query_metric != "carry":
        query_metric = "total"

    candidates = _candidates(clubs or (), query_metric, display_unit)

    exact = [c for c in candidates if c.low <= target <= c.high]
    if exact:
        return [
            _suggest(c, target, query_metric, display_unit, is_exact=True) for c in exact
        ]

    below: _Candidate | None = None
    above: _Candidate | None = None
    for candidate in candidates:
        diff = abs(target - candidate.median)
        if candidate.median < target:
            if below is None or diff < abs(target - below.median):
                below = candidate
        elif candidate.median > target:
            if above is None or diff < abs(target - above.median):
                above = candidate

    suggestions: List[ShotSuggestion] = []
    if below is not None:
        suggestions.append(
            _suggest(below, target, query_metric, display_unit, label=NEAREST_SHORTER)
        )
    if above is not None:
        suggestions.append(
            _suggest(above, target, query_metric, display_unit, label=NEAREST_LONGER)
        )
    return suggestions


__all__ = ["NEAREST_LONGER", "NEAREST_SHORTER", "lookup_distance"]
