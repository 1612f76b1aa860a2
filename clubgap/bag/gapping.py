"""Per-club distance bands for the bag gapping chart."""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable, List

from .defaults import resolve_shot_config
from .models import Category, Club, ClubGap, Shot, ShotConfig, ShotTypeDefinition
from .ranges import aggregate_range
from .units import Metric

logger = logging.getLogger(__name__)


def _shots_in_categories(
    shots: Iterable[Shot],
    category_ids: AbstractSet[str] | None,
    shot_config: ShotConfig,
) -> List[Shot]:
    if category_ids is None:
        return [shot for shot in shots if shot is not None]
    return [
        shot
        for shot in shots
        if shot is not None
        and any(cid in category_ids for cid in shot_config.category_ids_for(shot.shot_type))
    ]


def bag_gaps(
    clubs: Iterable[Club] | None,
    selected_category_ids: AbstractSet[str] | None,
    metric: Metric,
    display_unit: str,
    shot_types: List[ShotTypeDefinition] | None = None,
    categories: List[Category] | None = None,
) -> List[ClubGap]:
    """Build one band per club, longest club first.

    Only shots whose type maps to a selected category count; ``None`` selects
    every shot, including uncategorized ones. Clubs left without a positive
    band are dropped, so an empty selection gives an empty chart.
    """
    config = resolve_shot_config(shot_types, categories)
    selected = None if selected_category_ids is None else set(selected_category_ids)

    bands: list[tuple[Club, float, float, float]] = []
    for club in clubs or ():
        if club is None:
            continue
        summary = aggregate_range(
            _shots_in_categories(club.shots, selected, config), metric, display_unit
        )
        if summary is None:
            low = high = central = 0.0
        else:
            low, high, central = summary.lower_bound, summary.upper_bound, summary.central
        if low <= 0 or high <= 0:
            logger.debug("skipping club %s without a positive %s band", club.id, metric)
            continue
        bands.append((club, low, high, central))

    bands.sort(key=lambda band: band[2], reverse=True)

    gaps: List[ClubGap] = []
    for index, (club, low, high, central) in enumerate(bands):
        next_high = bands[index + 1][2] if index + 1 < len(bands) else None
        gaps.append(
            ClubGap(
                club_id=club.id,
                name=club.name,
                min_distance=low,
                max_distance=high,
                central=central,
                # positive is a gap to the next shorter club, negative an overlap
                gap_to_next=None if next_high is None else low - next_high,
            )
        )
    return gaps


__all__ = ["bag_gaps"]
