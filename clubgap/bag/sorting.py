from __future__ import annotations

import logging
from typing import Iterable, List, Literal

from .defaults import UNCATEGORIZED_SORT_KEY, resolve_shot_config
from .models import Category, Shot, ShotConfig, ShotTypeDefinition

logger = logging.getLogger(__name__)

SortKey = Literal["distance", "category", "category_distance", "distance_category"]
SortDirection = Literal["asc", "desc"]


def category_sort_name(shot: Shot, shot_config: ShotConfig) -> str:
    """Name of the first category the shot's type maps to, or ``"ZZZ"``."""
    names = shot_config.category_names_for(shot.shot_type)
    return names[0] if names else UNCATEGORIZED_SORT_KEY


def sort_shots(
    shots: Iterable[Shot] | None,
    shot_types: List[ShotTypeDefinition] | None = None,
    categories: List[Category] | None = None,
    display_unit: str = "meters",
    key: SortKey = "distance",
    direction: SortDirection = "desc",
) -> List[Shot]:
    """Return a new ordering of *shots*; the input list is left untouched.

    ``distance`` and ``category`` honour *direction*. The compound keys have a
    fixed order: category ascending with total descending, or total descending
    with category ascending. Ties keep input order in every mode.
    """
    config = resolve_shot_config(shot_types, categories)
    decorated = [
        (shot, shot.distance("total", display_unit)[0], category_sort_name(shot, config))
        for shot in shots or ()
        if shot is not None
    ]
    reverse = direction == "desc"

    if key == "distance":
        ordered = sorted(decorated, key=lambda item: item[1], reverse=reverse)
    elif key == "category":
        ordered = sorted(decorated, key=lambda item: item[2], reverse=reverse)
    elif key == "category_distance":
        ordered = sorted(decorated, key=lambda item: (item[2], -item[1]))
    elif key == "distance_category":
        ordered = sorted(decorated, key=lambda item: (-item[1], item[2]))
    else:
        logger.debug("unknown shot sort key %r; keeping input order", key)
        ordered = decorated

    return [shot for shot, _, _ in ordered]


__all__ = ["SortDirection", "SortKey", "category_sort_name", "sort_shots"]
