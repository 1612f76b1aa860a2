from __future__ import annotations

from typing import List

from .models import Category, ShotConfig, ShotTypeDefinition


UNCATEGORIZED_SORT_KEY = "ZZZ"

DEFAULT_CATEGORIES = (
    ("cat_long", "Long Game"),
    ("cat_approach", "Approach"),
    ("cat_short", "Short Game"),
)

DEFAULT_SHOT_TYPES = (
    ("st_full", "Full", ("cat_long",)),
    ("st_3_4", "3/4 Swing", ("cat_long", "cat_approach")),
    ("st_1_2", "1/2 Swing", ("cat_approach", "cat_short")),
    ("st_pitch", "Pitch", ("cat_short",)),
    ("st_chip", "Chip", ("cat_short",)),
)


def _default_categories() -> List[Category]:
    return [Category(id=cat_id, name=name) for cat_id, name in DEFAULT_CATEGORIES]


def _default_shot_types() -> List[ShotTypeDefinition]:
    return [
        ShotTypeDefinition(id=st_id, name=name, category_ids=list(category_ids))
        for st_id, name, category_ids in DEFAULT_SHOT_TYPES
    ]


def build_default_shot_config() -> ShotConfig:
    """Return a fresh copy of the stock category/shot-type configuration."""
    return ShotConfig(categories=_default_categories(), shot_types=_default_shot_types())


DEFAULT_SHOT_CONFIG = build_default_shot_config()


def resolve_shot_config(
    shot_types: List[ShotTypeDefinition] | None = None,
    categories: List[Category] | None = None,
) -> ShotConfig:
    """Fill in whichever half of the configuration the caller left out."""
    if shot_types is None and categories is None:
        return DEFAULT_SHOT_CONFIG
    return ShotConfig(
        categories=(
            list(categories) if categories is not None else DEFAULT_SHOT_CONFIG.categories
        ),
        shot_types=(
            list(shot_types) if shot_types is not None else DEFAULT_SHOT_CONFIG.shot_types
        ),
    )


__all__ = [
    "DEFAULT_CATEGORIES",
    "DEFAULT_SHOT_CONFIG",
    "DEFAULT_SHOT_TYPES",
    "UNCATEGORIZED_SORT_KEY",
    "build_default_shot_config",
    "resolve_shot_config",
]
