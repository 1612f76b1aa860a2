"""Configuration helpers for engine defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


__all__ = [
    "_Settings",
    "CHART_DEFAULT_MIN",
    "UNIT_ALIASES",
    "get_settings",
    "reset_settings_cache",
]

UNIT_ALIASES = {
    "yd": "yards",
    "yds": "yards",
    "yard": "yards",
    "yards": "yards",
    "m": "meters",
    "meter": "meters",
    "meters": "meters",
    "metre": "meters",
    "metres": "meters",
}

CHART_DEFAULT_MIN: float = 0.0


@dataclass(frozen=True)
class _Settings:
    display_unit: str = "meters"
    gap_category_ids: frozenset[str] = frozenset({"cat_long"})
    chart_default_max: float = 300.0
    chart_min_padding: float = 10.0
    chart_padding_fraction: float = 0.10


@lru_cache(maxsize=1)
def get_settings() -> _Settings:
    """Return cached engine settings."""

    return _Settings(
        display_unit=_unit_env("CLUBGAP_DISPLAY_UNIT", "meters"),
        gap_category_ids=_csv_env("CLUBGAP_GAP_CATEGORIES", ("cat_long",)),
        chart_default_max=_float_env("CLUBGAP_CHART_DEFAULT_MAX", 300.0),
        chart_min_padding=_float_env("CLUBGAP_CHART_MIN_PADDING", 10.0),
        chart_padding_fraction=_float_env("CLUBGAP_CHART_PADDING_FRACTION", 0.10),
    )


def reset_settings_cache() -> None:
    """Clear cached settings (primarily for tests)."""

    get_settings.cache_clear()


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _unit_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    return UNIT_ALIASES.get(value.strip().lower(), default)


def _csv_env(name: str, default: tuple[str, ...]) -> frozenset[str]:
    value = os.getenv(name)
    if value is None:
        return frozenset(default)
    return frozenset(item.strip() for item in value.split(",") if item.strip())
