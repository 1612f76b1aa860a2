"""Shared pytest fixtures for engine tests."""

from __future__ import annotations

import pytest

from clubgap.bag.models import Bag, BagSnapshot, Club, Shot
from clubgap.bag.service import get_bag_insights_service
from clubgap.config import reset_settings_cache


def make_shot(
    shot_type: str,
    carry: float,
    carry_variance: float = 0.0,
    total: float | None = None,
    total_variance: float | None = None,
    unit: str = "meters",
    **extra,
) -> Shot:
    return Shot(
        shot_type=shot_type,
        carry_median=carry,
        carry_variance=carry_variance,
        total_median=carry if total is None else total,
        total_variance=carry_variance if total_variance is None else total_variance,
        unit=unit,
        **extra,
    )


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "CLUBGAP_DISPLAY_UNIT",
        "CLUBGAP_GAP_CATEGORIES",
        "CLUBGAP_CHART_DEFAULT_MAX",
        "CLUBGAP_CHART_MIN_PADDING",
        "CLUBGAP_CHART_PADDING_FRACTION",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    get_bag_insights_service.cache_clear()
    yield
    reset_settings_cache()
    get_bag_insights_service.cache_clear()


@pytest.fixture
def bag_snapshot() -> BagSnapshot:
    driver = Club(
        id="driver",
        name="Driver",
        type="Wood",
        shots=[make_shot("Full", 210, 8, total=230, total_variance=10)],
    )
    seven = Club(
        id="7i",
        name="7 Iron",
        type="Iron",
        loft="34°",
        shots=[
            make_shot("Full", 140, 8, total=150, total_variance=5),
            make_shot("1/2 Swing", 95, 5, total=100, total_variance=5),
        ],
    )
    wedge = Club(
        id="sw",
        name="Sand Wedge",
        type="Wedge",
        shots=[
            make_shot("Pitch", 55, 4, total=60, total_variance=4),
            make_shot("Chip", 15, 3, total=25, total_variance=5),
        ],
    )
    putter = Club(id="putter", name="Putter", type="Putter")
    return BagSnapshot(
        clubs=[driver, seven, wedge, putter],
        bags=[
            Bag(id="tournament", name="Tournament", club_ids={"driver", "7i", "putter"}),
            Bag(id="practice", name="Practice", club_ids={"sw"}, is_default=True),
        ],
    )
