from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Callable, Iterable, List, Sequence, TypeVar

from clubgap.config import _Settings, get_settings

from .chart import chart_scale, gap_chart_scale
from .defaults import DEFAULT_SHOT_CONFIG
from .gapping import bag_gaps
from .lookup import lookup_distance
from .models import (
    Bag,
    BagSnapshot,
    ChartScale,
    Club,
    ClubGap,
    ClubRangeSummary,
    DistanceRange,
    GapChart,
    Shot,
    ShotConfig,
    ShotSuggestion,
)
from .ranges import aggregate_range, club_range_summary
from .sorting import SortDirection, SortKey, sort_shots
from .units import Metric, normalize_unit

logger = logging.getLogger(__name__)

ALL_CLUBS = "all"
DEFAULT_BAG = "default"

T = TypeVar("T")


def default_bag(bags: Iterable[Bag]) -> Bag | None:
    """Return the player's default bag; the first flagged one wins."""
    flagged = [bag for bag in bags if bag.is_default]
    if len(flagged) > 1:
        logger.warning(
            "%d bags flagged as default, using %s", len(flagged), flagged[0].id
        )
    return flagged[0] if flagged else None


def clubs_for_bag(
    clubs: Sequence[Club], bags: Sequence[Bag], bag_id: str | None
) -> List[Club]:
    """Restrict *clubs* to the members of *bag_id*, keeping input order.

    ``None`` or ``"all"`` keeps every club. ``"default"`` picks the default bag
    and falls back to every club when none is flagged. An unknown id selects
    nothing.
    """
    if bag_id is None or bag_id == ALL_CLUBS:
        return list(clubs)

    if bag_id == DEFAULT_BAG:
        bag = default_bag(bags)
        if bag is None:
            logger.debug("no default bag flagged; using all clubs")
            return list(clubs)
    else:
        bag = next((b for b in bags if b.id == str(bag_id)), None)
        if bag is None:
            logger.debug("bag %s not in snapshot", bag_id)
            return []

    return [club for club in clubs if club.id in bag.club_ids]


class BagInsightsService:
    """Facade over the distance engine that fills in configured defaults.

    Every call works on the snapshot it is given and keeps nothing between
    calls. Unexpected failures are logged and degrade to an empty result so a
    partially broken snapshot never takes the page down.
    """

    def __init__(self, settings: _Settings | None = None) -> None:
        self._settings = settings

    @property
    def settings(self) -> _Settings:
        return self._settings or get_settings()

    def display_unit(self, unit: str | None) -> str:
        return normalize_unit(unit) or self.settings.display_unit

    @staticmethod
    def shot_config(config: ShotConfig | None) -> ShotConfig:
        return config if config is not None else DEFAULT_SHOT_CONFIG

    def _guarded(self, operation: str, fallback: T, func: Callable[..., T], *args: Any) -> T:
        try:
            return func(*args)
        except Exception:
            logger.exception("bag %s failed, returning fallback", operation)
            return fallback

    def aggregate(
        self, shots: Sequence[Shot], metric: Metric, display_unit: str | None = None
    ) -> DistanceRange | None:
        return self._guarded(
            "aggregate", None, aggregate_range, shots, metric, self.display_unit(display_unit)
        )

    def chart_scale(
        self, shots: Sequence[Shot], display_unit: str | None = None
    ) -> ChartScale:
        unit = self.display_unit(display_unit)
        settings = self.settings
        return self._guarded(
            "chart_scale",
            chart_scale((), unit, settings),
            chart_scale,
            shots,
            unit,
            settings,
        )

    def club_ranges(
        self,
        club: Club,
        shot_config: ShotConfig | None = None,
        display_unit: str | None = None,
    ) -> ClubRangeSummary:
        unit = self.display_unit(display_unit)
        fallback = ClubRangeSummary(
            club_id=club.id,
            name=club.name,
            display_unit=unit,
            categories=[],
            scale=chart_scale((), unit, self.settings),
        )
        return self._guarded(
            "club_ranges",
            fallback,
            club_range_summary,
            club,
            self.shot_config(shot_config),
            unit,
            self.settings,
        )

    def sort_shots(
        self,
        shots: Sequence[Shot],
        shot_config: ShotConfig | None = None,
        display_unit: str | None = None,
        key: SortKey = "distance",
        direction: SortDirection = "desc",
    ) -> List[Shot]:
        config = self.shot_config(shot_config)
        return self._guarded(
            "sort",
            list(shots),
            sort_shots,
            shots,
            config.shot_types,
            config.categories,
            self.display_unit(display_unit),
            key,
            direction,
        )

    def gaps(
        self,
        snapshot: BagSnapshot,
        metric: Metric = "total",
        display_unit: str | None = None,
        bag_id: str | None = None,
        category_ids: Iterable[str] | None = None,
        all_categories: bool = False,
    ) -> List[ClubGap]:
        """Gapping chart rows for the chosen bag.

        Without *category_ids* the configured gapping categories apply;
        *all_categories* switches to the unscoped view.
        """
        if all_categories:
            selected = None
        elif category_ids is None:
            selected = set(self.settings.gap_category_ids)
        else:
            selected = set(category_ids)
        config = self.shot_config(snapshot.shot_config)
        clubs = clubs_for_bag(snapshot.clubs, snapshot.bags, bag_id)
        return self._guarded(
            "gaps",
            [],
            bag_gaps,
            clubs,
            selected,
            metric,
            self.display_unit(display_unit),
            config.shot_types,
            config.categories,
        )

    def gap_chart(
        self,
        snapshot: BagSnapshot,
        metric: Metric = "total",
        display_unit: str | None = None,
        bag_id: str | None = None,
        category_ids: Iterable[str] | None = None,
        all_categories: bool = False,
    ) -> GapChart:
        """:meth:`gaps` together with the domain shared by every bar."""
        gaps = self.gaps(
            snapshot,
            metric=metric,
            display_unit=display_unit,
            bag_id=bag_id,
            category_ids=category_ids,
            all_categories=all_categories,
        )
        settings = self.settings
        scale = self._guarded(
            "gap_chart_scale",
            gap_chart_scale((), settings),
            gap_chart_scale,
            gaps,
            settings,
        )
        return GapChart(gaps=gaps, scale=scale)

    def lookup(
        self,
        snapshot: BagSnapshot,
        query: float,
        metric: Metric = "total",
        display_unit: str | None = None,
        bag_id: str | None = None,
    ) -> List[ShotSuggestion]:
        clubs = clubs_for_bag(snapshot.clubs, snapshot.bags, bag_id)
        return self._guarded(
            "lookup",
            [],
            lookup_distance,
            query,
            metric,
            clubs,
            self.display_unit(display_unit),
        )


@lru_cache(maxsize=1)
def get_bag_insights_service() -> BagInsightsService:
    return BagInsightsService()


__all__ = [
    "ALL_CLUBS",
    "DEFAULT_BAG",
    "BagInsightsService",
    "clubs_for_bag",
    "default_bag",
    "get_bag_insights_service",
]
