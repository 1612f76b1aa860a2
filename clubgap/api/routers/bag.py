"""HTTP surface for the bag distance engine.

Each request carries the player's snapshot; nothing is stored between calls.
"""

from __future__ import annotations

import logging
import time
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from clubgap.bag.models import (
    BagSnapshot,
    ChartScale,
    Club,
    ClubRangeSummary,
    DistanceRange,
    GapChart,
    Shot,
    ShotConfig,
    ShotSuggestion,
)
from clubgap.bag.service import BagInsightsService, get_bag_insights_service
from clubgap.bag.sorting import SortDirection, SortKey
from clubgap.bag.units import Metric
from clubgap.metrics import record_lookup

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bag", tags=["bag"])


class RangeIn(BaseModel):
    shots: List[Shot] = Field(default_factory=list)
    metric: Metric = "total"
    display_unit: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("displayUnit", "display_unit")
    )

    model_config = ConfigDict(populate_by_name=True)


class ClubRangesIn(BaseModel):
    club: Club
    shot_config: Optional[ShotConfig] = Field(
        default=None, validation_alias=AliasChoices("shotConfig", "shot_config")
    )
    display_unit: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("displayUnit", "display_unit")
    )

    model_config = ConfigDict(populate_by_name=True)


class SortIn(BaseModel):
    shots: List[Shot] = Field(default_factory=list)
    shot_config: Optional[ShotConfig] = Field(
        default=None, validation_alias=AliasChoices("shotConfig", "shot_config")
    )
    display_unit: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("displayUnit", "display_unit")
    )
    key: SortKey = "distance"
    direction: SortDirection = "desc"

    model_config = ConfigDict(populate_by_name=True)


class GapsIn(BagSnapshot):
    metric: Metric = "total"
    display_unit: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("displayUnit", "display_unit")
    )
    bag_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("bagId", "bag_id")
    )
    category_ids: Optional[List[str]] = Field(
        default=None, validation_alias=AliasChoices("categoryIds", "category_ids")
    )
    all_categories: bool = Field(
        default=False, validation_alias=AliasChoices("allCategories", "all_categories")
    )


class LookupIn(BagSnapshot):
    """Either a carry or a total target; typing in one field clears the other."""

    carry: Optional[float] = None
    total: Optional[float] = None
    display_unit: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("displayUnit", "display_unit")
    )
    bag_id: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("bagId", "bag_id")
    )

    @model_validator(mode="after")
    def _one_target(self) -> "LookupIn":
        if self.carry is not None and self.total is not None:
            raise ValueError("Provide either carry or total, not both")
        return self

    def target(self) -> tuple[Optional[float], Metric]:
        if self.carry is not None:
            return self.carry, "carry"
        return self.total, "total"


@router.post("/range", response_model=Optional[DistanceRange])
def post_range(
    payload: RangeIn,
    service: BagInsightsService = Depends(get_bag_insights_service),
) -> DistanceRange | None:
    return service.aggregate(payload.shots, payload.metric, payload.display_unit)


@router.post("/chart-scale", response_model=ChartScale)
def post_chart_scale(
    payload: RangeIn,
    service: BagInsightsService = Depends(get_bag_insights_service),
) -> ChartScale:
    return service.chart_scale(payload.shots, payload.display_unit)


@router.post("/club-ranges", response_model=ClubRangeSummary)
def post_club_ranges(
    payload: ClubRangesIn,
    service: BagInsightsService = Depends(get_bag_insights_service),
) -> ClubRangeSummary:
    return service.club_ranges(payload.club, payload.shot_config, payload.display_unit)


@router.post("/sort", response_model=List[Shot])
def post_sort(
    payload: SortIn,
    service: BagInsightsService = Depends(get_bag_insights_service),
) -> List[Shot]:
    return service.sort_shots(
        payload.shots,
        payload.shot_config,
        payload.display_unit,
        payload.key,
        payload.direction,
    )


@router.post("/gaps", response_model=GapChart)
def post_gaps(
    payload: GapsIn,
    service: BagInsightsService = Depends(get_bag_insights_service),
) -> GapChart:
    return service.gap_chart(
        payload,
        metric=payload.metric,
        display_unit=payload.display_unit,
        bag_id=payload.bag_id,
        category_ids=payload.category_ids,
        all_categories=payload.all_categories,
    )


@router.post("/lookup", response_model=List[ShotSuggestion])
def post_lookup(
    payload: LookupIn,
    service: BagInsightsService = Depends(get_bag_insights_service),
) -> List[ShotSuggestion]:
    start = time.perf_counter()
    query, metric = payload.target()
    suggestions = service.lookup(
        payload,
        query if query is not None else 0.0,
        metric,
        display_unit=payload.display_unit,
        bag_id=payload.bag_id,
    )

    if not suggestions:
        outcome = "empty"
    elif suggestions[0].is_exact:
        outcome = "exact"
    else:
        outcome = "nearest"
    record_lookup(outcome)
    logger.info(
        "bag_lookup",
        extra={
            "bag_lookup": {
                "metric": metric,
                "outcome": outcome,
                "results": len(suggestions),
                "duration_ms": (time.perf_counter() - start) * 1000,
            }
        },
    )
    return suggestions


__all__ = [
    "router",
    "post_chart_scale",
    "post_club_ranges",
    "post_gaps",
    "post_lookup",
    "post_range",
    "post_sort",
]
