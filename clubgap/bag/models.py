from __future__ import annotations

import logging
from typing import Any, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .units import Metric, as_distance, convert_distance, normalize_unit, round_distance

logger = logging.getLogger(__name__)

Launch = Literal["Low", "Medium", "High"]
Roll = Literal["Minimal", "Soft Release", "Runs"]
SuggestionLabel = Literal["Nearest Shorter", "Nearest Longer"]

_LAUNCH_VALUES = {"Low", "Medium", "High"}
_ROLL_VALUES = {"Minimal", "Soft Release", "Runs"}


def _coerce_id(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _tag_set(value: Any) -> set[str]:
    if value is None:
        return set()
    if isinstance(value, str):
        value = [value]
    tags: set[str] = set()
    for item in value:
        if isinstance(item, str) and item.strip():
            tags.add(item.strip())
    return tags


class Shot(BaseModel):
    """One logged shot type for a club, expressed as median ± variance."""

    id: Optional[str] = None
    shot_type: str = Field(
        default="",
        alias="shotType",
        validation_alias=AliasChoices("shotType", "shot_type"),
    )
    carry_median: float = Field(
        default=0.0,
        alias="carryMedian",
        validation_alias=AliasChoices("carryMedian", "carry_median", "carry_distance"),
    )
    carry_variance: float = Field(
        default=0.0,
        alias="carryVariance",
        validation_alias=AliasChoices("carryVariance", "carry_variance"),
    )
    total_median: float = Field(
        default=0.0,
        alias="totalMedian",
        validation_alias=AliasChoices("totalMedian", "total_median", "total_distance"),
    )
    total_variance: float = Field(
        default=0.0,
        alias="totalVariance",
        validation_alias=AliasChoices("totalVariance", "total_variance"),
    )
    unit: str = "yards"
    tendencies: set[str] = Field(
        default_factory=set,
        validation_alias=AliasChoices("tendencies", "tendency"),
    )
    swing_keys: set[str] = Field(
        default_factory=set,
        alias="swingKeys",
        validation_alias=AliasChoices("swingKeys", "swing_keys", "swing_key"),
    )
    launch: Optional[Launch] = None
    roll: Optional[Roll] = None

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("shot_type", mode="before")
    @classmethod
    def _shot_type_to_str(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator(
        "carry_median", "carry_variance", "total_median", "total_variance", mode="before"
    )
    @classmethod
    def _coerce_distance(cls, value: Any) -> float:
        return as_distance(value)

    @field_validator("carry_variance", "total_variance")
    @classmethod
    def _clamp_variance(cls, value: float) -> float:
        return max(0.0, value)

    @field_validator("unit", mode="before")
    @classmethod
    def _normalize_unit(cls, value: Any) -> str:
        if value is None:
            return "yards"
        unit = normalize_unit(value)
        if unit is None:
            # kept as given; conversion passes unknown units through
            logger.debug("keeping unknown distance unit %r", value)
            return str(value)
        return unit

    @field_validator("tendencies", "swing_keys", mode="before")
    @classmethod
    def _normalize_tags(cls, value: Any) -> set[str]:
        return _tag_set(value)

    @field_validator("launch", mode="before")
    @classmethod
    def _known_launch(cls, value: Any) -> Any:
        if value is not None and value not in _LAUNCH_VALUES:
            logger.debug("dropping unknown launch value %r", value)
            return None
        return value

    @field_validator("roll", mode="before")
    @classmethod
    def _known_roll(cls, value: Any) -> Any:
        if value is not None and value not in _ROLL_VALUES:
            logger.debug("dropping unknown roll value %r", value)
            return None
        return value

    def distance(self, metric: Metric, display_unit: str) -> tuple[float, float]:
        """Return ``(median, variance)`` for *metric* in *display_unit*."""
        if metric == "carry":
            median, variance = self.carry_median, self.carry_variance
        else:
            median, variance = self.total_median, self.total_variance
        return (
            convert_distance(median, self.unit, display_unit),
            convert_distance(variance, self.unit, display_unit),
        )


class Club(BaseModel):
    id: str
    name: str = ""
    type: Optional[str] = None
    loft: Optional[str] = None
    shots: List[Shot] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", "loft", mode="before")
    @classmethod
    def _to_str(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("shots", mode="before")
    @classmethod
    def _shots_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Bag(BaseModel):
    id: str
    name: str = ""
    club_ids: set[str] = Field(
        default_factory=set,
        alias="clubIds",
        validation_alias=AliasChoices("clubIds", "club_ids", "bag_clubs"),
    )
    is_default: bool = Field(
        default=False,
        alias="isDefault",
        validation_alias=AliasChoices("isDefault", "is_default"),
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("club_ids", mode="before")
    @classmethod
    def _club_id_set(cls, value: Any) -> set[str]:
        ids: set[str] = set()
        for item in value or []:
            # embedded join rows look like {"club_id": 1}
            if isinstance(item, dict):
                item = item.get("club_id", item.get("clubId"))
            if item is None or isinstance(item, bool):
                continue
            ids.add(str(item))
        return ids


class Category(BaseModel):
    id: str
    name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return _coerce_id(value)


class ShotTypeDefinition(BaseModel):
    id: Optional[str] = None
    name: str
    category_ids: List[str] = Field(
        default_factory=list,
        alias="categoryIds",
        validation_alias=AliasChoices("categoryIds", "category_ids"),
    )

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("id", mode="before")
    @classmethod
    def _id_to_str(cls, value: Any) -> Any:
        return _coerce_id(value)

    @field_validator("category_ids", mode="before")
    @classmethod
    def _ordered_unique_ids(cls, value: Any) -> list[str]:
        ids = [str(item) for item in value or [] if item is not None and item != ""]
        return list(dict.fromkeys(ids))


class ShotConfig(BaseModel):
    """User-defined categories and the shot types that map onto them."""

    categories: List[Category] = Field(default_factory=list)
    shot_types: List[ShotTypeDefinition] = Field(
        default_factory=list,
        alias="shotTypes",
        validation_alias=AliasChoices("shotTypes", "shot_types"),
    )

    model_config = ConfigDict(populate_by_name=True)

    def definition_for(self, shot_type: str) -> ShotTypeDefinition | None:
        """Resolve a shot's type by definition name, then by definition id."""
        for definition in self.shot_types:
            if definition.name == shot_type:
                return definition
        for definition in self.shot_types:
            if definition.id is not None and definition.id == str(shot_type):
                return definition
        return None

    def category_ids_for(self, shot_type: str) -> list[str]:
        definition = self.definition_for(shot_type)
        return list(definition.category_ids) if definition else []

    def category_names_for(self, shot_type: str) -> list[str]:
        names = {category.id: category.name for category in self.categories}
        return [names[cid] for cid in self.category_ids_for(shot_type) if cid in names]


class BagSnapshot(BaseModel):
    """Everything the engine needs for one player, fetched fresh per request."""

    clubs: List[Club] = Field(default_factory=list)
    bags: List[Bag] = Field(default_factory=list)
    shot_config: Optional[ShotConfig] = Field(
        default=None,
        alias="shotConfig",
        validation_alias=AliasChoices("shotConfig", "shot_config"),
    )

    model_config = ConfigDict(populate_by_name=True)


class DistanceRange(BaseModel):
    lower_bound: float = Field(alias="lowerBound")
    central: float
    upper_bound: float = Field(alias="upperBound")

    model_config = ConfigDict(populate_by_name=True)

    def rounded(self) -> DistanceRange:
        return DistanceRange(
            lower_bound=round_distance(self.lower_bound),
            central=round_distance(self.central),
            upper_bound=round_distance(self.upper_bound),
        )


class ChartScale(BaseModel):
    min_distance: float = Field(alias="min")
    max_distance: float = Field(alias="max")

    model_config = ConfigDict(populate_by_name=True)


class CategoryRange(BaseModel):
    category_id: str = Field(alias="categoryId")
    name: str
    shot_count: int = Field(alias="shotCount")
    carry: DistanceRange
    total: DistanceRange

    model_config = ConfigDict(populate_by_name=True)


class ClubRangeSummary(BaseModel):
    club_id: str = Field(alias="clubId")
    name: str
    display_unit: str = Field(alias="displayUnit")
    categories: List[CategoryRange]
    scale: ChartScale

    model_config = ConfigDict(populate_by_name=True)


class ClubGap(BaseModel):
    club_id: str = Field(alias="clubId")
    name: str
    min_distance: float = Field(alias="min")
    max_distance: float = Field(alias="max")
    central: float
    gap_to_next: float | None = Field(default=None, alias="gapToNext")

    model_config = ConfigDict(populate_by_name=True)

    def rounded(self) -> ClubGap:
        return ClubGap(
            club_id=self.club_id,
            name=self.name,
            min_distance=round_distance(self.min_distance),
            max_distance=round_distance(self.max_distance),
            central=round_distance(self.central),
            gap_to_next=(
                round_distance(self.gap_to_next) if self.gap_to_next is not None else None
            ),
        )


class GapChart(BaseModel):
    """Gapping chart rows plus the domain every bar is drawn against."""

    gaps: List[ClubGap] = Field(default_factory=list)
    scale: ChartScale

    model_config = ConfigDict(populate_by_name=True)


class ShotSuggestion(BaseModel):
    club_id: str = Field(alias="clubId")
    club_name: str = Field(alias="clubName")
    shot: Shot
    metric: Metric
    median: float
    variance: float
    lower_bound: float = Field(alias="lowerBound")
    upper_bound: float = Field(alias="upperBound")
    diff: float
    is_exact: bool = Field(default=False, alias="isExact")
    label: SuggestionLabel | None = None
    carry: DistanceRange
    total: DistanceRange

    model_config = ConfigDict(populate_by_name=True)


__all__ = [
    "Bag",
    "BagSnapshot",
    "Category",
    "CategoryRange",
    "ChartScale",
    "Club",
    "ClubGap",
    "ClubRangeSummary",
    "DistanceRange",
    "GapChart",
    "Launch",
    "Roll",
    "Shot",
    "ShotConfig",
    "ShotSuggestion",
    "ShotTypeDefinition",
    "SuggestionLabel",
]
