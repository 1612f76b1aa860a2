from .chart import chart_scale, gap_chart_scale
from .defaults import DEFAULT_SHOT_CONFIG, build_default_shot_config
from .gapping import bag_gaps
from .lookup import lookup_distance
from .models import (
    Bag,
    BagSnapshot,
    Category,
    ChartScale,
    Club,
    ClubGap,
    ClubRangeSummary,
    DistanceRange,
    GapChart,
    Shot,
    ShotConfig,
    ShotSuggestion,
    ShotTypeDefinition,
)
from .ranges import aggregate_range, club_range_summary
from .service import BagInsightsService, clubs_for_bag, get_bag_insights_service
from .sorting import sort_shots
from .units import convert_distance, round_distance

__all__ = [
    "DEFAULT_SHOT_CONFIG",
    "Bag",
    "BagInsightsService",
    "BagSnapshot",
    "Category",
    "ChartScale",
    "Club",
    "ClubGap",
    "ClubRangeSummary",
    "DistanceRange",
    "GapChart",
    "Shot",
    "ShotConfig",
    "ShotSuggestion",
    "ShotTypeDefinition",
    "aggregate_range",
    "bag_gaps",
    "build_default_shot_config",
    "chart_scale",
    "club_range_summary",
    "gap_chart_scale",
    "clubs_for_bag",
    "convert_distance",
    "get_bag_insights_service",
    "lookup_distance",
    "round_distance",
    "sort_shots",
]
