from __future__ import annotations

import logging

import pytest

from clubgap.bag.defaults import (
    DEFAULT_SHOT_CONFIG,
    build_default_shot_config,
    resolve_shot_config,
)
from clubgap.bag.models import (
    Bag,
    BagSnapshot,
    Category,
    Club,
    DistanceRange,
    Shot,
    ShotConfig,
    ShotTypeDefinition,
)


def test_shot_accepts_camel_case_payload() -> None:
    shot = Shot.model_validate(
        {
            "id": 12,
            "shotType": "Full",
            "carryMedian": 150,
            "carryVariance": 6,
            "totalMedian": "162.5",
            "totalVariance": 4,
            "unit": "yards",
            "tendencies": ["Push", "Fade", "Push"],
            "swingKeys": ["Tempo"],
            "launch": "High",
            "roll": "Soft Release",
        }
    )

    assert shot.id == "12"
    assert shot.total_median == 162.5
    assert shot.tendencies == {"Push", "Fade"}
    assert shot.swing_keys == {"Tempo"}
    assert (shot.launch, shot.roll) == ("High", "Soft Release")


def test_shot_accepts_stored_row_names() -> None:
    shot = Shot.model_validate(
        {
            "shot_type": "Pitch",
            "carry_distance": 60,
            "total_distance": 68,
            "tendency": "Pull",
            "swing_key": ["Hands quiet"],
            "unit": "m",
        }
    )

    assert (shot.carry_median, shot.total_median) == (60, 68)
    assert shot.tendencies == {"Pull"}
    assert shot.swing_keys == {"Hands quiet"}
    assert shot.unit == "meters"


@pytest.mark.parametrize("value", [None, "", "abc", float("nan"), float("inf"), True])
def test_non_numeric_distances_become_zero(value) -> None:
    shot = Shot(shot_type="Full", carry_median=value, total_median=value)

    assert shot.carry_median == 0
    assert shot.total_median == 0


def test_negative_variance_clamped() -> None:
    shot = Shot(shot_type="Full", carry_median=100, carry_variance=-5, total_variance=-1)

    assert shot.carry_variance == 0
    assert shot.total_variance == 0


def test_unit_defaults_to_yards_and_normalizes_aliases() -> None:
    assert Shot(shot_type="Full").unit == "yards"
    assert Shot(shot_type="Full", unit=None).unit == "yards"
    assert Shot(shot_type="Full", unit=" Metres ").unit == "meters"


def test_unknown_unit_is_kept_and_left_unconverted(
    caplog: pytest.LogCaptureFixture,
) -> None:
    caplog.set_level(logging.DEBUG, logger="clubgap.bag.models")

    shot = Shot(shot_type="Full", carry_median=150, carry_variance=5, unit="feet")

    assert shot.unit == "feet"
    assert shot.distance("carry", "meters") == (150, 5)
    assert "unknown distance unit" in caplog.text


def test_unknown_launch_and_roll_are_dropped(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="clubgap.bag.models")

    shot = Shot(shot_type="Full", launch="Stratospheric", roll="Backspin")

    assert shot.launch is None
    assert shot.roll is None
    assert "unknown launch" in caplog.text


def test_shot_distance_converts_median_and_variance() -> None:
    shot = Shot(
        shot_type="Full",
        carry_median=100,
        carry_variance=10,
        total_median=110,
        total_variance=5,
        unit="meters",
    )

    median, variance = shot.distance("carry", "yards")
    assert median == pytest.approx(109.361)
    assert variance == pytest.approx(10.9361)
    assert shot.distance("total", "meters") == (110, 5)


def test_shot_serializes_with_camel_case_aliases() -> None:
    payload = Shot(shot_type="Chip", carry_median=20).model_dump(by_alias=True)

    assert payload["shotType"] == "Chip"
    assert payload["carryMedian"] == 20
    assert "swingKeys" in payload


def test_club_coerces_ids_and_missing_shots() -> None:
    club = Club.model_validate({"id": 7, "name": "7 Iron", "loft": 34, "shots": None})

    assert club.id == "7"
    assert club.loft == "34"
    assert club.shots == []


def test_bag_reads_membership_rows() -> None:
    bag = Bag.model_validate(
        {
            "id": 3,
            "name": "Links",
            "bag_clubs": [{"club_id": 1}, {"club_id": "2"}, {"club_id": None}],
            "is_default": True,
        }
    )

    assert bag.id == "3"
    assert bag.club_ids == {"1", "2"}
    assert bag.is_default is True


def test_bag_accepts_plain_id_list() -> None:
    bag = Bag.model_validate({"id": "b1", "clubIds": ["driver", 7, True], "isDefault": False})

    assert bag.club_ids == {"driver", "7"}


def test_shot_type_category_ids_keep_order_and_drop_duplicates() -> None:
    definition = ShotTypeDefinition(
        name="Knockdown", category_ids=["cat_long", "", "cat_approach", "cat_long"]
    )

    assert definition.category_ids == ["cat_long", "cat_approach"]


def test_shot_config_resolves_by_name_then_id() -> None:
    config = ShotConfig(
        categories=[Category(id="c1", name="Wind")],
        shot_types=[
            ShotTypeDefinition(id="s1", name="Stinger", category_ids=["c1", "c9"]),
        ],
    )

    assert config.category_ids_for("Stinger") == ["c1", "c9"]
    assert config.category_ids_for("s1") == ["c1", "c9"]
    assert config.category_ids_for("Flop") == []
    assert config.category_names_for("Stinger") == ["Wind"]


def test_default_config_covers_stock_shot_types() -> None:
    assert DEFAULT_SHOT_CONFIG.category_ids_for("3/4 Swing") == ["cat_long", "cat_approach"]
    assert DEFAULT_SHOT_CONFIG.category_names_for("1/2 Swing") == ["Approach", "Short Game"]
    assert [c.id for c in DEFAULT_SHOT_CONFIG.categories] == [
        "cat_long",
        "cat_approach",
        "cat_short",
    ]


def test_build_default_shot_config_returns_independent_copy() -> None:
    config = build_default_shot_config()
    config.shot_types.append(ShotTypeDefinition(name="Flop", category_ids=["cat_short"]))

    assert DEFAULT_SHOT_CONFIG.definition_for("Flop") is None


def test_resolve_shot_config_fills_missing_half() -> None:
    assert resolve_shot_config() is DEFAULT_SHOT_CONFIG

    categories = [Category(id="cat_long", name="Big Sticks")]
    config = resolve_shot_config(categories=categories)

    assert config.category_names_for("Full") == ["Big Sticks"]
    assert config.shot_types == DEFAULT_SHOT_CONFIG.shot_types


def test_snapshot_reads_camel_case_shot_config() -> None:
    snapshot = BagSnapshot.model_validate(
        {
            "clubs": [{"id": "pw", "name": "PW", "shots": [{"shotType": "Full"}]}],
            "bags": [],
            "shotConfig": {
                "categories": [{"id": "x", "name": "X"}],
                "shotTypes": [{"name": "Full", "categoryIds": ["x"]}],
            },
        }
    )

    assert snapshot.shot_config is not None
    assert snapshot.shot_config.category_ids_for("Full") == ["x"]
    assert snapshot.clubs[0].shots[0].unit == "yards"


def test_distance_range_rounds_half_up() -> None:
    band = DistanceRange(lower_bound=132.5, central=137.16, upper_bound=141.49)

    assert band.rounded().model_dump(by_alias=True) == {
        "lowerBound": 133,
        "central": 137,
        "upperBound": 141,
    }
