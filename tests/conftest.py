"""
Shared builders for the test suites.

The ``lane`` fixture is a quiet mid-game position in which only the
catch-all strategy applies: both heroes at full health, far apart, on the
same row, no creeps, no shop items.
"""

from __future__ import annotations

from typing import Dict, Iterable

import pytest

from botters_engine.core.state import GameSetup, Item, Unit, UnitCollection, WorldSnapshot
from botters_engine.utils.constants import KIND_HERO, KIND_TOWER, KIND_UNIT


def build_unit(
    id: int = 1,
    team: int = 0,
    kind: str = KIND_UNIT,
    x: int = 0,
    y: int = 0,
    **stats,
) -> Unit:
    defaults = dict(
        attack_range=100,
        health=100,
        max_health=100,
        attack_damage=10,
        movement_speed=100,
    )
    defaults.update(stats)
    return Unit(id=id, team=team, kind=kind, x=x, y=y, **defaults)


def build_snapshot(
    *units: Unit,
    my_team: int = 0,
    gold: int = 0,
    items: Iterable[Item] = (),
    round_type: int = 1,
) -> WorldSnapshot:
    return WorldSnapshot(
        setup=GameSetup(my_team=my_team, items=tuple(items)),
        units=UnitCollection(units),
        gold=gold,
        enemy_gold=0,
        round_type=round_type,
    )


@pytest.fixture()
def make_unit():
    return build_unit


@pytest.fixture()
def make_snapshot():
    return build_snapshot


@pytest.fixture()
def lane() -> Dict[str, Unit]:
    hero = dict(attack_range=150, health=1000, max_health=1000, attack_damage=80, movement_speed=200)
    tower = dict(attack_range=400, health=3000, max_health=3000, attack_damage=100, movement_speed=0)
    return {
        "my_hero": build_unit(1, 0, KIND_HERO, 600, 590, hero_type="HULK", **hero),
        "my_tower": build_unit(2, 0, KIND_TOWER, 100, 590, **tower),
        "enemy_hero": build_unit(3, 1, KIND_HERO, 1300, 590, hero_type="VALKYRIE", **hero),
        "enemy_tower": build_unit(4, 1, KIND_TOWER, 1820, 590, **tower),
    }
