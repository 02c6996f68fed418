"""
Line-protocol reader.

Turns the game's text input into :class:`GameSetup` (once per match) and
:class:`WorldSnapshot` (once per turn).  *lines* is any iterator of
strings: ``sys.stdin`` in production, a plain list in tests.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

from botters_engine.core.state import (
    GameSetup,
    Item,
    TerrainEntity,
    Unit,
    UnitCollection,
    WorldSnapshot,
)
from botters_engine.utils.constants import (
    ITEM_RECORD_FIELDS,
    TERRAIN_RECORD_FIELDS,
    UNIT_KINDS,
    UNIT_RECORD_FIELDS,
)

logger = logging.getLogger("botters_engine.protocol")


class ProtocolError(ValueError):
    """Input the bot cannot make sense of.  The turn loop cannot continue."""


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines).strip()
    except StopIteration:
        raise ProtocolError(f"Unexpected end of input while reading {what}") from None


def _int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ProtocolError(f"Expected an integer for {what}, got {token!r}") from None


def _read_int(lines: Iterator[str], what: str) -> int:
    return _int(_next_line(lines, what), what)


def _fields(lines: Iterator[str], what: str, expected: int) -> List[str]:
    fields = _next_line(lines, what).split()
    if len(fields) != expected:
        raise ProtocolError(f"{what}: expected {expected} fields, got {len(fields)}")
    return fields


# ── setup ─────────────────────────────────────────────────────────────────────


def parse_terrain(fields: List[str]) -> TerrainEntity:
    return TerrainEntity(
        entity_type=fields[0],
        x=_int(fields[1], "terrain x"),
        y=_int(fields[2], "terrain y"),
        radius=_int(fields[3], "terrain radius"),
    )


def parse_item(fields: List[str]) -> Item:
    name = fields[0]
    stats = [_int(f, f"item {name}") for f in fields[1:]]
    cost, damage, health, max_health, mana, max_mana, move_speed, regen, is_potion = stats
    return Item(
        name=name,
        cost=cost,
        damage=damage,
        health=health,
        max_health=max_health,
        mana=mana,
        max_mana=max_mana,
        move_speed=move_speed,
        mana_regeneration=regen,
        is_potion=is_potion != 0,
    )


def read_game_setup(lines: Iterator[str]) -> GameSetup:
    """Read my team id, bushes / spawn points and the item catalogue."""
    my_team = _read_int(lines, "my team")

    terrain_count = _read_int(lines, "bush and spawn point count")
    terrain = tuple(
        parse_terrain(_fields(lines, "terrain record", TERRAIN_RECORD_FIELDS))
        for _ in range(terrain_count)
    )

    item_count = _read_int(lines, "item count")
    items = tuple(
        parse_item(_fields(lines, "item record", ITEM_RECORD_FIELDS)) for _ in range(item_count)
    )

    logger.debug(
        "Game setup: team=%d, %d terrain entities, %d items", my_team, len(terrain), len(items)
    )
    return GameSetup(my_team=my_team, terrain=terrain, items=items)


# ── turn ──────────────────────────────────────────────────────────────────────


def parse_unit(fields: List[str]) -> Unit:
    """Build a :class:`Unit` from one 22-field record."""
    kind = fields[2].upper()
    if kind not in UNIT_KINDS:
        raise ProtocolError(f"Unknown unit kind: {fields[2]!r}")
    n = [_int(f, "unit record") for f in fields[:2]] + [_int(f, "unit record") for f in fields[3:19]]
    (
        unit_id, team,
        x, y, attack_range, health, max_health, shield, attack_damage, movement_speed,
        stun_duration, gold_value, cd1, cd2, cd3, mana, max_mana, mana_regen,
    ) = n
    return Unit(
        id=unit_id,
        team=team,
        kind=kind,
        x=x,
        y=y,
        attack_range=attack_range,
        health=health,
        max_health=max_health,
        shield=shield,
        attack_damage=attack_damage,
        movement_speed=movement_speed,
        stun_duration=stun_duration,
        gold_value=gold_value,
        countdown1=cd1,
        countdown2=cd2,
        countdown3=cd3,
        mana=mana,
        max_mana=max_mana,
        mana_regeneration=mana_regen,
        hero_type=fields[19],
        is_visible=_int(fields[20], "unit visibility"),
        items_owned=_int(fields[21], "unit items owned"),
    )


def read_turn(lines: Iterator[str], setup: GameSetup) -> WorldSnapshot:
    """
    Read one turn.

    Raises :class:`EOFError` when the input ends cleanly before the turn
    starts, :class:`ProtocolError` when it ends or breaks inside a turn.
    """
    try:
        first = next(lines)
    except StopIteration:
        raise EOFError("No more turns") from None

    gold = _int(first.strip(), "gold")
    enemy_gold = _read_int(lines, "enemy gold")
    round_type = _read_int(lines, "round type")
    entity_count = _read_int(lines, "entity count")
    units = UnitCollection(
        parse_unit(_fields(lines, "unit record", UNIT_RECORD_FIELDS)) for _ in range(entity_count)
    )
    return WorldSnapshot(
        setup=setup,
        units=units,
        gold=gold,
        enemy_gold=enemy_gold,
        round_type=round_type,
    )
