"""
Per-turn world model.

Provides the canonical :class:`WorldSnapshot` and all its components that
represent a full view of the lane from one team's perspective.  Every
object here is frozen: a snapshot is built fresh each turn and never
mutated while a decision is being made.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, Optional, Sequence, Tuple, overload

import numpy as np

from botters_engine.utils import geometry
from botters_engine.utils.constants import (
    KIND_GROOT,
    KIND_HERO,
    KIND_TOWER,
    NEAR_FACTOR,
    RANGED_THRESHOLD,
)


@dataclass(frozen=True)
class Position:
    """Integer map coordinate."""

    x: int
    y: int


@dataclass(frozen=True)
class Unit:
    """One unit record as reported by the game for this turn."""

    id: int
    team: int
    kind: str  # UNIT | HERO | TOWER | GROOT
    x: int
    y: int
    attack_range: int = 0
    health: int = 1
    max_health: int = 1
    shield: int = 0
    attack_damage: int = 0
    movement_speed: int = 0
    stun_duration: int = 0
    gold_value: int = 0
    countdown1: int = 0
    countdown2: int = 0
    countdown3: int = 0
    mana: int = 0
    max_mana: int = 0
    mana_regeneration: int = 0
    hero_type: str = "-"
    is_visible: int = 1
    items_owned: int = 0

    # ── derived properties ────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def health_percentage(self) -> int:
        """Health as a floored percentage of max health (0-100)."""
        if self.max_health <= 0:
            return 0
        return self.health * 100 // self.max_health

    @property
    def is_ranged(self) -> bool:
        return self.attack_range > RANGED_THRESHOLD

    @property
    def is_trash(self) -> bool:
        """Ordinary lane creep: not a hero, tower or neutral spawn."""
        return self.kind not in (KIND_HERO, KIND_TOWER, KIND_GROOT)

    # ── spatial queries ───────────────────────────────────────────────────

    def distance_from(self, other) -> int:
        return geometry.distance_from(self, other)

    def can_attack(self, other, buffer: int = 0) -> bool:
        return geometry.can_attack(self, other, buffer)

    def is_near(self, other, factor: float = NEAR_FACTOR) -> bool:
        return geometry.is_near(self, other, factor)

    def is_in_front_of(self, other, team: Optional[int] = None) -> bool:
        return geometry.is_in_front_of(self, other, team)


@dataclass(frozen=True)
class Item:
    """An entry of the shop catalogue."""

    name: str
    cost: int
    damage: int = 0
    health: int = 0
    max_health: int = 0
    mana: int = 0
    max_mana: int = 0
    move_speed: int = 0
    mana_regeneration: int = 0
    is_potion: bool = False  # consumed instantly on purchase


@dataclass(frozen=True)
class TerrainEntity:
    """Bush or neutral spawn point, sent once at game start."""

    entity_type: str  # BUSH | SPAWN
    x: int
    y: int
    radius: int


@dataclass(frozen=True)
class GameSetup:
    """One-time game description: my team, terrain and the item catalogue."""

    my_team: int
    terrain: Tuple[TerrainEntity, ...] = ()
    items: Tuple[Item, ...] = ()


class UnitCollection(Sequence[Unit]):
    """Immutable list of units with the lookups strategies need."""

    __slots__ = ("_units",)

    def __init__(self, units: Iterable[Unit] = ()) -> None:
        self._units: Tuple[Unit, ...] = tuple(units)

    # ── sequence protocol ─────────────────────────────────────────────────

    @overload
    def __getitem__(self, index: int) -> Unit: ...

    @overload
    def __getitem__(self, index: slice) -> "UnitCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return UnitCollection(self._units[index])
        return self._units[index]

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnitCollection):
            return self._units == other._units
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._units)

    def __repr__(self) -> str:
        return f"UnitCollection({list(self._units)!r})"

    # ── views ─────────────────────────────────────────────────────────────

    def where(self, predicate: Callable[[Unit], bool]) -> "UnitCollection":
        return UnitCollection(u for u in self._units if predicate(u))

    def _single(self, kind: str) -> Optional[Unit]:
        matches = [u for u in self._units if u.kind == kind]
        if len(matches) > 1:
            raise ValueError(f"Expected at most one {kind}, found {len(matches)}")
        return matches[0] if matches else None

    @property
    def hero(self) -> Optional[Unit]:
        """The single hero, or ``None`` when it is dead or not yet spawned."""
        return self._single(KIND_HERO)

    @property
    def tower(self) -> Optional[Unit]:
        """The single tower, or ``None`` once destroyed."""
        return self._single(KIND_TOWER)

    @property
    def trash(self) -> "UnitCollection":
        return self.where(lambda u: u.is_trash)

    def positions(self) -> np.ndarray:
        """``(n, 2)`` integer array of unit coordinates."""
        if not self._units:
            return np.zeros((0, 2), dtype=np.int64)
        return np.array([(u.x, u.y) for u in self._units], dtype=np.int64)

    def units_in_range_of(self, other: Unit) -> "UnitCollection":
        """Units of this collection that *other* can attack."""
        mask = geometry.square_mask(self.positions(), other, other.attack_range)
        return UnitCollection(u for u, hit in zip(self._units, mask) if hit)


@dataclass(frozen=True)
class WorldSnapshot:
    """Full view of one turn, from my team's perspective."""

    setup: GameSetup
    units: UnitCollection = field(default_factory=UnitCollection)
    gold: int = 0
    enemy_gold: int = 0
    round_type: int = 1

    @property
    def my_team(self) -> int:
        return self.setup.my_team

    @property
    def items(self) -> Tuple[Item, ...]:
        return self.setup.items

    @property
    def terrain(self) -> Tuple[TerrainEntity, ...]:
        return self.setup.terrain

    @property
    def is_initialisation_round(self) -> bool:
        """Negative round type: the game wants a hero pick, not an order."""
        return self.round_type < 0

    @property
    def heroes_to_order(self) -> int:
        return max(0, self.round_type)

    @property
    def my(self) -> UnitCollection:
        return self.units.where(lambda u: u.team == self.my_team)

    @property
    def enemy(self) -> UnitCollection:
        return self.units.where(lambda u: u.team != self.my_team)

    def affordable_items(self, predicate: Callable[[Item], bool]) -> Tuple[Item, ...]:
        """Catalogue items matching *predicate* that cost no more than my gold."""
        return tuple(i for i in self.items if i.cost <= self.gold and predicate(i))
