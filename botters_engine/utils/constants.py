"""
All bot constants in a single place.

Protocol tokens, unit kinds, hero types, geometry thresholds and the
priority score of every shipped strategy.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

# ────────────────────────────── MAP ────────────────────────────────────────────
MAP_WIDTH: int = 1920
MAP_HEIGHT: int = 750
TEAMS: Tuple[int, int] = (0, 1)

# ────────────────────────────── UNIT KINDS ─────────────────────────────────────
KIND_UNIT: str = "UNIT"  # ordinary lane creep
KIND_HERO: str = "HERO"
KIND_TOWER: str = "TOWER"
KIND_GROOT: str = "GROOT"  # neutral spawn
UNIT_KINDS: FrozenSet[str] = frozenset({KIND_UNIT, KIND_HERO, KIND_TOWER, KIND_GROOT})

# ────────────────────────────── HEROES ─────────────────────────────────────────
HERO_TYPES: Tuple[str, ...] = (
    "DEADPOOL",
    "DOCTOR_STRANGE",
    "HULK",
    "IRONMAN",
    "VALKYRIE",
)
DEFAULT_HERO: str = "HULK"

# ────────────────────────────── GEOMETRY ───────────────────────────────────────
# Attack range strictly above this is a ranged unit.
RANGED_THRESHOLD: int = 150
# Half-width of the "near" square, as a multiple of movement speed.
NEAR_FACTOR: float = 2.0

# ────────────────────────────── SCORES ─────────────────────────────────────────
DO_NOT_USE_SCORE: int = 0
DO_NOT_USE_REASON: str = "Do not use"
MAX_SCORE: int = 2**31 - 1

SCORE_TARGET_HIDING_HERO: int = 3000
SCORE_HEAL: int = 2500
SCORE_DAMAGE_BUFF: int = 2000
SCORE_RETREAT_LEADER: int = 1700
SCORE_KEEP_AT_RANGE: int = 1700
SCORE_DENY: int = 1501
SCORE_KAMIKAZE: int = 1225
SCORE_FLEE: int = 1100
SCORE_RUSH_RANGED_HERO: int = 55
SCORE_ATTACK_NEARBY: int = 50
SCORE_LASH_OUT: int = 1

# ────────────────────────────── THRESHOLDS (health %) ─────────────────────────
FINISH_HERO_PCT: int = 20
TAUNT_HERO_PCT: int = 30
HEAL_BELOW_PCT: int = 50
FLEE_BELOW_PCT: int = 20
# Vertical gap beyond which the enemy hero is considered hiding.
HIDING_DISTANCE_Y: int = 100

# ────────────────────────────── COMMANDS ───────────────────────────────────────
MESSAGE_SEPARATOR: str = ";"
ATTACK_NEAREST_KINDS: FrozenSet[str] = frozenset({KIND_UNIT, KIND_HERO, KIND_TOWER, KIND_GROOT})

# ────────────────────────────── PROTOCOL ───────────────────────────────────────
UNIT_RECORD_FIELDS: int = 22
ITEM_RECORD_FIELDS: int = 10
TERRAIN_RECORD_FIELDS: int = 4
