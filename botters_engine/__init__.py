"""
Botters Engine: utility-scored decision engine for a lane-combat hero bot.

Each turn every registered strategy scores the current snapshot, the best
one is expanded into a queue of commands, and the queue is drained one
command per turn before the strategies are consulted again.
"""

from botters_engine.core.commands import (
    Attack,
    AttackNearest,
    Buy,
    Command,
    Move,
    MoveAttack,
    Spawn,
    Wait,
)
from botters_engine.core.recorder import DecisionRecorder, MatchRecord, TurnRecord
from botters_engine.core.state import (
    GameSetup,
    Item,
    Position,
    TerrainEntity,
    Unit,
    UnitCollection,
    WorldSnapshot,
)
from botters_engine.players.hero_controller import HeroController
from botters_engine.strategies.base import DO_NOT_USE, Strategy, TacticScore
from botters_engine.strategies.tactics import default_strategies
from botters_engine.systems.selector import TacticSelector

__version__ = "0.1.0"

__all__ = [
    "Attack",
    "AttackNearest",
    "Buy",
    "Command",
    "DO_NOT_USE",
    "DecisionRecorder",
    "GameSetup",
    "HeroController",
    "Item",
    "MatchRecord",
    "Move",
    "MoveAttack",
    "Position",
    "Spawn",
    "Strategy",
    "TacticScore",
    "TacticSelector",
    "TerrainEntity",
    "TurnRecord",
    "Unit",
    "UnitCollection",
    "Wait",
    "WorldSnapshot",
    "default_strategies",
]
