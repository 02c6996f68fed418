"""
Strategy interface and scoring types.

A strategy is a stateless decision unit:

* :meth:`Strategy.rank_tactic` looks at the snapshot and says how urgently
  it wants to act (or returns :data:`DO_NOT_USE`).
* :meth:`Strategy.produce_actions` is only called on the winner and turns
  it into an ordered list of commands.

Higher scores win.  Scores are not normalised across strategies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from botters_engine.core.commands import Command
from botters_engine.core.state import WorldSnapshot
from botters_engine.utils.constants import DO_NOT_USE_REASON, DO_NOT_USE_SCORE

if TYPE_CHECKING:
    from botters_engine.players.hero_controller import HeroController


@dataclass(frozen=True)
class TacticScore:
    """How much a strategy wants to act this turn, and why."""

    tactic: Optional["Strategy"]
    score: int
    reason: str

    def __post_init__(self) -> None:
        if self.tactic is not None and self.score <= DO_NOT_USE_SCORE:
            raise ValueError(
                f"{type(self.tactic).__name__} opted in with non-positive score {self.score}"
            )

    @property
    def is_do_not_use(self) -> bool:
        return self.tactic is None

    @property
    def tactic_name(self) -> str:
        return "DoNotUse" if self.tactic is None else self.tactic.name


DO_NOT_USE = TacticScore(None, DO_NOT_USE_SCORE, DO_NOT_USE_REASON)


class Strategy(ABC):
    """Base class for every strategy."""

    @property
    def name(self) -> str:
        return type(self).__name__

    def use(self, score: int, reason: str) -> TacticScore:
        """Shorthand for opting in with *score*."""
        return TacticScore(self, score, reason)

    @abstractmethod
    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        """Score this strategy against *snapshot*; :data:`DO_NOT_USE` if it does not apply."""

    @abstractmethod
    def produce_actions(
        self,
        controller: "HeroController",
        snapshot: WorldSnapshot,
        score: TacticScore,
    ) -> Iterable[Command]:
        """Commands to run, in order, when this strategy wins."""

    def __repr__(self) -> str:
        return f"{self.name}()"
