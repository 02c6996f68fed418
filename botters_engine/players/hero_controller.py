"""
Hero controller: the action-queue executor.

Two states:

* **idle** (queue empty): rank every strategy, expand the winner into
  commands and buffer them all.
* **draining** (queue non-empty): skip ranking and pop the next command.

Exactly one command leaves per :meth:`HeroController.tick`.  A plan runs
to completion before the strategies are consulted again, even if a more
urgent strategy would now win.  With nothing to run the hero waits.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Iterable, List, Optional

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
from botters_engine.core.recorder import DecisionRecorder, TurnRecord
from botters_engine.core.state import Unit, WorldSnapshot
from botters_engine.strategies.base import Strategy
from botters_engine.systems.selector import RankedTactic, TacticSelector, winner
from botters_engine.utils.constants import DEFAULT_HERO, HERO_TYPES
from botters_engine.utils.validators import InvalidCommandError, validate_command

logger = logging.getLogger("botters_engine.controller")


class HeroController:
    """
    Turn-by-turn driver for one hero.

    Parameters
    ----------
    strategies : iterable of Strategy
        Registration order is the tie-break order.  Defaults to
        :func:`botters_engine.strategies.tactics.default_strategies`.
    hero_type : str
        Hero picked on the initialisation round.
    messages : bool
        Attach the strategies' display messages to commands.
    recorder : DecisionRecorder, optional
        Receives one :class:`TurnRecord` per tick.
    """

    def __init__(
        self,
        strategies: Optional[Iterable[Strategy]] = None,
        hero_type: str = DEFAULT_HERO,
        messages: bool = True,
        recorder: Optional[DecisionRecorder] = None,
    ) -> None:
        if hero_type.upper() not in HERO_TYPES:
            raise ValueError(f"Unknown hero type: {hero_type!r}")
        if strategies is None:
            from botters_engine.strategies.tactics import default_strategies

            strategies = default_strategies()

        self.hero_type: str = hero_type.upper()
        self.messages: bool = messages
        self.selector = TacticSelector(strategies)
        self.recorder: Optional[DecisionRecorder] = recorder
        self.turn: int = 0
        self._queue: Deque[Command] = deque()

    # ── queue ─────────────────────────────────────────────────────────────

    @property
    def strategies(self) -> List[Strategy]:
        return self.selector.strategies

    @property
    def pending(self) -> List[Command]:
        """Buffered commands, next one first."""
        return list(self._queue)

    @property
    def is_idle(self) -> bool:
        return not self._queue

    def enqueue(self, command: Command) -> None:
        self.enqueue_plan((command,))

    def enqueue_plan(self, commands: Iterable[Command]) -> None:
        """Validate a whole plan, then buffer it; nothing is queued if any command is invalid."""
        plan = list(commands)
        for command in plan:
            err = validate_command(command)
            if err is not None:
                raise InvalidCommandError(err)
        self._queue.extend(plan)

    def reset(self) -> None:
        """Drop any buffered plan (call between matches)."""
        self._queue.clear()
        self.turn = 0
        if self.recorder is not None:
            self.recorder.reset()

    # ── turn ──────────────────────────────────────────────────────────────

    def tick(self, snapshot: WorldSnapshot) -> Command:
        """Decide this turn's single command."""
        self.turn += 1
        ranked: List[RankedTactic] = []
        selected: Optional[str] = None
        reevaluated = self.is_idle

        if reevaluated:
            ranked = self.selector.rank(snapshot)
            best = winner(ranked)
            if best.is_do_not_use:
                logger.info("Turn %d: no strategy applies", self.turn)
            else:
                selected = best.tactic_name
                logger.info("Executing Tactic: %s, because %s", selected, best.reason)
                self.enqueue_plan(best.tactic.produce_actions(self, snapshot, best))
                if self.is_idle:
                    logger.info("%s produced no commands", selected)

        command = self._queue.popleft() if self._queue else self.wait()

        if self.recorder is not None:
            self.recorder.record_turn(
                TurnRecord(
                    turn=self.turn,
                    reevaluated=reevaluated,
                    ranking=tuple((s.name, sc.score, sc.reason) for s, sc in ranked),
                    selected=selected,
                    command=command.render(),
                    queue_length=len(self._queue),
                )
            )
        return command

    # ── command factories (used by strategies) ────────────────────────────

    def _say(self, message: Optional[str]) -> Optional[str]:
        return message if self.messages else None

    def spawn(self) -> Command:
        return Spawn(hero=self.hero_type)

    def wait(self, message: Optional[str] = None) -> Command:
        return Wait(message=self._say(message))

    def move(self, x: int, y: int, message: Optional[str] = None) -> Command:
        return Move(x=x, y=y, message=self._say(message))

    def move_attack(self, x: int, y: int, unit: Unit, message: Optional[str] = None) -> Command:
        return MoveAttack(x=x, y=y, unit_id=unit.id, message=self._say(message))

    def attack(self, unit: Unit, message: Optional[str] = None) -> Command:
        return Attack(unit_id=unit.id, message=self._say(message))

    def attack_nearest(self, unit_kind: str, message: Optional[str] = None) -> Command:
        return AttackNearest(unit_kind=unit_kind, message=self._say(message))

    def buy(self, item_name: str, message: Optional[str] = None) -> Command:
        return Buy(item_name=item_name, message=self._say(message))
