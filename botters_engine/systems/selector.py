"""
Tactic selector: scores every registered strategy and picks the winner.

Ranking is a stable sort on descending score, so when two strategies tie
the one registered first wins.  When nobody opts in the winner is the
:data:`DO_NOT_USE` sentinel and the caller is expected to wait.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from botters_engine.core.state import WorldSnapshot
from botters_engine.strategies.base import DO_NOT_USE, Strategy, TacticScore

logger = logging.getLogger("botters_engine.selector")

RankedTactic = Tuple[Strategy, TacticScore]


class TacticSelector:
    """Stateless apart from its ordered strategy list."""

    def __init__(self, strategies: Iterable[Strategy]) -> None:
        self.strategies: List[Strategy] = list(strategies)

    def rank(self, snapshot: WorldSnapshot) -> List[RankedTactic]:
        """Return ``(strategy, score)`` pairs, best first."""
        scored: List[RankedTactic] = []
        for strategy in self.strategies:
            score = strategy.rank_tactic(snapshot)
            if not isinstance(score, TacticScore):
                raise TypeError(
                    f"{strategy.name}.rank_tactic returned {type(score).__name__}, "
                    "expected TacticScore"
                )
            scored.append((strategy, score))

        ranked = sorted(scored, key=lambda pair: pair[1].score, reverse=True)

        if logger.isEnabledFor(logging.DEBUG):
            for strategy, score in ranked:
                logger.debug("%s: %d, because %s", strategy.name, score.score, score.reason)
        return ranked

    def select(self, snapshot: WorldSnapshot) -> TacticScore:
        """Return the winning score (possibly the sentinel)."""
        return winner(self.rank(snapshot))


def winner(ranked: Sequence[RankedTactic]) -> TacticScore:
    """First score of an already ranked list, or the sentinel when empty."""
    if not ranked:
        return DO_NOT_USE
    return ranked[0][1]
