"""
Decision recorder.

Keeps, in memory, what the controller decided on every turn of the
current match: the ranked candidates (when a re-evaluation happened),
the winner and the command that went out.  Useful for post-mortems in
tests and from the CLI log; nothing is written to disk.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

# (strategy name, score, reason)
RankEntry = Tuple[str, int, str]


@dataclass(frozen=True)
class TurnRecord:
    """What happened on one controller tick."""

    turn: int
    reevaluated: bool
    ranking: Tuple[RankEntry, ...]  # empty when the queue was draining
    selected: Optional[str]  # winning strategy, None for the sentinel / draining
    command: str
    queue_length: int  # commands still buffered after this turn


@dataclass
class MatchRecord:
    """Complete decision log of one match."""

    turns: List[TurnRecord] = field(default_factory=list)

    @property
    def total_turns(self) -> int:
        return len(self.turns)

    def strategy_counts(self) -> Dict[str, int]:
        """How many times each strategy won a re-evaluation."""
        return dict(Counter(t.selected for t in self.turns if t.selected is not None))

    def commands(self) -> List[str]:
        return [t.command for t in self.turns]


class DecisionRecorder:
    """Accumulates :class:`TurnRecord` objects during a match.

    Typical usage::

        recorder = DecisionRecorder()
        controller = HeroController(recorder=recorder)
        # ... each turn ...
        controller.tick(snapshot)
        # ... after the match ...
        record = recorder.build_record()
    """

    def __init__(self) -> None:
        self._turns: List[TurnRecord] = []

    def reset(self) -> None:
        """Clear all recorded data for a new match."""
        self._turns.clear()

    def record_turn(self, record: TurnRecord) -> None:
        self._turns.append(record)

    @property
    def turns(self) -> List[TurnRecord]:
        return list(self._turns)

    def build_record(self) -> MatchRecord:
        """Finalise and return a :class:`MatchRecord`."""
        return MatchRecord(turns=list(self._turns))
