"""
Threat ranking for enemy units within reach.

Threat is ``health% / attack_damage * 100`` truncated to an integer: a
weakened unit that hits hard is the best target.  Lower threat is
attacked first.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from botters_engine.core.state import Unit

_HARMLESS: int = np.iinfo(np.int64).max


class ThreatTable:
    """Threat value per unit, computed once for a list of candidates."""

    def __init__(self, units: Iterable[Unit]) -> None:
        self.units: List[Unit] = list(units)
        pct = np.array([u.health_percentage for u in self.units], dtype=np.int64)
        dmg = np.array([u.attack_damage for u in self.units], dtype=np.int64)
        # Units that deal no damage go last.
        safe_dmg = np.where(dmg > 0, dmg, 1)
        self.values: np.ndarray = np.where(dmg > 0, pct * 100 // safe_dmg, _HARMLESS)

    def __len__(self) -> int:
        return len(self.units)

    def threat_of(self, unit: Unit) -> int:
        return int(self.values[self.units.index(unit)])

    def ranked(self) -> List[Tuple[Unit, int]]:
        """Units ordered by ascending threat; ties keep input order."""
        order = np.argsort(self.values, kind="stable")
        return [(self.units[i], int(self.values[i])) for i in order]

    def lowest(self) -> Optional[Tuple[Unit, int]]:
        if not self.units:
            return None
        return self.ranked()[0]
