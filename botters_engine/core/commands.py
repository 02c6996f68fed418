"""
Commands the hero can send to the game.

Each command is a frozen value; :meth:`Command.render` produces the exact
line the game expects.  An optional ``message`` is shown above the hero
in the replay viewer and is appended after a ``;``.  It is always the
last field, so ``Move(10, 20)`` means x=10, y=20.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Optional

from botters_engine.utils.constants import MESSAGE_SEPARATOR


class Command(ABC):
    """Base class; concrete commands are frozen dataclasses ending in ``message``."""

    message: Optional[str]

    @abstractmethod
    def _body(self) -> str:
        """Command line without the message suffix."""

    def render(self, with_message: bool = True) -> str:
        body = self._body()
        if with_message and self.message:
            return f"{body}{MESSAGE_SEPARATOR}{self.message}"
        return body

    def without_message(self) -> "Command":
        return replace(self, message=None)

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Spawn(Command):
    hero: str = ""
    message: Optional[str] = None

    def _body(self) -> str:
        return self.hero.upper()


@dataclass(frozen=True)
class Wait(Command):
    message: Optional[str] = None

    def _body(self) -> str:
        return "WAIT"


@dataclass(frozen=True)
class Move(Command):
    x: int = 0
    y: int = 0
    message: Optional[str] = None

    def _body(self) -> str:
        return f"MOVE {self.x} {self.y}"


@dataclass(frozen=True)
class MoveAttack(Command):
    x: int = 0
    y: int = 0
    unit_id: int = 0
    message: Optional[str] = None

    def _body(self) -> str:
        return f"MOVE_ATTACK {self.x} {self.y} {self.unit_id}"


@dataclass(frozen=True)
class Attack(Command):
    unit_id: int = 0
    message: Optional[str] = None

    def _body(self) -> str:
        return f"ATTACK {self.unit_id}"


@dataclass(frozen=True)
class AttackNearest(Command):
    unit_kind: str = ""
    message: Optional[str] = None

    def _body(self) -> str:
        return f"ATTACK_NEAREST {self.unit_kind}"


@dataclass(frozen=True)
class Buy(Command):
    item_name: str = ""
    message: Optional[str] = None

    def _body(self) -> str:
        return f"BUY {self.item_name}"
