"""
Command validation utilities.
"""

from __future__ import annotations

from numbers import Integral
from typing import Optional

from botters_engine.core.commands import (
    Attack,
    AttackNearest,
    Buy,
    Command,
    MoveAttack,
    Spawn,
)
from botters_engine.utils.constants import ATTACK_NEAREST_KINDS, HERO_TYPES, MESSAGE_SEPARATOR


class InvalidCommandError(Exception):
    """Raised when a strategy produces a command the game would reject."""


def validate_command(command: Command) -> Optional[str]:
    """
    Return ``None`` if *command* is well formed, otherwise a human-readable error string.

    Rules
    -----
    * Coordinates and unit ids are integers; unit ids are non-negative.
    * ``ATTACK_NEAREST`` only accepts a known unit kind.
    * ``BUY`` needs a non-empty item name without whitespace.
    * Spawn must name a known hero.
    * A message is a string that fits on the command line: no newline and no ``;``.
    """
    if not isinstance(command, Command):
        return f"Not a command: {command!r}"

    for name in ("x", "y", "unit_id"):
        value = getattr(command, name, 0)
        if isinstance(value, bool) or not isinstance(value, Integral):
            return f"{type(command).__name__}.{name} must be an int, got {value!r}"

    if isinstance(command, (Attack, MoveAttack)) and command.unit_id < 0:
        return f"Negative unit id: {command.unit_id}"

    if isinstance(command, AttackNearest) and command.unit_kind not in ATTACK_NEAREST_KINDS:
        return f"Unknown unit kind for ATTACK_NEAREST: {command.unit_kind!r}"

    if isinstance(command, Buy):
        if not command.item_name or any(c.isspace() for c in command.item_name):
            return f"Invalid item name: {command.item_name!r}"

    if isinstance(command, Spawn) and command.hero.upper() not in HERO_TYPES:
        return f"Unknown hero: {command.hero!r}"

    if command.message is not None:
        if not isinstance(command.message, str):
            return f"Message must be a string, got {command.message!r}"
        if "\n" in command.message or "\r" in command.message:
            return "Message must be a single line"
        if MESSAGE_SEPARATOR in command.message:
            return f"Message must not contain {MESSAGE_SEPARATOR!r}"

    return None  # valid
