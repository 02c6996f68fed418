#!/usr/bin/env python
"""
Ejemplo 1 — Decidir un único turno a partir de un snapshot construido a mano.

Muestra cómo:
  • Construir un WorldSnapshot con héroes, torres y creeps.
  • Ver la puntuación de cada estrategia (ordenada).
  • Obtener el comando que el controlador emite este turno.

Uso
----
    python examples/01_single_turn.py
"""

from __future__ import annotations

import logging
import sys

sys.path.insert(0, ".")

from botters_engine.core.state import GameSetup, Item, Unit, UnitCollection, WorldSnapshot
from botters_engine.players.hero_controller import HeroController


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="  [%(name)s] %(message)s")

    setup = GameSetup(
        my_team=0,
        items=(
            Item("Bronze_Blade_1", 100, damage=20),
            Item("small_potion", 50, health=100, is_potion=True),
        ),
    )
    units = UnitCollection(
        [
            Unit(1, 0, "HERO", 600, 590, attack_range=150, health=300, max_health=1000,
                 attack_damage=80, movement_speed=200, hero_type="HULK"),
            Unit(2, 0, "TOWER", 100, 590, attack_range=400, health=3000, max_health=3000,
                 attack_damage=100),
            Unit(3, 1, "HERO", 900, 590, attack_range=270, health=800, max_health=800,
                 attack_damage=60, movement_speed=200, hero_type="IRONMAN"),
            Unit(4, 1, "TOWER", 1820, 590, attack_range=400, health=3000, max_health=3000,
                 attack_damage=100),
            Unit(5, 0, "UNIT", 650, 590, attack_range=90, health=40, max_health=400,
                 attack_damage=25, movement_speed=150),
        ]
    )
    snapshot = WorldSnapshot(setup=setup, units=units, gold=120, enemy_gold=80)

    print("═" * 60)
    print("  Puntuación de estrategias (mayor primero)")
    print("═" * 60)

    controller = HeroController()
    for strategy, score in controller.selector.rank(snapshot):
        print(f"  {score.score:>10}  {strategy.name:<38} {score.reason}")

    print("─" * 60)
    command = controller.tick(snapshot)
    print(f"  Comando emitido: {command.render()}")
    print(f"  Comandos en cola: {[c.render() for c in controller.pending]}")
    print("═" * 60)


if __name__ == "__main__":
    main()
