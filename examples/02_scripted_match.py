#!/usr/bin/env python
"""
Ejemplo 2 — Partida guionizada a través del bucle de la CLI.

Muestra cómo:
  • Alimentar la CLI con texto del protocolo del juego (sin stdin real).
  • Ver el turno de spawn y los turnos normales.
  • Observar cómo un plan de varias compras se reparte en varios turnos.

Uso
----
    python examples/02_scripted_match.py
"""

from __future__ import annotations

import io
import sys

sys.path.insert(0, ".")

from botters_engine.cli import main as cli_main

SETUP = [
    "0",  # mi equipo
    "1",
    "BUSH 500 700 50",
    "2",
    "Bronze_Blade_1 100 20 0 0 0 0 0 0 0",
    "Silver_Blade_1 150 40 100 0 0 0 0 0 0",
]

HERO = "1 0 HERO {x} 590 150 {hp} 1000 0 80 200 0 300 0 0 0 90 90 1 HULK 1 {items}"
TOWER = "2 0 TOWER 100 590 400 3000 3000 0 100 0 0 0 0 0 0 0 0 0 - 1 0"
ENEMY_HERO = "3 1 HERO 1300 590 150 1000 1000 0 80 200 0 300 0 0 0 90 90 1 VALKYRIE 1 0"
ENEMY_TOWER = "4 1 TOWER 1820 590 400 3000 3000 0 100 0 0 0 0 0 0 0 0 0 - 1 0"


def turn(gold: int, round_type: int, hero_x: int = 600, hero_hp: int = 1000, items: int = 0):
    if round_type < 0:
        return [str(gold), "0", str(round_type), "0"]
    units = [HERO.format(x=hero_x, hp=hero_hp, items=items), TOWER, ENEMY_HERO, ENEMY_TOWER]
    return [str(gold), "0", str(round_type), str(len(units))] + units


def main() -> None:
    lines = list(SETUP)
    lines += turn(0, -2)  # spawn
    lines += turn(260, 1)  # compra dos espadas
    lines += turn(260, 1)  # segunda compra (plan en cola)
    lines += turn(10, 1, items=2)  # nada urgente
    lines += turn(10, 1, hero_hp=150, items=2)  # huir a la torre

    out = io.StringIO()
    code = cli_main(["--log-level", "WARNING"], stdin=io.StringIO("\n".join(lines) + "\n"), stdout=out)

    print("═" * 60)
    for i, line in enumerate(out.getvalue().splitlines(), start=1):
        print(f"  Turno {i}: {line}")
    print("─" * 60)
    print(f"  Código de salida: {code}")
    print("═" * 60)


if __name__ == "__main__":
    main()
