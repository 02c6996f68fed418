"""
Shipped strategies and the ordered registry.

Every strategy derives all of its decisions from the snapshot it is
given and treats a missing hero or tower (dead, not yet spawned) as
"does not apply".
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Type

from botters_engine.core.commands import Command
from botters_engine.core.state import Item, WorldSnapshot
from botters_engine.players.hero_controller import HeroController
from botters_engine.strategies.base import DO_NOT_USE, Strategy, TacticScore
from botters_engine.systems.threat import ThreatTable
from botters_engine.utils.constants import (
    FINISH_HERO_PCT,
    FLEE_BELOW_PCT,
    HEAL_BELOW_PCT,
    HIDING_DISTANCE_Y,
    KIND_HERO,
    KIND_UNIT,
    MAP_WIDTH,
    MAX_SCORE,
    SCORE_ATTACK_NEARBY,
    SCORE_DAMAGE_BUFF,
    SCORE_DENY,
    SCORE_FLEE,
    SCORE_HEAL,
    SCORE_KAMIKAZE,
    SCORE_KEEP_AT_RANGE,
    SCORE_LASH_OUT,
    SCORE_RETREAT_LEADER,
    SCORE_RUSH_RANGED_HERO,
    SCORE_TARGET_HIDING_HERO,
    TAUNT_HERO_PCT,
)


# ── attacking the enemy hero ──────────────────────────────────────────────────


class AttackHero(Strategy):
    """Finish a weak enemy hero; otherwise rush one that already outranges us."""

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine, theirs = snapshot.my.hero, snapshot.enemy.hero
        if mine is None or theirs is None:
            return DO_NOT_USE
        if theirs.is_visible and theirs.health_percentage <= FINISH_HERO_PCT:
            return self.use(MAX_SCORE, "Nuke hero, they're weak.")
        if theirs.can_attack(mine):
            return self.use(SCORE_RUSH_RANGED_HERO, "Hero is ranged and can attack me, try rush him")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        theirs = snapshot.enemy.hero
        if theirs is not None and theirs.health_percentage > TAUNT_HERO_PCT:
            return [controller.attack_nearest(KIND_HERO, "FIGHT ME.")]
        return [controller.attack_nearest(KIND_HERO, "You die now.")]


class TargetHidingHero(Strategy):
    """The enemy hero moved far off the lane (into a bush, usually)."""

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine, theirs = snapshot.my.hero, snapshot.enemy.hero
        if mine is None or theirs is None:
            return DO_NOT_USE
        if abs(theirs.y - mine.y) > HIDING_DISTANCE_Y:
            return self.use(SCORE_TARGET_HIDING_HERO, "Hero is hiding, let's go kill them")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        theirs = snapshot.enemy.hero
        if theirs is None:
            return []
        return [controller.attack(theirs, "You can't hide from me")]


class AttackHeroNearTowerOnceEveryoneIsDead(Strategy):
    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine = snapshot.my.hero
        enemy = snapshot.enemy
        tower = enemy.tower
        if mine is None or tower is None or enemy.hero is None:
            return DO_NOT_USE
        if mine.is_near(tower) and not enemy.trash:
            return self.use(SCORE_KAMIKAZE, "Kamikaze!")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        return [controller.attack_nearest(KIND_HERO)]


# ── shopping ──────────────────────────────────────────────────────────────────


def _healing_potions(snapshot: WorldSnapshot) -> List[Item]:
    potions = snapshot.affordable_items(lambda i: i.is_potion and i.health > 0)
    return sorted(potions, key=lambda i: i.health, reverse=True)


def _damage_buffs(snapshot: WorldSnapshot) -> List[Item]:
    buffs = snapshot.affordable_items(lambda i: not i.is_potion and i.damage > 0)
    return sorted(buffs, key=lambda i: i.health, reverse=True)


class HealIfPossible(Strategy):
    """Drink the biggest affordable potion when below half health."""

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine = snapshot.my.hero
        if mine is None:
            return DO_NOT_USE
        if mine.health_percentage < HEAL_BELOW_PCT and _healing_potions(snapshot):
            return self.use(SCORE_HEAL, f"Health less than {HEAL_BELOW_PCT}%")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        potions = _healing_potions(snapshot)
        if not potions:
            return []
        return [controller.buy(potions[0].name, "Ahh that's better. Come on!")]


class PurchaseDamageBuffs(Strategy):
    """
    First shopping trip: buy every damage item we can afford.

    Items are bought highest health bonus first and only while the gold
    lasts, so every queued purchase is one the shop will accept.
    """

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine = snapshot.my.hero
        if mine is None:
            return DO_NOT_USE
        if mine.items_owned == 0 and _damage_buffs(snapshot):
            return self.use(SCORE_DAMAGE_BUFF, "DMG buff available, buying.")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        budget = snapshot.gold
        commands: List[Command] = []
        for item in _damage_buffs(snapshot):
            if item.cost > budget:
                continue
            budget -= item.cost
            commands.append(controller.buy(item.name, "Ho ho ho."))
        return commands


# ── positioning ───────────────────────────────────────────────────────────────


class RetreatIfIBecomeLeader(Strategy):
    """Step back behind our creeps so they tank the tower and the hero."""

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine = snapshot.my.hero
        trash = snapshot.my.trash
        if mine is None or snapshot.my.tower is None or not trash:
            return DO_NOT_USE
        if all(mine.is_in_front_of(t, snapshot.my_team) for t in trash):
            return self.use(SCORE_RETREAT_LEADER, "Hero became the leader. Oops.")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        mine, tower = snapshot.my.hero, snapshot.my.tower
        if mine is None or tower is None:
            return []
        return [controller.move(tower.x, mine.y, "Cover me!")]


class KeepAtRange(Strategy):
    """Ranged hero with the longer reach: stay just outside the enemy hero's range."""

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine, theirs = snapshot.my.hero, snapshot.enemy.hero
        if mine is None or theirs is None:
            return DO_NOT_USE
        if mine.is_ranged and mine.attack_range > theirs.attack_range:
            if mine.distance_from(theirs) <= theirs.attack_range:
                return self.use(SCORE_KEEP_AT_RANGE, "Move to out-range the hero.")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        mine, theirs = snapshot.my.hero, snapshot.enemy.hero
        if mine is None or theirs is None:
            return []
        # Back off toward our own side of the lane.
        offset = mine.attack_range - 1
        x = theirs.x - offset if snapshot.my_team == 0 else theirs.x + offset
        x = min(max(x, 0), MAP_WIDTH)
        return [controller.move(x, mine.y, "Back off baby")]


class FleeWhenWeak(Strategy):
    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine, tower = snapshot.my.hero, snapshot.my.tower
        if mine is None or tower is None:
            return DO_NOT_USE
        if mine.health_percentage < FLEE_BELOW_PCT and not mine.is_near(tower):
            return self.use(SCORE_FLEE, f"Health less than {FLEE_BELOW_PCT}%")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        tower = snapshot.my.tower
        if tower is None:
            return []
        return [controller.move(tower.x, tower.y, "Ouch!")]


# ── creeps ────────────────────────────────────────────────────────────────────


class DenyNearbyUnits(Strategy):
    """Last-hit our own dying creeps so the enemy doesn't get the gold."""

    @staticmethod
    def _vulnerable(snapshot: WorldSnapshot):
        mine = snapshot.my.hero
        if mine is None:
            return []
        in_range = snapshot.my.trash.units_in_range_of(mine)
        return sorted(
            (u for u in in_range if u.health <= mine.attack_damage),
            key=lambda u: u.health,
        )

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        if self._vulnerable(snapshot):
            return self.use(SCORE_DENY, "Vulnerable units within reach - murder them to deny gold")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        targets = self._vulnerable(snapshot)
        if not targets:
            return []
        return [controller.attack(targets[0], "No You Don't")]


class AttackNearbyEnemiesBasedOnThreat(Strategy):
    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        mine = snapshot.my.hero
        if mine is None:
            return DO_NOT_USE
        if snapshot.enemy.units_in_range_of(mine):
            return self.use(SCORE_ATTACK_NEARBY, "Attack close enemies.")
        return DO_NOT_USE

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        mine = snapshot.my.hero
        if mine is None:
            return []
        lowest = ThreatTable(snapshot.enemy.units_in_range_of(mine)).lowest()
        if lowest is None:
            return []
        unit, _ = lowest
        return [controller.attack(unit)]


class LashOutWhenConfused(Strategy):
    """Catch-all: hit whatever creep is closest."""

    def rank_tactic(self, snapshot: WorldSnapshot) -> TacticScore:
        if snapshot.my.hero is None:
            return DO_NOT_USE
        return self.use(SCORE_LASH_OUT, "I'm scared.")

    def produce_actions(
        self, controller: HeroController, snapshot: WorldSnapshot, score: TacticScore
    ) -> List[Command]:
        return [controller.attack_nearest(KIND_UNIT)]


# ══════════════════════════════════════════════════════════════════════════
# Registry
# ══════════════════════════════════════════════════════════════════════════

# Order matters: on equal scores the earlier entry wins.
STRATEGY_ORDER: Sequence[Type[Strategy]] = (
    AttackHero,
    TargetHidingHero,
    HealIfPossible,
    PurchaseDamageBuffs,
    RetreatIfIBecomeLeader,
    KeepAtRange,
    DenyNearbyUnits,
    AttackHeroNearTowerOnceEveryoneIsDead,
    FleeWhenWeak,
    AttackNearbyEnemiesBasedOnThreat,
    LashOutWhenConfused,
)

STRATEGY_REGISTRY: Dict[str, Type[Strategy]] = {cls.__name__: cls for cls in STRATEGY_ORDER}


def default_strategies(names: Optional[Sequence[str]] = None) -> List[Strategy]:
    """
    Fresh strategy instances in registration order.

    When *names* is given, only those strategies are built, in the order
    the names are listed.
    """
    if names is None:
        return [cls() for cls in STRATEGY_ORDER]
    unknown = [n for n in names if n not in STRATEGY_REGISTRY]
    if unknown:
        raise ValueError(f"Unknown strategies: {', '.join(unknown)}")
    return [STRATEGY_REGISTRY[n]() for n in names]
