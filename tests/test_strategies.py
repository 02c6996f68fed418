"""
Tests for the shipped strategies.

Each strategy is checked on the quiet ``lane`` fixture (where it must not
fire), on a position that triggers it, and with the hero or tower it
depends on missing.
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from botters_engine.core.commands import Attack, AttackNearest, Buy, Move
from botters_engine.core.state import Item
from botters_engine.players.hero_controller import HeroController
from botters_engine.strategies.base import DO_NOT_USE
from botters_engine.strategies.tactics import (
    STRATEGY_ORDER,
    AttackHero,
    AttackHeroNearTowerOnceEveryoneIsDead,
    AttackNearbyEnemiesBasedOnThreat,
    DenyNearbyUnits,
    FleeWhenWeak,
    HealIfPossible,
    KeepAtRange,
    LashOutWhenConfused,
    PurchaseDamageBuffs,
    RetreatIfIBecomeLeader,
    TargetHidingHero,
    default_strategies,
)
from botters_engine.utils.constants import (
    KIND_HERO,
    KIND_UNIT,
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
)

from conftest import build_unit


def _plan(strategy, snapshot):
    controller = HeroController(strategies=[strategy])
    score = strategy.rank_tactic(snapshot)
    return list(strategy.produce_actions(controller, snapshot, score))


# ═══════════════════════════════════════════════════════════════════════════════
# Quiet lane / missing entities
# ═══════════════════════════════════════════════════════════════════════════════


class TestQuietLane:
    def test_only_catch_all_fires(self, lane, make_snapshot) -> None:
        snap = make_snapshot(*lane.values())
        firing = [s.name for s in default_strategies() if not s.rank_tactic(snap).is_do_not_use]
        assert firing == ["LashOutWhenConfused"]

    @pytest.mark.parametrize("cls", STRATEGY_ORDER, ids=lambda c: c.__name__)
    def test_missing_my_hero_never_fires(self, cls, lane, make_snapshot) -> None:
        del lane["my_hero"]
        snap = make_snapshot(*lane.values(), gold=1000, items=[Item("x", 1, damage=5, health=5)])
        assert cls().rank_tactic(snap) is DO_NOT_USE

    @pytest.mark.parametrize("cls", STRATEGY_ORDER, ids=lambda c: c.__name__)
    def test_empty_snapshot_never_fires(self, cls, make_snapshot) -> None:
        assert cls().rank_tactic(make_snapshot()) is DO_NOT_USE


class TestRegistry:
    def test_default_order(self) -> None:
        names = [s.name for s in default_strategies()]
        assert names == [cls.__name__ for cls in STRATEGY_ORDER]
        assert names[0] == "AttackHero"
        assert names[-1] == "LashOutWhenConfused"

    def test_named_subset_keeps_given_order(self) -> None:
        names = ["FleeWhenWeak", "AttackHero"]
        assert [s.name for s in default_strategies(names)] == names

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError):
            default_strategies(["Nope"])

    def test_fresh_instances(self) -> None:
        assert default_strategies()[0] is not default_strategies()[0]

    def test_equal_scores_resolved_by_order(self, lane, make_snapshot) -> None:
        # Ranged hero out-ranging the enemy and leading its creeps: two 1700s.
        lane["my_hero"] = replace(lane["my_hero"], attack_range=300)
        lane["enemy_hero"] = replace(lane["enemy_hero"], x=700)
        creep = build_unit(10, 0, KIND_UNIT, x=500, y=590)
        snap = make_snapshot(*lane.values(), creep)
        controller = HeroController(strategies=[KeepAtRange(), RetreatIfIBecomeLeader()])
        ranked = controller.selector.rank(snap)
        assert [sc.score for _, sc in ranked] == [SCORE_KEEP_AT_RANGE, SCORE_RETREAT_LEADER]
        assert ranked[0][0].name == "KeepAtRange"
        default_rank = HeroController().selector.select(snap)
        assert default_rank.tactic_name == "RetreatIfIBecomeLeader"


# ═══════════════════════════════════════════════════════════════════════════════
# Enemy hero
# ═══════════════════════════════════════════════════════════════════════════════


class TestAttackHero:
    def test_finish_weak_hero(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], health=200)  # 20%
        snap = make_snapshot(*lane.values())
        assert AttackHero().rank_tactic(snap).score == MAX_SCORE
        assert _plan(AttackHero(), snap) == [AttackNearest(unit_kind=KIND_HERO, message="You die now.")]

    def test_invisible_weak_hero_ignored(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], health=200, is_visible=0)
        assert AttackHero().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE

    def test_rush_hero_in_range_of_me(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], x=700, attack_range=200)
        snap = make_snapshot(*lane.values())
        assert AttackHero().rank_tactic(snap).score == SCORE_RUSH_RANGED_HERO
        assert _plan(AttackHero(), snap) == [AttackNearest(unit_kind=KIND_HERO, message="FIGHT ME.")]

    def test_missing_enemy_hero(self, lane, make_snapshot) -> None:
        del lane["enemy_hero"]
        assert AttackHero().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE


class TestTargetHidingHero:
    def test_fires_beyond_gap(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], y=489)
        snap = make_snapshot(*lane.values())
        assert TargetHidingHero().rank_tactic(snap).score == SCORE_TARGET_HIDING_HERO
        assert _plan(TargetHidingHero(), snap) == [Attack(unit_id=3, message="You can't hide from me")]

    def test_gap_of_exactly_threshold(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], y=490)
        assert TargetHidingHero().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE


class TestAttackHeroNearTower:
    def _setup(self, lane):
        lane["my_hero"] = replace(lane["my_hero"], x=1500)  # 320 from enemy tower, near = 400
        return lane

    def test_fires_when_no_enemy_creeps(self, lane, make_snapshot) -> None:
        snap = make_snapshot(*self._setup(lane).values())
        strategy = AttackHeroNearTowerOnceEveryoneIsDead()
        assert strategy.rank_tactic(snap).score == SCORE_KAMIKAZE
        assert _plan(strategy, snap) == [AttackNearest(unit_kind=KIND_HERO)]

    def test_enemy_creeps_alive(self, lane, make_snapshot) -> None:
        creep = build_unit(10, 1, KIND_UNIT, x=1600, y=590)
        snap = make_snapshot(*self._setup(lane).values(), creep)
        assert AttackHeroNearTowerOnceEveryoneIsDead().rank_tactic(snap) is DO_NOT_USE

    def test_enemy_tower_destroyed(self, lane, make_snapshot) -> None:
        lane = self._setup(lane)
        del lane["enemy_tower"]
        snap = make_snapshot(*lane.values())
        assert AttackHeroNearTowerOnceEveryoneIsDead().rank_tactic(snap) is DO_NOT_USE


# ═══════════════════════════════════════════════════════════════════════════════
# Shopping
# ═══════════════════════════════════════════════════════════════════════════════

SMALL_POTION = Item("small_potion", 30, health=100, is_potion=True)
BIG_POTION = Item("big_potion", 90, health=500, is_potion=True)
MANA_POTION = Item("mana_potion", 20, mana=50, is_potion=True)
BLADE = Item("Bronze_Blade", 100, damage=20, health=0)
GILDED = Item("Silver_Blade", 150, damage=40, health=100)
BOOTS = Item("Bronze_Boots", 60, move_speed=50)


class TestHealIfPossible:
    def test_buys_biggest_affordable_potion(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=490)
        snap = make_snapshot(*lane.values(), gold=100, items=[SMALL_POTION, BIG_POTION, MANA_POTION])
        assert HealIfPossible().rank_tactic(snap).score == SCORE_HEAL
        assert _plan(HealIfPossible(), snap) == [
            Buy(item_name="big_potion", message="Ahh that's better. Come on!")
        ]

    def test_cannot_afford(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=490)
        snap = make_snapshot(*lane.values(), gold=10, items=[SMALL_POTION, BIG_POTION])
        assert HealIfPossible().rank_tactic(snap) is DO_NOT_USE

    def test_healthy_enough(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=500)  # exactly 50%
        snap = make_snapshot(*lane.values(), gold=100, items=[SMALL_POTION])
        assert HealIfPossible().rank_tactic(snap) is DO_NOT_USE


class TestPurchaseDamageBuffs:
    def test_buys_while_gold_lasts(self, lane, make_snapshot) -> None:
        snap = make_snapshot(*lane.values(), gold=260, items=[BLADE, GILDED, BOOTS, SMALL_POTION])
        assert PurchaseDamageBuffs().rank_tactic(snap).score == SCORE_DAMAGE_BUFF
        assert _plan(PurchaseDamageBuffs(), snap) == [
            Buy(item_name="Silver_Blade", message="Ho ho ho."),
            Buy(item_name="Bronze_Blade", message="Ho ho ho."),
        ]

    def test_skips_items_the_remaining_gold_cannot_cover(self, lane, make_snapshot) -> None:
        snap = make_snapshot(*lane.values(), gold=200, items=[BLADE, GILDED])
        assert [c.item_name for c in _plan(PurchaseDamageBuffs(), snap)] == ["Silver_Blade"]

    def test_already_equipped(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], items_owned=1)
        snap = make_snapshot(*lane.values(), gold=1000, items=[BLADE])
        assert PurchaseDamageBuffs().rank_tactic(snap) is DO_NOT_USE

    def test_multi_buy_spans_turns(self, lane, make_snapshot) -> None:
        snap = make_snapshot(*lane.values(), gold=260, items=[BLADE, GILDED])
        controller = HeroController()
        first = controller.tick(snap)
        second = controller.tick(snap)
        assert [first.item_name, second.item_name] == ["Silver_Blade", "Bronze_Blade"]
        assert controller.is_idle


# ═══════════════════════════════════════════════════════════════════════════════
# Positioning
# ═══════════════════════════════════════════════════════════════════════════════


class TestRetreatIfIBecomeLeader:
    def test_hero_ahead_of_all_creeps(self, lane, make_snapshot) -> None:
        creeps = [build_unit(10 + i, 0, KIND_UNIT, x=400 + i * 50, y=590) for i in range(3)]
        snap = make_snapshot(*lane.values(), *creeps)
        assert RetreatIfIBecomeLeader().rank_tactic(snap).score == SCORE_RETREAT_LEADER
        assert _plan(RetreatIfIBecomeLeader(), snap) == [Move(x=100, y=590, message="Cover me!")]

    def test_one_creep_ahead(self, lane, make_snapshot) -> None:
        creeps = [build_unit(10, 0, KIND_UNIT, x=400, y=590), build_unit(11, 0, KIND_UNIT, x=700, y=590)]
        snap = make_snapshot(*lane.values(), *creeps)
        assert RetreatIfIBecomeLeader().rank_tactic(snap) is DO_NOT_USE

    def test_team1_direction(self, lane, make_snapshot) -> None:
        # Team 1 advances toward smaller X; its hero at 1300 is behind a creep at 1200.
        creep = build_unit(10, 1, KIND_UNIT, x=1200, y=590)
        snap = make_snapshot(*lane.values(), creep, my_team=1)
        assert RetreatIfIBecomeLeader().rank_tactic(snap) is DO_NOT_USE
        creep = replace(creep, x=1400)
        snap = make_snapshot(*lane.values(), creep, my_team=1)
        assert RetreatIfIBecomeLeader().rank_tactic(snap).score == SCORE_RETREAT_LEADER

    def test_no_creeps(self, lane, make_snapshot) -> None:
        assert RetreatIfIBecomeLeader().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE


class TestKeepAtRange:
    def test_backs_off_toward_own_side(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], attack_range=270)
        lane["enemy_hero"] = replace(lane["enemy_hero"], x=700)
        snap = make_snapshot(*lane.values())
        assert KeepAtRange().rank_tactic(snap).score == SCORE_KEEP_AT_RANGE
        assert _plan(KeepAtRange(), snap) == [Move(x=431, y=590, message="Back off baby")]

    def test_team1_backs_off_to_larger_x(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], attack_range=270)
        lane["my_hero"] = replace(lane["my_hero"], x=1200)
        snap = make_snapshot(*lane.values(), my_team=1)
        assert _plan(KeepAtRange(), snap) == [Move(x=1469, y=590, message="Back off baby")]

    def test_melee_hero_never_kites(self, lane, make_snapshot) -> None:
        lane["enemy_hero"] = replace(lane["enemy_hero"], x=700, attack_range=100)
        assert KeepAtRange().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE

    def test_already_out_of_reach(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], attack_range=270)
        lane["enemy_hero"] = replace(lane["enemy_hero"], x=751)  # distance 151 > 150
        assert KeepAtRange().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE


class TestFleeWhenWeak:
    def test_flees_to_tower(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=199)
        snap = make_snapshot(*lane.values())
        assert FleeWhenWeak().rank_tactic(snap).score == SCORE_FLEE
        assert _plan(FleeWhenWeak(), snap) == [Move(x=100, y=590, message="Ouch!")]

    def test_threshold_is_strict(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=200)
        assert FleeWhenWeak().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE

    def test_already_near_tower(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=100, x=500)
        assert FleeWhenWeak().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE

    def test_tower_destroyed(self, lane, make_snapshot) -> None:
        lane["my_hero"] = replace(lane["my_hero"], health=100)
        del lane["my_tower"]
        assert FleeWhenWeak().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE


# ═══════════════════════════════════════════════════════════════════════════════
# Creeps
# ═══════════════════════════════════════════════════════════════════════════════


class TestDenyNearbyUnits:
    def test_kills_weakest_own_creep_in_range(self, lane, make_snapshot) -> None:
        creeps = [
            build_unit(10, 0, KIND_UNIT, x=650, y=590, health=70),
            build_unit(11, 0, KIND_UNIT, x=700, y=590, health=30),
            build_unit(12, 0, KIND_UNIT, x=900, y=590, health=5),  # out of range
        ]
        snap = make_snapshot(*lane.values(), *creeps)
        assert DenyNearbyUnits().rank_tactic(snap).score == SCORE_DENY
        assert _plan(DenyNearbyUnits(), snap) == [Attack(unit_id=11, message="No You Don't")]

    def test_healthy_creeps(self, lane, make_snapshot) -> None:
        creep = build_unit(10, 0, KIND_UNIT, x=650, y=590, health=81)
        assert DenyNearbyUnits().rank_tactic(make_snapshot(*lane.values(), creep)) is DO_NOT_USE

    def test_own_tower_is_not_denied(self, lane, make_snapshot) -> None:
        lane["my_tower"] = replace(lane["my_tower"], x=650, health=10)
        assert DenyNearbyUnits().rank_tactic(make_snapshot(*lane.values())) is DO_NOT_USE


class TestAttackNearbyEnemiesBasedOnThreat:
    def test_attacks_lowest_threat(self, lane, make_snapshot) -> None:
        enemies = [
            build_unit(20, 1, KIND_UNIT, x=700, y=590, health=90, attack_damage=10),  # 900
            build_unit(21, 1, KIND_UNIT, x=720, y=590, health=50, attack_damage=25),  # 200
        ]
        snap = make_snapshot(*lane.values(), *enemies)
        strategy = AttackNearbyEnemiesBasedOnThreat()
        assert strategy.rank_tactic(snap).score == SCORE_ATTACK_NEARBY
        assert _plan(strategy, snap) == [Attack(unit_id=21)]

    def test_nothing_in_range(self, lane, make_snapshot) -> None:
        enemy = build_unit(20, 1, KIND_UNIT, x=800, y=590)
        snap = make_snapshot(*lane.values(), enemy)
        assert AttackNearbyEnemiesBasedOnThreat().rank_tactic(snap) is DO_NOT_USE


class TestLashOutWhenConfused:
    def test_always_fires_with_a_hero(self, lane, make_snapshot) -> None:
        snap = make_snapshot(*lane.values())
        assert LashOutWhenConfused().rank_tactic(snap).score == SCORE_LASH_OUT
        assert _plan(LashOutWhenConfused(), snap) == [AttackNearest(unit_kind=KIND_UNIT)]
