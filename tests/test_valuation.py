import pytest

from core.state import Position, Rarity
from core.valuation import (
    avatar_color,
    rarity_for_overall,
    rarity_multiplier,
    resale_value,
    sell_value,
    signing_cost,
    weekly_salary,
)

from conftest import flat_stats, make_player

TIERS = [Rarity.COMMON, Rarity.RARE, Rarity.LEGENDARY, Rarity.GLITCH]


def test_signing_cost_is_cubic_rounded_to_tens() -> None:
    assert signing_cost(make_player("a", 50)) == 310    # 125000 / 4000 = 31.25
    assert signing_cost(make_player("b", 49)) == 290    # 117649 / 4000 = 29.41
    assert signing_cost(make_player("c", 100)) == 2500
    assert signing_cost(make_player("d", 0)) == 0


def test_sell_value_is_seventy_percent_floored() -> None:
    assert resale_value(300) == 210
    assert resale_value(310) == 217
    p = make_player("a", 65)
    assert signing_cost(p) == 690
    assert sell_value(p) == 483


def test_selling_never_profits() -> None:
    for level in range(0, 101):
        p = make_player(f"p{level}", level)
        assert sell_value(p) <= signing_cost(p)


def test_weekly_salary_curve() -> None:
    assert weekly_salary(flat_stats(65), Rarity.COMMON) == 63    # 63.375
    assert weekly_salary(flat_stats(65), Rarity.RARE) == 82      # 82.3875
    assert weekly_salary(flat_stats(50), Rarity.COMMON) == 38    # 37.5 rounds up
    assert weekly_salary(flat_stats(0), Rarity.GLITCH) == 0


def test_salary_monotone_in_overall_for_each_tier() -> None:
    for rarity in TIERS:
        salaries = [weekly_salary(flat_stats(level), rarity) for level in range(0, 101)]
        assert salaries == sorted(salaries)


def test_salary_monotone_in_tier_for_fixed_stats() -> None:
    for level in (10, 45, 70, 99):
        salaries = [weekly_salary(flat_stats(level), r) for r in TIERS]
        assert salaries == sorted(salaries)


def test_cost_grows_faster_than_salary() -> None:
    low, high = flat_stats(60), flat_stats(90)
    cost_ratio = signing_cost(make_player("h", 90)) / signing_cost(make_player("l", 60))
    salary_ratio = weekly_salary(high, Rarity.COMMON) / weekly_salary(low, Rarity.COMMON)
    assert cost_ratio > salary_ratio


def test_rarity_multipliers() -> None:
    assert [rarity_multiplier(r) for r in TIERS] == [1.0, 1.3, 1.8, 2.5]


@pytest.mark.parametrize(
    "ovr,expected",
    [(0, Rarity.COMMON), (59, Rarity.COMMON), (60, Rarity.RARE), (79, Rarity.RARE),
     (80, Rarity.LEGENDARY), (94, Rarity.LEGENDARY), (95, Rarity.GLITCH), (100, Rarity.GLITCH)],
)
def test_rarity_bands(ovr, expected) -> None:
    assert rarity_for_overall(ovr) == expected


def test_avatar_colour_follows_position() -> None:
    assert avatar_color(Position.FORWARD) == "#f43f5e"
    assert avatar_color(Position.DEFENDER) == "#06b6d4"
    assert avatar_color(Position.MIDFIELDER) == avatar_color(Position.GOALKEEPER) == "#8b5cf6"
