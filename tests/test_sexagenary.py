from __future__ import annotations

import pytest

from klcal.core.errors import MalformedReferenceSymbol
from klcal.core.sexagenary import (
    cycle_of_label,
    daily_cycle,
    earthly_branch,
    heavenly_stem,
    monthly_cycle,
    sexagenary_label,
    yearly_cycle,
)


@pytest.mark.parametrize(
    "year,cycle,label",
    [(1900, 37, "庚子"), (2000, 17, "庚辰"), (2001, 18, "辛巳"), (2020, 37, "庚子"), (2049, 6, "己巳")],
)
def test_yearly_cycle(year, cycle, label):
    assert yearly_cycle(year) == cycle
    assert sexagenary_label(cycle) == label


def test_monthly_cycle():
    assert monthly_cycle(1900, 1) == 15
    assert monthly_cycle(1999, 11) == 13
    assert monthly_cycle(2001, 5) == 31


def test_monthly_cycle_is_zero_for_leap_month():
    assert monthly_cycle(2001, 4, True) == 0


def test_daily_cycle():
    assert daily_cycle(2451545) == 55
    assert sexagenary_label(55) == "戊午"
    # consecutive days advance by one and wrap 60 -> 1
    cycles = [daily_cycle(2451545 + i) for i in range(61)]
    assert cycles[5] == 60 and cycles[6] == 1
    assert cycles[60] == cycles[0]


def test_stem_and_branch_symbols():
    assert heavenly_stem(1) == "甲"
    assert heavenly_stem(1, "korean") == "갑"
    assert earthly_branch(1) == "子"
    assert earthly_branch(60, "korean") == "해"
    assert sexagenary_label(37, "korean") == "경자"
    assert sexagenary_label(60) == "癸亥"


@pytest.mark.parametrize("script", ["chinese", "korean"])
def test_zero_cycle_is_empty(script):
    assert heavenly_stem(0, script) == ""
    assert earthly_branch(0, script) == ""
    assert sexagenary_label(0, script) == ""


def test_cycle_bounds_and_script_are_checked():
    with pytest.raises(ValueError):
        heavenly_stem(61)
    with pytest.raises(ValueError):
        earthly_branch(-1)
    with pytest.raises(ValueError):
        sexagenary_label(1, "japanese")


def test_cycle_of_label():
    assert cycle_of_label("甲子") == 1
    assert cycle_of_label("경자") == 37
    assert cycle_of_label("癸亥") == 60
    assert cycle_of_label("") == 0
    for c in (1, 17, 29, 55, 60):
        assert cycle_of_label(sexagenary_label(c, "korean")) == c


@pytest.mark.parametrize("label", ["甲丑", "갑", "甲子年", "XY", "갑子"])
def test_cycle_of_label_rejects_malformed(label):
    with pytest.raises(MalformedReferenceSymbol):
        cycle_of_label(label)
