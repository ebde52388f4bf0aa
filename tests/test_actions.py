import logging

import pytest

from woodshop.actions import (
    Action,
    ConditionKind,
    ConditionalTreat,
    Cut,
    Dry,
    DRY_FACTOR,
    Treat,
)


class CountingAction(Action):
    def __init__(self) -> None:
        self.calls = 0

    def apply(self, item) -> None:
        self.calls += 1


def test_action_is_abstract():
    with pytest.raises(TypeError):
        Action()


def test_cut_records_length_and_leaves_state(make_item):
    item = make_item(moisture=12.5)
    cut = Cut(2.5)
    cut.apply(item)

    assert cut.length == 2.5
    assert item.moisture_content == 12.5
    assert item.is_treated is False
    assert item.thickness == 25.0


def test_dry_reduces_moisture_by_a_fifth(make_item):
    item = make_item(moisture=15.0)
    Dry().apply(item)
    assert DRY_FACTOR == 0.8
    assert item.moisture_content == pytest.approx(12.0)


def test_dry_compounds(make_item):
    item = make_item(moisture=20.0)
    dry = Dry()
    for _ in range(3):
        dry.apply(item)
    assert item.moisture_content == pytest.approx(20.0 * 0.8 ** 3)


def test_treat_is_idempotent(make_item):
    item = make_item(treated=False)
    Treat().apply(item)
    assert item.is_treated is True
    Treat().apply(item)
    assert item.is_treated is True

    already = make_item(treated=True)
    Treat().apply(already)
    assert already.is_treated is True


def test_conditional_treat_above_threshold(make_item):
    item = make_item(moisture=12.0)
    ConditionalTreat(Treat(), ConditionKind.MOISTURE_ABOVE, 10.0).apply(item)
    assert item.is_treated is True


def test_conditional_treat_below_threshold(make_item):
    item = make_item(moisture=12.0)
    ConditionalTreat(Treat(), ConditionKind.MOISTURE_ABOVE, 15.0).apply(item)
    assert item.is_treated is False


def test_conditional_treat_boundary_is_strict(make_item):
    item = make_item(moisture=10.0)
    ConditionalTreat(Treat(), "MoistureAbove", 10.0).apply(item)
    assert item.is_treated is False


def test_conditional_accepts_string_kind(make_item):
    item = make_item(moisture=12.0)
    gate = ConditionalTreat(Treat(), "MoistureAbove", 10.0)
    assert gate.matches(item)
    gate.apply(item)
    assert item.is_treated is True


def test_unrecognised_condition_is_silent_no_match(make_item, caplog):
    caplog.set_level(logging.DEBUG, logger="woodshop.actions.builtin")
    inner = CountingAction()
    item = make_item(moisture=50.0)

    ConditionalTreat(inner, "MoistureBelow", 10.0).apply(item)

    assert inner.calls == 0
    assert item.is_treated is False
    assert "Unrecognised condition kind" in caplog.text


def test_conditional_wraps_any_action(make_item):
    item = make_item(moisture=20.0)
    gate = ConditionalTreat(Dry(), ConditionKind.MOISTURE_ABOVE, 15.0)

    gate.apply(item)
    assert item.moisture_content == pytest.approx(16.0)
    gate.apply(item)
    assert item.moisture_content == pytest.approx(12.8)
    # 12.8 is no longer above 15
    gate.apply(item)
    assert item.moisture_content == pytest.approx(12.8)


def test_nested_conditionals(make_item):
    inner = ConditionalTreat(Treat(), ConditionKind.MOISTURE_ABOVE, 5.0)
    outer = ConditionalTreat(inner, ConditionKind.MOISTURE_ABOVE, 10.0)

    wet = make_item(moisture=11.0)
    outer.apply(wet)
    assert wet.is_treated is True

    dryish = make_item(moisture=8.0)
    outer.apply(dryish)
    assert dryish.is_treated is False


def test_conditional_rejects_non_action():
    with pytest.raises(TypeError):
        ConditionalTreat("TREAT", ConditionKind.MOISTURE_ABOVE, 10.0)
