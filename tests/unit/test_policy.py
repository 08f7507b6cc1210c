"""Tests for DRRS bit evaluation and change planning."""
from __future__ import annotations

import pytest

from drrs_toggle.policy import (
    DRRS_MASK,
    POWER_POLICY,
    USER_POLICY,
    PolicyReading,
    clear_bit,
    is_enabled,
    plan_change,
    set_bit,
)
from drrs_toggle.settings import ToggleMode

SAMPLE_VALUES = [0x0, 0x40, 0x3F, 0xBF, 0x1234, 0xFFFFFFFF, 0x80000000]


def _reading(value, spec=USER_POLICY):
    return PolicyReading(spec=spec, path=r"SYSTEM\Class\0000", value=value)


@pytest.mark.unit
class TestIsEnabled:
    def test_mask_is_bit_six(self):
        assert DRRS_MASK == 1 << 6

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_set_bit_reads_enabled(self, value):
        assert is_enabled(value | DRRS_MASK, DRRS_MASK) is True
        assert is_enabled(set_bit(value)) is True

    @pytest.mark.parametrize("value", SAMPLE_VALUES)
    def test_cleared_bit_reads_disabled(self, value):
        assert is_enabled(value & ~DRRS_MASK, DRRS_MASK) is False
        assert is_enabled(clear_bit(value)) is False

    def test_other_bits_preserved(self):
        assert set_bit(0x0000_0105) == 0x0000_0145
        assert clear_bit(0xFFFF_FFFF) == 0xFFFF_FFBF


@pytest.mark.unit
class TestPlanChange:
    def test_enable_sets_bit_when_clear(self):
        change = plan_change(_reading(0x0), ToggleMode.ENABLE)

        assert change.needs_write
        assert change.new_value == 0x40
        assert change.state_word == "enabled"

    def test_enable_leaves_enabled_policy_alone(self):
        change = plan_change(_reading(0x41), ToggleMode.ENABLE)

        assert not change.needs_write
        assert change.new_value is None
        assert change.state_word == "enabled"

    def test_disable_clears_bit_when_set(self):
        change = plan_change(_reading(0x43, POWER_POLICY), ToggleMode.DISABLE)

        assert change.new_value == 0x03
        assert change.state_word == "disabled"

    def test_disable_leaves_disabled_policy_alone(self):
        change = plan_change(_reading(0x3), ToggleMode.DISABLE)

        assert not change.needs_write
        assert change.state_word == "disabled"

    @pytest.mark.parametrize("value", [0x0, 0x40])
    def test_status_never_plans_a_write(self, value):
        change = plan_change(_reading(value), ToggleMode.STATUS)

        assert not change.needs_write
        assert change.target_enabled is is_enabled(value)
