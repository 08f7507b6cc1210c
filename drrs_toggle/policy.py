"""
DRRS policy values and the pure logic that decides how to change them.

Nothing here touches the registry; callers read the current values, ask
``plan_change`` what to do, and perform the writes themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .settings import ToggleMode

DRRS_MASK = 0x40
DWORD_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class PolicySpec:
    label: str
    value_name: str


USER_POLICY = PolicySpec(label="user policy", value_name="DCUserPreferencePolicy")
POWER_POLICY = PolicySpec(label="power policy", value_name="PowerDcPolicy")
POLICIES: Tuple[PolicySpec, ...] = (USER_POLICY, POWER_POLICY)


@dataclass(frozen=True)
class PolicyReading:
    """A policy value as found in the registry."""

    spec: PolicySpec
    path: str
    value: int

    @property
    def enabled(self) -> bool:
        return is_enabled(self.value)


@dataclass(frozen=True)
class PolicyChange:
    """Outcome of planning one policy for an enable or disable run."""

    reading: PolicyReading
    target_enabled: bool
    new_value: Optional[int] = None

    @property
    def needs_write(self) -> bool:
        return self.new_value is not None

    @property
    def state_word(self) -> str:
        return describe_state(self.target_enabled)


def is_enabled(value: int, mask: int = DRRS_MASK) -> bool:
    """Return whether the DRRS bit is set in ``value``."""
    return (value & mask) == mask


def set_bit(value: int, mask: int = DRRS_MASK) -> int:
    return (value | mask) & DWORD_MASK


def clear_bit(value: int, mask: int = DRRS_MASK) -> int:
    return value & ~mask & DWORD_MASK


def describe_state(enabled: bool) -> str:
    return "enabled" if enabled else "disabled"


def plan_change(reading: PolicyReading, mode: ToggleMode) -> PolicyChange:
    """
    Compute the value a policy should be written with for ``mode``.

    A policy already in the requested state yields a change with no new
    value. Status mode never plans a write.
    """
    if mode is ToggleMode.STATUS:
        return PolicyChange(reading=reading, target_enabled=reading.enabled)

    want_enabled = mode is ToggleMode.ENABLE
    if reading.enabled == want_enabled:
        return PolicyChange(reading=reading, target_enabled=want_enabled)

    new_value = set_bit(reading.value) if want_enabled else clear_bit(reading.value)
    return PolicyChange(reading=reading, target_enabled=want_enabled, new_value=new_value)
