"""
Mode dispatcher for the DRRS toggle tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List

from . import backup, logger
from .exceptions import PolicyNotFoundError, PrivilegeError
from .policy import POLICIES, PolicyChange, PolicyReading, PolicySpec, plan_change
from .privilege import is_elevated
from .registry_store import RegistryStore
from .settings import ToggleMode, ToggleSettings

APP_NAME = "DRRS Toggle"


@dataclass
class ToggleApp:
    """
    Runs one status, enable, or disable pass over the DRRS policies.

    The registry is only opened after the privilege check passes, so
    ``registry_factory`` is called lazily.
    """

    settings: ToggleSettings = field(default_factory=ToggleSettings)
    registry_factory: Callable[[str], RegistryStore] = RegistryStore
    is_admin: Callable[[], bool] = is_elevated
    clock: Callable[[], datetime] = datetime.now

    def __post_init__(self) -> None:
        self._logger = logger.get_logger()

    def run(self) -> int:
        if not self.is_admin():
            raise PrivilegeError(f"{APP_NAME} must be run as Administrator.")

        self._logger.debug("Mode: {}", self.settings.mode.value)
        registry = self.registry_factory(self.settings.base_path)
        readings = [self._read_policy(registry, spec) for spec in POLICIES]
        changes = [plan_change(reading, self.settings.mode) for reading in readings]

        if self.settings.mode is ToggleMode.STATUS:
            self.report_status(changes)
            return 0

        for change in changes:
            self._apply(registry, change)
        return 0

    def report_status(self, changes: List[PolicyChange]) -> None:
        for change in changes:
            self._logger.info("DRRS {} is {}", change.reading.spec.label, change.state_word)

    def _read_policy(self, registry: RegistryStore, spec: PolicySpec) -> PolicyReading:
        path = registry.find_subkey_with_value(spec.value_name)
        if path is None:
            raise PolicyNotFoundError(
                f"Registry value {spec.value_name} not found under HKLM\\{self.settings.base_path}."
            )
        value = registry.read_dword(path, spec.value_name)
        self._logger.debug("{} = 0x{:08x}", spec.value_name, value)
        return PolicyReading(spec=spec, path=path, value=value)

    def _apply(self, registry: RegistryStore, change: PolicyChange) -> None:
        reading = change.reading
        if not change.needs_write:
            self._logger.info("DRRS {} is already {}", reading.spec.label, change.state_word)
            return

        backup.write_backup(
            reading.path,
            reading.spec.value_name,
            reading.value,
            directory=self.settings.backup_dir,
            now=self.clock,
        )
        registry.write_dword(reading.path, reading.spec.value_name, change.new_value)
        self._logger.info("DRRS {} {}", reading.spec.label, change.state_word)
        self._logger.warning("A reboot is required for the change to take effect.")
