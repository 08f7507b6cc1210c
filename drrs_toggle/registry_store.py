"""
Registry access for the display adapter class key.

Locates the adapter subkey holding a policy value and reads or writes
that value as a DWORD.
"""

from __future__ import annotations

import re
import sys
from contextlib import contextmanager
from itertools import count
from typing import Iterator, Optional

from . import logger
from .exceptions import PolicyNotFoundError
from .policy import DWORD_MASK
from .settings import DISPLAY_CLASS_SUBKEY

if sys.platform == "win32":
    import winreg
else:  # pragma: no cover - registry only exists on Windows
    winreg = None

_ADAPTER_SUBKEY = re.compile(r"^\d{4}$")
HKLM_NAME = "HKEY_LOCAL_MACHINE"


class RegistryStore:
    """Thin wrapper over winreg scoped to the HKLM display adapter class."""

    def __init__(
        self,
        base_subkey: str = DISPLAY_CLASS_SUBKEY,
        *,
        hive: Optional[int] = None,
        winreg_module=None,
    ) -> None:
        self._winreg = winreg_module or winreg
        if self._winreg is None:
            raise RuntimeError("The Windows registry is not available on this platform.")
        self.base_subkey = base_subkey
        self.hive = hive if hive is not None else self._winreg.HKEY_LOCAL_MACHINE
        self._log = logger.get_logger()

    def find_subkey_with_value(self, value_name: str) -> Optional[str]:
        """
        Return the path of the first four-digit adapter subkey holding
        ``value_name``, or None if no adapter has it.
        """
        for child in self._iter_adapter_subkeys():
            path = f"{self.base_subkey}\\{child}"
            try:
                with self._open_key(path, writable=False) as key:
                    self._winreg.QueryValueEx(key, value_name)
            except OSError:
                continue
            self._log.debug("Found {} under {}", value_name, path)
            return path
        self._log.debug("No adapter subkey of {} holds {}", self.base_subkey, value_name)
        return None

    def read_dword(self, path: str, value_name: str) -> int:
        try:
            with self._open_key(path, writable=False) as key:
                value, value_type = self._winreg.QueryValueEx(key, value_name)
        except FileNotFoundError as exc:
            raise PolicyNotFoundError(f"Registry value {value_name} not found under {path}.") from exc
        if value_type != self._winreg.REG_DWORD:
            self._log.warning("Registry value {} has unexpected type {}.", value_name, value_type)
        self._log.debug("Read {}\\{} = 0x{:08x}", path, value_name, int(value) & DWORD_MASK)
        return int(value) & DWORD_MASK

    def write_dword(self, path: str, value_name: str, value: int) -> None:
        with self._open_key(path, writable=True) as key:
            self._winreg.SetValueEx(key, value_name, 0, self._winreg.REG_DWORD, value & DWORD_MASK)
        self._log.debug("Wrote {}\\{} = 0x{:08x}", path, value_name, value & DWORD_MASK)

    def _iter_adapter_subkeys(self) -> Iterator[str]:
        try:
            with self._open_key(self.base_subkey, writable=False) as key:
                names = []
                for index in count():
                    try:
                        names.append(self._winreg.EnumKey(key, index))
                    except OSError:
                        break
        except FileNotFoundError:
            self._log.debug("Base key {} does not exist", self.base_subkey)
            return
        for name in names:
            if _ADAPTER_SUBKEY.match(name):
                yield name

    @contextmanager
    def _open_key(self, subkey: str, *, writable: bool) -> Iterator:
        access = self._winreg.KEY_READ
        if writable:
            access |= self._winreg.KEY_WRITE

        key = self._winreg.OpenKey(self.hive, subkey, 0, access)
        try:
            yield key
        finally:
            self._winreg.CloseKey(key)
