"""
Registry backup fragments.

Each fragment holds a single DWORD value in the format regedit imports,
so a backup can be restored by double-clicking it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from itertools import count
from pathlib import Path
from typing import Callable, Optional

from . import logger
from .policy import DWORD_MASK
from .registry_store import HKLM_NAME

REG_HEADER = "Windows Registry Editor Version 5.00"
TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"

_KEY_LINE = re.compile(r"^\[(?P<key>[^\]]+)\]$")
_DWORD_LINE = re.compile(r'^"(?P<name>[^"]+)"=dword:(?P<value>[0-9a-fA-F]{8})$')


@dataclass(frozen=True)
class BackupRecord:
    key_path: str
    value_name: str
    value: int


def render_fragment(path: str, value_name: str, value: int) -> str:
    """Return the .reg text for a single DWORD under HKLM\\``path``."""
    lines = [
        REG_HEADER,
        "",
        f"[{HKLM_NAME}\\{path}]",
        f'"{value_name}"=dword:{value & DWORD_MASK:08x}',
        "",
    ]
    return "\r\n".join(lines)


def write_backup(
    path: str,
    value_name: str,
    value: int,
    *,
    directory: Path,
    now: Optional[Callable[[], datetime]] = None,
) -> Path:
    """
    Write ``value`` to ``backup-<value_name>-<timestamp>.reg`` in ``directory``.

    The file is UTF-16LE with a BOM, which is what regedit exports.
    An existing backup is never replaced; a numeric suffix is added when
    the name is taken. Other errors writing the file are left to the caller.
    """
    stamp = (now or datetime.now)().strftime(TIMESTAMP_FORMAT)
    text = "\ufeff" + render_fragment(path, value_name, value)
    for attempt in count():
        suffix = f"-{attempt}" if attempt else ""
        target = directory / f"backup-{value_name}-{stamp}{suffix}.reg"
        try:
            with open(target, "x", encoding="utf-16le", newline="") as handle:
                handle.write(text)
        except FileExistsError:
            continue
        break
    logger.get_logger().info("Backed up {} (0x{:08x}) to {}", value_name, value & DWORD_MASK, target)
    return target


def load_backup(path: Path) -> BackupRecord:
    """Parse a fragment written by ``write_backup``."""
    text = path.read_text(encoding="utf-16")
    key_path: Optional[str] = None
    for line in text.splitlines():
        line = line.strip()
        key_match = _KEY_LINE.match(line)
        if key_match:
            key_path = key_match.group("key")
            continue
        value_match = _DWORD_LINE.match(line)
        if value_match and key_path is not None:
            return BackupRecord(
                key_path=key_path,
                value_name=value_match.group("name"),
                value=int(value_match.group("value"), 16),
            )
    raise ValueError(f"No DWORD entry found in backup file {path}")
