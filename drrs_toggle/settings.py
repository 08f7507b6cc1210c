"""
Run configuration for the DRRS toggle tool.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

DISPLAY_CLASS_SUBKEY = r"SYSTEM\CurrentControlSet\Control\Class\{4d36e968-e325-11ce-bfc1-08002be10318}"


class ToggleMode(Enum):
    STATUS = "status"
    ENABLE = "enable"
    DISABLE = "disable"


@dataclass(eq=True)
class ToggleSettings:
    mode: ToggleMode = ToggleMode.STATUS
    debug: bool = False
    backup_dir: Path = field(default_factory=Path.cwd)
    log_file: Optional[Path] = None
    base_path: str = DISPLAY_CLASS_SUBKEY
