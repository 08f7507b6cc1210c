"""
Administrator rights detection.
"""

from __future__ import annotations

import ctypes
import sys


def is_elevated() -> bool:
    """Return True when the process runs with administrator rights."""
    if sys.platform != "win32":
        return False
    try:
        return bool(ctypes.windll.shell32.IsUserAnAdmin())
    except OSError:
        return False
