"""
drrs_toggle package.

Reports, enables, or disables Display Refresh Rate Switching on Intel
graphics drivers by flipping a bit in two display-adapter registry values.
"""

__all__ = [
    "app",
    "backup",
    "exceptions",
    "logger",
    "policy",
    "privilege",
    "registry_store",
    "settings",
]
