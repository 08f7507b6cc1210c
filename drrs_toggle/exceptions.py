"""Error types raised by the DRRS toggle tool.

Each error carries the process exit code reported by the command line
entry point.
"""


class DrrsToggleError(Exception):
    """Base exception for all tool-specific errors."""

    exit_code = 1


class PrivilegeError(DrrsToggleError):
    """Raised when the process is not running with administrator rights."""

    exit_code = 255


class PolicyNotFoundError(DrrsToggleError):
    """Raised when a policy value or the subkey holding it cannot be found."""

    exit_code = 1
