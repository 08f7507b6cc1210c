"""
Entry point for the DRRS toggle tool.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from drrs_toggle import logger as app_logger
from drrs_toggle.app import APP_NAME, ToggleApp
from drrs_toggle.exceptions import DrrsToggleError
from drrs_toggle.settings import ToggleMode, ToggleSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drrs-toggle",
        description=f"{APP_NAME}: report, enable, or disable Intel Display Refresh Rate Switching.",
    )
    modes = parser.add_mutually_exclusive_group()
    modes.add_argument("-Enable", "--enable", dest="enable", action="store_true", help="Enable DRRS.")
    modes.add_argument("-Disable", "--disable", dest="disable", action="store_true", help="Disable DRRS.")
    parser.add_argument("-Debug", "--debug", dest="debug", action="store_true", help="Print diagnostic output.")
    parser.add_argument(
        "-BackupDir",
        "--backup-dir",
        dest="backup_dir",
        type=Path,
        default=None,
        help="Directory for .reg backups (default: current directory).",
    )
    parser.add_argument(
        "-LogFile",
        "--log-file",
        dest="log_file",
        type=Path,
        default=None,
        help="Also write a debug log to this file.",
    )
    return parser


def settings_from_args(args: argparse.Namespace) -> ToggleSettings:
    if args.enable:
        mode = ToggleMode.ENABLE
    elif args.disable:
        mode = ToggleMode.DISABLE
    else:
        mode = ToggleMode.STATUS

    settings = ToggleSettings(mode=mode, debug=args.debug, log_file=args.log_file)
    if args.backup_dir is not None:
        settings.backup_dir = args.backup_dir
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and run one toggle pass."""
    args = build_parser().parse_args(argv)
    settings = settings_from_args(args)
    app_logger.configure(debug=settings.debug, log_path=settings.log_file)
    log = app_logger.get_logger()

    try:
        return ToggleApp(settings=settings).run()
    except DrrsToggleError as exc:
        log.error("{}", exc)
        return exc.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
