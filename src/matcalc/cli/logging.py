"""``matcalc logging`` subcommands: persist and inspect the log level.

The level written by ``set-level`` is picked up by every matcalc logger the
next time a process configures it, so ``show-level`` reports the persisted
value even in a fresh process.
"""

import logging

from matcalc.logging import get_logger, reset_logger
from matcalc.logging.config import _resolve_config_path, save_log_level
from matcalc.logging.logging import _resolve_log_file, get_configured_level

LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def register_subcommands(subparsers):
    """Register ``set-level``, ``show-path`` and ``show-level``.

    Parameters
    ----------
    subparsers : :class:`argparse._SubParsersAction`
        The ``argparse`` subparsers object to which logging commands are added.
    """

    set_level_parser = subparsers.add_parser("set-level", help="Persist the logging level")
    set_level_parser.add_argument("level", choices=LEVELS, help="Logging level to use")

    show_path_parser = subparsers.add_parser("show-path", help="Show the log file location")
    show_path_parser.add_argument(
        "--config",
        action="store_true",
        help="Show the logging config file instead of the log file",
    )
    subparsers.add_parser("show-level", help="Show the configured logging level")


def _set_level(level_name):
    path = save_log_level(level_name)
    # loggers already set up in this process keep their old level otherwise
    reset_logger()
    get_logger(level=getattr(logging, level_name))
    print(f"Log level set to {level_name} ({path})")


def dispatch(args):
    """Execute the logging command associated with ``args.subcommand``."""

    if args.subcommand == "set-level":
        _set_level(args.level.upper())
    elif args.subcommand == "show-path":
        if getattr(args, "config", False):
            print(_resolve_config_path().resolve())
        else:
            print(_resolve_log_file().resolve())
    elif args.subcommand == "show-level":
        print(get_configured_level())
    else:
        get_logger(__name__).error("No handler for subcommand: %s", args.subcommand)
