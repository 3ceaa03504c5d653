# matcalc/cli/main.py
import argparse

from pydantic import ValidationError

from matcalc.cli import config as config_cli
from matcalc.cli import logging as logging_cli
from matcalc.cli.menu import run_menu
from matcalc.config import load_settings
from matcalc.core.formatting import DEFAULT_PRECISION
from matcalc.logging import get_logger


def _run(precision=None):
    if precision is None:
        try:
            precision = load_settings().precision
        except ValidationError as exc:
            get_logger(__name__).warning("ignoring invalid settings file: %s", exc)
            precision = DEFAULT_PRECISION
    elif precision < 0:
        raise SystemExit("--precision must be >= 0")
    run_menu(precision=precision)


def main(argv=None):

    parser = argparse.ArgumentParser(prog="matcalc", description="Interactive matrix calculator")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Start the interactive menu")
    run_parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Maximum fraction digits shown (default: from settings)",
    )

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)

    config_parser = subparsers.add_parser("config", help="Display settings")
    config_subparsers = config_parser.add_subparsers(dest="subcommand", required=True)
    config_cli.register_subcommands(config_subparsers)

    args = parser.parse_args(argv)

    # no subcommand behaves like `matcalc run`
    if args.command in (None, "run"):
        _run(getattr(args, "precision", None))
    elif args.command == "logging":
        logging_cli.dispatch(args)
    elif args.command == "config":
        config_cli.dispatch(args)


if __name__ == "__main__":
    main()
