"""``matcalc config`` subcommands for display settings."""

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from matcalc.config import DisplaySettings, load_settings, read_json, save_settings, settings_path
from matcalc.logging import get_logger


def register_subcommands(subparsers):
    """Attach ``show`` and ``set-precision`` to ``subparsers``.

    Examples
    --------
    >>> import argparse
    >>> parser = argparse.ArgumentParser(prog="matcalc config")
    >>> subparsers = parser.add_subparsers(dest="subcommand", required=True)
    >>> register_subcommands(subparsers)
    >>> parser.parse_args(["set-precision", "4"])
    Namespace(subcommand='set-precision', precision=4)
    """

    subparsers.add_parser("show", help="Show current display settings")
    precision_parser = subparsers.add_parser(
        "set-precision", help="Set the number of fraction digits shown"
    )
    precision_parser.add_argument("precision", type=int)


def _render_settings(settings, path, console=None):
    console = console or Console()
    table = Table(title="matcalc settings")
    table.add_column("Setting", style="bold")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    table.add_row("file", str(path))
    console.print(table)


def dispatch(args):
    logger = get_logger(__name__, console=False)

    if args.subcommand == "show":
        _render_settings(load_settings(), settings_path())
    elif args.subcommand == "set-precision":
        current = read_json(settings_path())
        try:
            settings = DisplaySettings.model_validate({**current, "precision": args.precision})
        except ValidationError as exc:
            raise SystemExit(f"Invalid precision {args.precision}: {exc.errors()[0]['msg']}") from exc
        path = save_settings(settings)
        logger.info("precision set to %s in %s", settings.precision, path)
        print(f"Precision set to {settings.precision}")
    else:
        logger.error("No handler for subcommand: %s", args.subcommand)
