import argparse
import json
import types

import pytest

from matcalc.cli import config as config_cli


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "settings.json"
    monkeypatch.setenv("MATCALC_SETTINGS", str(path))
    return path


def test_register_subcommands_parses_precision():
    parser = argparse.ArgumentParser()
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    config_cli.register_subcommands(subparsers)
    args = parser.parse_args(["set-precision", "4"])
    assert args.precision == 4


def test_set_precision_persists(settings_file, capsys):
    config_cli.dispatch(types.SimpleNamespace(subcommand="set-precision", precision=4))
    assert json.loads(settings_file.read_text()) == {"precision": 4}
    assert "Precision set to 4" in capsys.readouterr().out


def test_set_precision_repairs_invalid_file(settings_file):
    settings_file.write_text(json.dumps({"precision": 99}))
    config_cli.dispatch(types.SimpleNamespace(subcommand="set-precision", precision=3))
    assert json.loads(settings_file.read_text())["precision"] == 3


def test_set_precision_rejects_out_of_range(settings_file):
    with pytest.raises(SystemExit):
        config_cli.dispatch(types.SimpleNamespace(subcommand="set-precision", precision=-2))
    assert not settings_file.exists()


def test_show_renders_table(settings_file, capsys):
    settings_file.write_text(json.dumps({"precision": 6}))
    config_cli.dispatch(types.SimpleNamespace(subcommand="show"))
    out = capsys.readouterr().out
    assert "precision" in out
    assert "6" in out
