def test_logging_show_level_reports_configured_level(tmp_path, monkeypatch, capsys):
    """`matcalc logging show-level` should print the configured log level."""

    monkeypatch.setenv("MATCALC_LOG_CONFIG", str(tmp_path / "config" / "logging.json"))
    monkeypatch.setenv("MATCALC_LOG_DIR", str(tmp_path / "logs"))

    from matcalc.logging import reset_logger
    from matcalc.cli.main import main

    reset_logger()

    main(["logging", "set-level", "DEBUG"])
    capsys.readouterr()

    main(["logging", "show-level"])
    assert capsys.readouterr().out.strip() == "DEBUG"

    reset_logger()


def test_show_level_reads_persisted_level_in_fresh_process(tmp_path, monkeypatch, capsys):
    """`show-level` must not depend on `set-level` having run in this process."""

    import logging

    monkeypatch.setenv("MATCALC_LOG_CONFIG", str(tmp_path / "config" / "logging.json"))
    monkeypatch.setenv("MATCALC_LOG_DIR", str(tmp_path / "logs"))

    from matcalc.logging import reset_logger
    from matcalc.cli.main import main

    main(["logging", "set-level", "DEBUG"])
    capsys.readouterr()

    # forget everything set-level configured in memory
    reset_logger()
    logging.getLogger("matcalc").setLevel(logging.NOTSET)

    main(["logging", "show-level"])
    assert capsys.readouterr().out.strip() == "DEBUG"

    reset_logger()


def test_show_path_config_flag(tmp_path, monkeypatch, capsys):
    config_file = tmp_path / "config" / "logging.json"
    monkeypatch.setenv("MATCALC_LOG_CONFIG", str(config_file))

    from matcalc.cli.main import main

    main(["logging", "show-path", "--config"])
    assert capsys.readouterr().out.strip() == str(config_file.resolve())
