# matcalc/logging/logging.py
import os
import logging
import sys
from pathlib import Path

from .config import load_log_level

# Names of loggers that already carry matcalc handlers
_LOGGER_INITIALIZED = {}


def _resolve_log_dir(log_dir=None):
    if log_dir is not None:
        return Path(log_dir)
    return Path(os.environ.get("MATCALC_LOG_DIR", Path.home() / ".matcalc" / "logs"))


def _resolve_log_file(log_file=None, log_dir=None):
    if log_file is not None:
        return Path(log_file)
    return _resolve_log_dir(log_dir) / "matcalc.log"


def get_logger(
    name="matcalc",
    level=None,
    log_file=None,
    log_dir=None,
    console=True,
    filemode="a",
    fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    encoding="utf-8",
    propagate=False
):
    """
    Get or create a logger with optional configuration.
    - name: Logger name (default 'matcalc')
    - level: Logging level (default: persisted level, else logging.INFO)
    - log_file: File path for logs (default: <log_dir>/matcalc.log)
    - log_dir: Directory for logs (default: ~/.matcalc/logs)
    - console: If True, logs also go to stderr
    - filemode: File mode for log file ('a' append, 'w' overwrite)
    - fmt, datefmt: Formatting for log messages
    - encoding: Encoding for file log
    - propagate: Whether to propagate to root logger (default False)
    """
    logger = logging.getLogger(name)
    if not _LOGGER_INITIALIZED.get(name, False):
        if level is None:
            level = load_log_level()
            if level is None:
                level = logging.INFO
        file_path = _resolve_log_file(log_file, log_dir)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        logger.setLevel(level)
        logger.propagate = propagate
        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        fh = logging.FileHandler(file_path, mode=filemode, encoding=encoding)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

        if console:
            ch = logging.StreamHandler(sys.stderr)
            ch.setFormatter(formatter)
            logger.addHandler(ch)

        _LOGGER_INITIALIZED[name] = True

    return logger


def reset_logger(name=None):
    """Reset configured loggers so they can be reconfigured.

    Parameters
    ----------
    name : str, optional
        Name of the logger to reset. If omitted, all loggers tracked by
        :func:`get_logger` are reset.

    Examples
    --------
    >>> logger = get_logger("demo", level=logging.DEBUG)
    >>> reset_logger("demo")
    >>> logger = get_logger("demo", level=logging.INFO)
    """
    if name is None:
        names = list(_LOGGER_INITIALIZED.keys())
    else:
        names = [name]

    for n in names:
        logger = logging.getLogger(n)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    if name is None:
        _LOGGER_INITIALIZED.clear()
    else:
        _LOGGER_INITIALIZED.pop(name, None)


def get_configured_level(name="matcalc"):
    """Return the configured logging level name for ``name``.

    A logger not yet set up by :func:`get_logger` in this process reports the
    level :func:`get_logger` would give it: the persisted one, else INFO.
    """

    if _LOGGER_INITIALIZED.get(name, False):
        level = logging.getLogger(name).getEffectiveLevel()
    else:
        level = load_log_level()
        if level is None:
            level = logging.INFO
    return logging.getLevelName(level)
