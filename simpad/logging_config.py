"""Logging setup for the editor.

The terminal is in raw mode while the editor runs, so records go to a
rotating file under the platform log directory instead of stderr. Raw key
tracing is opt-in through the ``SIMPAD_KEYTRACE`` environment variable.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
import tempfile
from pathlib import Path
from typing import Any

from platformdirs import user_log_dir

logger = logging.getLogger("simpad")
KEY_LOGGER = logging.getLogger("simpad.keyevents")

LOG_FILENAME = "editor.log"
KEYTRACE_FILENAME = "keytrace.log"
_FILE_FORMAT = "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"


def default_log_dir() -> Path:
    return Path(user_log_dir("simpad", appauthor=False))


def _resolve_log_dir(requested: object) -> Path:
    """Create the log directory, falling back to the temp dir when that fails."""
    log_dir = Path(requested) if isinstance(requested, str) and requested else default_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Error creating log directory '{log_dir}': {exc}", file=sys.stderr)
        log_dir = Path(tempfile.gettempdir())
    return log_dir


def _keytrace_enabled() -> bool:
    return os.environ.get("SIMPAD_KEYTRACE", "").strip().lower() in {"1", "true", "yes"}


def setup_logging(config: dict[str, Any] | None = None) -> None:
    """Configure application-wide logging handlers.

    Recognised keys in ``config``:

    - ``file_level`` (str): level for ``editor.log``. Default ``"INFO"``.
    - ``log_dir`` (str): directory for log files. Default: platform log dir.
    - ``log_to_console`` (bool): also log to stderr. Default ``False``.
    - ``console_level`` (str): level for the console handler. Default ``"WARNING"``.

    Existing root handlers are replaced so repeated calls do not duplicate
    records. The function never raises; problems are reported on stderr.
    """
    if config is None:
        config = {}
    file_level_name = str(config.get("file_level", "INFO")).upper()
    file_level = getattr(logging, file_level_name, logging.INFO)
    log_dir = _resolve_log_dir(config.get("log_dir"))
    formatter = logging.Formatter(_FILE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.handlers = []

    try:
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / LOG_FILENAME, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as exc:
        print(f"Error setting up file logger in '{log_dir}': {exc}", file=sys.stderr)
    else:
        file_handler.setFormatter(formatter)
        file_handler.setLevel(file_level)
        root_logger.addHandler(file_handler)

    if config.get("log_to_console", False):
        console_level_name = str(config.get("console_level", "WARNING")).upper()
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s"))
        console_handler.setLevel(getattr(logging, console_level_name, logging.WARNING))
        root_logger.addHandler(console_handler)

    root_logger.setLevel(file_level)

    KEY_LOGGER.handlers = []
    KEY_LOGGER.propagate = False
    if _keytrace_enabled():
        try:
            key_handler = logging.handlers.RotatingFileHandler(
                log_dir / KEYTRACE_FILENAME, maxBytes=1024 * 1024, backupCount=1, encoding="utf-8"
            )
        except OSError as exc:
            print(f"Error setting up key trace log in '{log_dir}': {exc}", file=sys.stderr)
        else:
            key_handler.setFormatter(logging.Formatter("%(asctime)s - %(message)s"))
            KEY_LOGGER.addHandler(key_handler)
            KEY_LOGGER.setLevel(logging.DEBUG)
    else:
        KEY_LOGGER.addHandler(logging.NullHandler())
        KEY_LOGGER.setLevel(logging.WARNING)

    logger.debug("Logging configured at %s in %s", file_level_name, log_dir)
