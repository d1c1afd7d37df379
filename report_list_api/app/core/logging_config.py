"""
Logging configuration for the Report List API.

``setup_logging`` applies the ``LOG_LEVEL`` / ``LOG_FILE`` settings to
the root logger, to this package's loggers and to uvicorn's loggers,
so request logs and store logs share one format and one level.

Handlers are identified by name, which keeps repeated calls (one per
``create_app``) from stacking duplicates while still letting a later
call change the level or add the file handler.  Handlers that other
tools attach to the root logger, such as pytest's capture handler, are
left alone.
"""

import logging
from pathlib import Path

from .config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "report_list_api.console"
FILE_HANDLER = "report_list_api.file"

# uvicorn configures these itself unless started with ``log_config=None``
# (see ``run.py``); the level is applied either way.
APP_LOGGERS = ("report_list_api", "uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(config: Settings) -> None:
    """Configure logging from ``config``.

    Unknown level names fall back to ``INFO``.  The file handler is
    only added when ``config.log_file`` is set; relative paths are
    resolved against the current working directory.
    """
    level = getattr(logging, config.log_level.upper(), None)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    attached = {handler.get_name() for handler in root.handlers}

    if CONSOLE_HANDLER not in attached:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if config.log_file and FILE_HANDLER not in attached:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug(
        "Logging configured at %s%s",
        logging.getLevelName(level),
        f", writing to {config.log_file}" if config.log_file else "",
    )
