"""
Logging setup for the Webeze backend.

``setup_logging`` runs once when the ASGI app module is imported. It installs
a console handler on the root logger, adds ``<LOG_FILE_DIR>/webeze.log`` when
file logging is switched on, and pins the level of chatty libraries. Modules
obtain their logger through ``get_logger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "webeze.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

DETAILED_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d in %(funcName)s): %(message)s"

JSON_FORMAT = (
    '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"location": "%(filename)s:%(lineno)d", "message": "%(message)s"}'
)

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
    "json": JSON_FORMAT,
}

# Applied after the handlers are installed; keys are logger names.
MODULE_LOG_LEVELS = {
    "webeze": "INFO",
    "webeze.server.api": "DEBUG",
    "webeze.server.services": "DEBUG",
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "asyncpg": "WARNING",
    "uvicorn.error": "INFO",
    "uvicorn.access": "INFO",
}


def _app_settings():
    # Imported on call: webeze.core must stay importable without the server package loaded.
    from webeze.server.core.config import settings

    return settings


def _file_handler(directory: str) -> logging.FileHandler:
    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(folder / LOG_FILE_NAME, encoding="utf-8")


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Install the root handlers.

    Arguments override ``WEBEZE_LOG_LEVEL`` and ``LOG_FORMAT``. The file handler
    is only added when both ``enable_file`` and ``ENABLE_FILE_LOGGING`` are true.
    Calling this again replaces the previously installed handlers.

    Args:
        log_level: Console level name, case-insensitive
        log_format: One of ``simple``, ``detailed`` or ``json``; anything else means ``detailed``
        enable_file: Allow the file handler for this call
    """
    config = _app_settings()
    level = (log_level or config.log_level).upper()
    fmt = log_format or config.log_format
    formatter = logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    console = logging.StreamHandler()
    console.setLevel(level)
    handlers: list[logging.Handler] = [console]

    file_logging = enable_file and config.enable_file_logging
    if file_logging:
        file_handler = _file_handler(config.log_file_dir)
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(name).setLevel(module_level)

    root.info("Logging configured: level=%s, format=%s, file_logging=%s", level, fmt, file_logging)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, normally the caller's ``__name__``."""
    return logging.getLogger(name)
