"""
Logging setup shared by services and states.

Every logger lives under the ``motoparts`` namespace and writes to the
console and to a rotating file. Behaviour follows the environment:

- ``ENV``: ``prod`` logs warnings and up, without logger names
- ``LOG_LEVEL``: overrides the level picked from ``ENV``
- ``LOG_DIR``: directory of ``motoparts.log`` (``logs`` by default)
"""
import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

ROOT_LOGGER_NAME = "motoparts"
LOG_FILE_NAME = "motoparts.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3

DEV_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
PROD_FORMAT = "%(asctime)s [%(levelname)s] - %(message)s"


def _is_production() -> bool:
    return (os.getenv("ENV") or "dev").strip().lower() in {"prod", "production"}


def _level(is_prod: bool) -> int:
    override = logging.getLevelName((os.getenv("LOG_LEVEL") or "").strip().upper())
    if isinstance(override, int):
        return override
    return logging.WARNING if is_prod else logging.INFO


def _configure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if getattr(root, "_configured", False):
        return root

    is_prod = _is_production()
    formatter = logging.Formatter(PROD_FORMAT if is_prod else DEV_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    log_dir = Path(os.getenv("LOG_DIR") or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_dir / LOG_FILE_NAME,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    root.setLevel(_level(is_prod))
    root.propagate = False
    root._configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """
    Returns ``motoparts.<name>``, configuring the shared handlers on first use.

    Args:
        name: Component name, e.g. ``"ProductService"``
    """
    _configure_root()
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
