from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_NAME = "ems.log"
LOG_BACKUP_DAYS = 7


def configure_logging(level: str = "INFO", log_dir: Optional[str | Path] = None) -> None:
    """Install console (and optionally daily rotating file) handlers on the root logger.

    Safe to call more than once: handlers installed by a previous call are replaced.
    """

    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        if getattr(handler, "_ems_handler", False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    console._ems_handler = True  # type: ignore[attr-defined]
    root.addHandler(console)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            path / LOG_FILE_NAME,
            when="midnight",
            backupCount=LOG_BACKUP_DAYS,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        file_handler._ems_handler = True  # type: ignore[attr-defined]
        root.addHandler(file_handler)

    # Keep werkzeug's per-request lines but drop SQLAlchemy chatter.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
