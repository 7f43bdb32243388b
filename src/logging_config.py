"""
Root logger setup for the booking service.

Modules log through ``logging.getLogger(__name__)``; handlers are attached
here only, from ``create_app``, using ``LOG_LEVEL`` and ``LOG_FILE``.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Attach a console handler, plus a file handler when ``log_file`` is set.

    Does nothing if the root logger already has handlers, so building the
    app several times (as the tests do) never duplicates output.  Unknown
    level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
