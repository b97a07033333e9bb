"""
Root logger setup.

Everything in the package logs through ``logging.getLogger(__name__)``
(the access log uses ``usuarios_api.access``), so configuring the root
logger is enough.  Records go to stderr and, when ``LOG_FILE`` is set,
to that file as well, e.g.::

    2026-01-31 12:00:00 [INFO] usuarios_api.app.core.store: Added user 6 (Ana)
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach handlers to the root logger unless it already has some.

    ``create_app`` calls this for every application it builds, and test
    runners install their own capture handler, so an already configured
    root logger is left as it is.  Unknown level names fall back to
    ``INFO``.  Returns ``True`` when handlers were installed.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)
    numeric_level = getattr(logging, level.upper(), None)
    root.setLevel(numeric_level if isinstance(numeric_level, int) else logging.INFO)
    return True
