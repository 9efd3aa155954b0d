from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "form_data_cache"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(
    path: Optional[Path] = None,
    level: Union[int, str, None] = None,
) -> logging.Handler:
    """Send the package's log records to ``path`` (appended) or stderr.

    Calling it again replaces the handler installed by the previous call. The
    level defaults to ``FORM_DATA_LOG_LEVEL`` or INFO.
    """
    global _handler

    if level is None:
        level = os.environ.get("FORM_DATA_LOG_LEVEL", "").strip().upper() or "INFO"

    if path is not None:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler.close()
    logger.setLevel(level)
    logger.addHandler(handler)
    _handler = handler
    return handler
