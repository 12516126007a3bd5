from __future__ import annotations

import logging
import sys

from .config import LOG_LEVEL

_ROOT_LOGGER = "cv_render"
_configured = False


def _configure() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(_ROOT_LOGGER)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    _configure()
    short = name.rsplit(".", 1)[-1] if name else "app"
    return logging.getLogger(f"{_ROOT_LOGGER}.{short}")
