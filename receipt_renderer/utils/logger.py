"""Central logging configuration for the receipt renderer."""
from __future__ import annotations

import logging
import os
from typing import Optional

_DEFAULT_LEVEL = logging.INFO
_LEVEL_ENV_VAR = "RECEIPT_RENDERER_LOG_LEVEL"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configured_level() -> int:
    name = os.environ.get(_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else _DEFAULT_LEVEL
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger, configuring the root handler on first use."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_configured_level(), format=_FORMAT)
    return logger
