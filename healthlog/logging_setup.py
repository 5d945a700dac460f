from __future__ import annotations

import logging

_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the ``healthlog`` logger (once)."""
    logger = logging.getLogger("healthlog")
    logger.setLevel(level)

    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
        logger.addHandler(console)

    return logger
