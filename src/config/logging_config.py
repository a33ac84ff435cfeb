"""
Logging setup - Root logger configuration.

Modules log through ``logging.getLogger(__name__)``; this module attaches a
single console handler to the root logger when the application starts.
"""

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once.

    If the root logger already has handlers (uvicorn, pytest), only the
    level is applied.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
