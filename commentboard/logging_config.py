"""Logging configuration for the comment board."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once per process.

    Args:
        level: Log level name, e.g. ``"DEBUG"`` or ``"INFO"``.
    """
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=resolved,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stdout,
        )

    # Socket.IO and Engine.IO are chatty at INFO
    logging.getLogger("socketio").setLevel(logging.WARNING)
    logging.getLogger("engineio").setLevel(logging.WARNING)

    logging.getLogger("commentboard").setLevel(resolved)
