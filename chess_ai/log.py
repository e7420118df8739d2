"""
Logging helpers for scripts driving the engine.

Library modules only create loggers; handlers are configured by whoever runs
the engine.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


def setup_logger(debug: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Setup file-based logger for engine debugging.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Destination (default: ~/.chess_ai/engine.log)

    Returns:
        Configured "chess_ai" logger instance
    """
    if log_file is None:
        log_file = Path.home() / ".chess_ai" / "engine.log"
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("chess_ai")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    handler = logging.FileHandler(log_file, mode='w')
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
