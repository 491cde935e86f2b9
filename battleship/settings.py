"""
Game constants and runtime configuration.

The grid and fleet are fixed. Runtime knobs (logging, web host/port) can be
overridden through environment variables and are surfaced as defaults for
the command-line flags in ``battleship.main``.
"""

import logging
import os
from pathlib import Path

# Fixed game rules
GRID_SIZE = 10
MAX_GUESSES = 50
MAX_PLACEMENT_ATTEMPTS = 1000  # per ship
ROW_LABELS = "ABCDEFGHIJ"

# Runtime configuration
LOG_LEVEL = os.getenv("BATTLESHIP_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("BATTLESHIP_LOG_DIR", "logs"))
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
WEB_HOST = os.getenv("BATTLESHIP_HOST", "127.0.0.1")
WEB_PORT = int(os.getenv("BATTLESHIP_PORT", "5000"))


def setup_logging(level=LOG_LEVEL, log_dir=LOG_DIR, verbose=False):
    """Configure root logging: a log file always, the console only when verbose."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    handlers = [logging.FileHandler(log_dir / 'battleship.log')]
    if verbose:
        handlers.append(logging.StreamHandler())

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return logging.getLogger('battleship')
