# src/common/logging_utils.py

import logging
import os
from typing import Optional

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
# WARNING by default so log lines don't get mixed into normal play output.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Call once at program start (cli/main.py)."""
    level = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def describe_hand(cards) -> str:
    """Compact one-line form of a card sequence for debug logs: '3 9 P10 S10'."""
    return " ".join(str(c) for c in cards)
