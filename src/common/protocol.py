# src/common/protocol.py
#
# Parsing of the one-token answers a player types at each prompt.

from enum import Enum
from typing import Optional

from .logging_utils import get_logger
from .constants import (
    DRAW_FROM_DISCARD, DRAW_FROM_DECK,
    CHOICE_SWAP, CHOICE_DISCARD,
    CHOICE_KNOCK, CHOICE_END_TURN,
    HAND_SIZE,
)

_log = get_logger("protocol")

# -------------------------
# Errors
# -------------------------
class InvalidInputError(ValueError):
    """Raised when an answer at a fatal prompt is not one of the offered tokens."""
    pass


def _require(condition: bool, msg: str) -> None:
    if not condition:
        _log.warning(f"InvalidInputError: {msg}")
        raise InvalidInputError(msg)


def _clean(raw: str) -> str:
    return raw.strip()


# -------------------------
# Answers
# -------------------------
class DrawSource(Enum):
    DISCARD = DRAW_FROM_DISCARD
    DECK = DRAW_FROM_DECK


class Disposition(Enum):
    SWAP = CHOICE_SWAP
    DISCARD = CHOICE_DISCARD


class TurnEnd(Enum):
    KNOCK = CHOICE_KNOCK
    END = CHOICE_END_TURN


# -------------------------
# Draw source: fatal on anything else
# -------------------------
def parse_draw_source(raw: str) -> DrawSource:
    answer = _clean(raw)
    _require(
        answer in (DRAW_FROM_DISCARD, DRAW_FROM_DECK),
        f"Command not recognized: '{answer}'",
    )
    return DrawSource(answer)


# -------------------------
# Disposition: unknown answers come back as None and the caller logs them
# -------------------------
def parse_disposition(raw: str) -> Optional[Disposition]:
    answer = _clean(raw)
    if answer in (CHOICE_SWAP, CHOICE_DISCARD):
        return Disposition(answer)
    return None


# -------------------------
# Swap slot: fatal unless an integer 0..HAND_SIZE-1
# -------------------------
def parse_slot(raw: str) -> int:
    answer = _clean(raw)
    _require(answer.isascii() and answer.isdigit(), f"Slot must be a number 0-{HAND_SIZE - 1}, got '{answer}'")
    slot = int(answer)
    _require(0 <= slot < HAND_SIZE, f"Slot must be 0-{HAND_SIZE - 1}, got {slot}")
    return slot


# -------------------------
# End-of-turn menu: knocking is only offered before anyone has knocked
# -------------------------
def parse_turn_end(raw: str, knock_allowed: bool) -> TurnEnd:
    answer = _clean(raw)
    allowed = (CHOICE_KNOCK, CHOICE_END_TURN) if knock_allowed else (CHOICE_END_TURN,)
    _require(answer in allowed, f"choice '{answer}' not recognized.")
    return TurnEnd(answer)
