# src/engine/actions.py
#
# One handler per action-card kind. None of the special effects exist yet:
# each handler raises ActionNotImplementedError and the turn logs it.

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Dict

from src.common.cards import Card, CardKind

if TYPE_CHECKING:
    from src.engine.game import Game
    from src.engine.player import Player

ActionHandler = Callable[["Card", "Player", "Game"], None]


class ActionNotImplementedError(NotImplementedError):
    """Raised by action-card handlers whose effect has not been written yet."""
    pass


def resolve_peek(card: Card, player: Player, game: Game) -> None:
    # look at one of your own hidden cards
    raise ActionNotImplementedError("Action cards not implemented (Peek).")


def resolve_swap(card: Card, player: Player, game: Game) -> None:
    # trade one of your cards with an opponent's, sight unseen
    raise ActionNotImplementedError("Action cards not implemented (Swap).")


ACTION_HANDLERS: Dict[CardKind, ActionHandler] = {
    CardKind.PEEK: resolve_peek,
    CardKind.SWAP: resolve_swap,
}


def resolve_action(card: Card, player: Player, game: Game) -> None:
    if not card.kind.is_action:
        raise ValueError(f"Not an action card: {card}")
    ACTION_HANDLERS[card.kind](card, player, game)
