# src/engine/player.py

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING, Optional

from src.common.cards import Card, Hand
from src.common.protocol import (
    Disposition,
    DrawSource,
    parse_disposition,
    parse_draw_source,
    parse_slot,
)
from src.common.constants import HAND_SIZE
from src.common.logging_utils import get_logger, describe_hand
from src.engine.actions import ActionNotImplementedError, resolve_action

if TYPE_CHECKING:
    from src.engine.game import Game

log = get_logger("engine.player")

PROMPT_DRAW_SOURCE = "Draw from d(i)scard or d(e)ck? "
PROMPT_DISPOSITION = "(S)wap or (D)iscard? "
PROMPT_SLOT = f"Which card to swap? (0-{HAND_SIZE - 1}) "


class Player:
    def __init__(self, name: str, hand: Hand, player_id: Optional[str] = None) -> None:
        self.name = name
        self.hand = hand
        self.id = player_id or uuid.uuid4().hex

    def __repr__(self) -> str:
        return f"Player(name={self.name!r}, id={self.id[:8]})"

    def take_turn(self, game: Game) -> None:
        """
        One turn against the shared deck / discard pile:
        draw, then swap or discard (number cards) or resolve (action cards).
        The end-of-turn menu belongs to the game.
        """
        game.say(f"Your hand is... {self.hand}")
        game.say(f"Discard is: {game.discard.top}")

        card = self._draw(game)
        game.say(f"Card drawn is... {card}")

        if card.kind.is_action:
            self._play_action(card, game)
        else:
            self._place_number(card, game)

    def _draw(self, game: Game) -> Card:
        source = parse_draw_source(game.ask(PROMPT_DRAW_SOURCE))
        if source is DrawSource.DISCARD:
            # never empty here: every turn puts a card back on the pile
            card = game.discard.pop()
        else:
            card = game.deck.draw()
        log.debug(f"{self.name} drew {card} from {source.name.lower()} (deck left={len(game.deck)})")
        return card

    def _place_number(self, card: Card, game: Game) -> None:
        answer = game.ask(PROMPT_DISPOSITION)
        choice = parse_disposition(answer)
        if choice is Disposition.SWAP:
            slot = parse_slot(game.ask(PROMPT_SLOT))
            displaced = self.hand.swap(slot, card)
            game.discard.push(displaced)
            log.debug(f"{self.name} swapped {card} into slot {slot}, discarded {displaced}")
            game.say("Swapped! New hand:")
            game.say(str(self.hand))
        elif choice is Disposition.DISCARD:
            game.discard.push(card)
        else:
            log.error(f"Unknown option: '{answer.strip()}' (discarding {card})")
            game.discard.push(card)

    def _play_action(self, card: Card, game: Game) -> None:
        try:
            resolve_action(card, self, game)
        except ActionNotImplementedError as e:
            log.error(str(e))
        game.discard.push(card)
        log.debug(f"{self.name} hand after action: {describe_hand(self.hand.cards)}")
