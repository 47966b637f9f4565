# src/engine/game.py

from typing import Callable, List, Optional, Sequence

from src.common.cards import Deck, DiscardPile
from src.common.constants import PLAYER_COUNT, DEFAULT_PLAYER_NAMES, BANNER
from src.common.protocol import TurnEnd, parse_turn_end
from src.common.rules import is_game_over, pick_winner
from src.common.logging_utils import get_logger
from src.engine.player import Player

log = get_logger("engine.game")

PROMPT_END_TURN = "Choice? (E)nd turn "
PROMPT_KNOCK_OR_END = "Choice? (K)nock, (E)nd turn "

Ask = Callable[[str], str]
Say = Callable[[str], None]


class Game:
    """
    One play-through for exactly two players.

    The deck deals at random: one card seeds the discard pile, then each
    player gets a 4-card hand.
    `ask` / `say` are the terminal hooks (input / print by default).
    """

    def __init__(
        self,
        names: Sequence[str] = DEFAULT_PLAYER_NAMES,
        deck: Optional[Deck] = None,
        ask: Ask = input,
        say: Say = print,
    ) -> None:
        if len(names) != PLAYER_COUNT:
            raise ValueError(f"Exactly {PLAYER_COUNT} players required, got {len(names)}")
        self.ask = ask
        self.say = say

        self.deck = deck if deck is not None else Deck()
        self.discard = DiscardPile([self.deck.draw()])
        self.players: List[Player] = [Player(name, self.deck.draw_hand()) for name in names]

        self.current_idx = 0
        self.end_game = False
        self.end_game_player_id: Optional[str] = None
        self.finished = False
        self.winner: Optional[Player] = None

    def current_player(self) -> Player:
        return self.players[self.current_idx]

    def cycle_next_player(self) -> None:
        self.current_idx = (self.current_idx + 1) % len(self.players)

    def signal_end(self, player_id: str) -> None:
        self.end_game = True
        self.end_game_player_id = player_id
        log.info(f"Knock by player {player_id[:8]}, final round started")

    def end_turn_menu(self) -> None:
        if self.end_game:
            choice = parse_turn_end(self.ask(PROMPT_END_TURN), knock_allowed=False)
        else:
            choice = parse_turn_end(self.ask(PROMPT_KNOCK_OR_END), knock_allowed=True)

        if choice is TurnEnd.KNOCK:
            self.signal_end(self.current_player().id)

    def play_turn(self) -> None:
        player = self.current_player()
        self.say(BANNER)
        self.say(f"{player.name}'s turn")
        player.take_turn(self)
        self.end_turn_menu()

    def play(self) -> Player:
        """
        Run turns until the knocker comes back around, then score.
        InvalidInputError / DeckExhaustedError propagate to the caller.
        """
        if self.finished:
            raise RuntimeError("Game already played")

        while not is_game_over(self.end_game_player_id, self.current_player().id):
            self.play_turn()
            self.cycle_next_player()

        return self.game_over()

    def game_over(self) -> Player:
        for player in self.players:
            self.say(f"{player.name}'s hand: {player.hand.render(reveal=True)} (sum={player.hand.sum()})")

        winner = pick_winner([(p, p.hand.sum()) for p in self.players])
        self.finished = True
        self.winner = winner

        self.say("Game finished!")
        self.say(f"Winner: {winner.name}")
        log.info(f"Game over: winner={winner.name} sums={[p.hand.sum() for p in self.players]}")
        return winner
