# src/cli/main.py

import argparse
import sys
from typing import List, Optional

from src.common.cards import Deck, DeckExhaustedError
from src.common.constants import DEFAULT_PLAYER_NAMES, PLAYER_COUNT
from src.common.protocol import InvalidInputError
from src.common.logging_utils import setup_logging, get_logger
from src.cli.ui import ask, say, welcome_script
from src.engine.game import Game


log = get_logger("cli.main")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player Rat-a-Tat Cat in the terminal")
    parser.add_argument(
        "--names", nargs=PLAYER_COUNT, metavar="NAME",
        default=list(DEFAULT_PLAYER_NAMES), help="Player names, in turn order",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the deck for a reproducible game")
    parser.add_argument("--log-level", default=None, help="DEBUG / INFO / WARNING / ERROR (overrides LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    say(welcome_script(args.names))
    game = Game(names=args.names, deck=Deck(seed=args.seed), ask=ask, say=say)

    try:
        game.play()
    except InvalidInputError as e:
        log.error(f"Error: {e}")
        return EXIT_ERROR
    except DeckExhaustedError as e:
        log.error(f"Game aborted: {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        log.info("Interrupted, quitting.")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
