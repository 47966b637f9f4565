# src/common/constants.py

# Table
PLAYER_COUNT = 2
HAND_SIZE = 4
HIDDEN_SLOTS = (1, 2)  # masked while the game is running
DEFAULT_PLAYER_NAMES = ("Garrett", "Kaleb")

# Deck composition (49 cards)
NUMBER_RANKS = range(1, 9)      # 1..8
COPIES_PER_NUMBER = 4
NINE_RANK = 9
NINE_COPIES = 9
ACTION_RANK = 10                # placeholder value for PEEK / SWAP
COPIES_PER_ACTION = 4
DECK_SIZE = len(NUMBER_RANKS) * COPIES_PER_NUMBER + NINE_COPIES + 2 * COPIES_PER_ACTION

# Prompt tokens (case-sensitive)
DRAW_FROM_DISCARD = "i"
DRAW_FROM_DECK = "e"
CHOICE_SWAP = "S"
CHOICE_DISCARD = "D"
CHOICE_KNOCK = "K"
CHOICE_END_TURN = "E"

BANNER = "==========="
HIDDEN_LABEL = "[hidden]"
