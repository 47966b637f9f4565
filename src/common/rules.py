# src/common/rules.py

from typing import Optional, Sequence, Tuple, TypeVar

T = TypeVar("T")


def is_game_over(knocked_by: Optional[str], current_player_id: str) -> bool:
    # the final round ends when the turn comes back around to whoever knocked
    return knocked_by is not None and knocked_by == current_player_id


def pick_winner(entries: Sequence[Tuple[T, int]]) -> T:
    """
    entries: (who, hand_sum) in turn order.
    Lowest sum wins; on an exact tie the earliest entry wins.
    """
    if not entries:
        raise ValueError("No players to score")
    winner, lowest = entries[0]
    for who, total in entries[1:]:
        if total < lowest:
            winner, lowest = who, total
    return winner
