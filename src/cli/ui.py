# src/cli/ui.py

from typing import Sequence


def welcome_script(names: Sequence[str]) -> str:
    return f"Welcome to Rat-a-Tat Cat! {' vs '.join(names)} - lowest hand wins."


def ask(prompt: str) -> str:
    """Read one answer from the terminal. EOF is treated like Ctrl+C."""
    try:
        return input(prompt)
    except EOFError:
        raise KeyboardInterrupt from None


def say(line: str) -> None:
    print(line, flush=True)
