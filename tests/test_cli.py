import builtins

from src.cli.main import main, build_parser, EXIT_OK, EXIT_ERROR, EXIT_INTERRUPTED
from src.engine.game import PROMPT_KNOCK_OR_END
from src.engine.player import PROMPT_DRAW_SOURCE, PROMPT_DISPOSITION


def answer_by_prompt():
    # action cards skip the disposition prompt, so answer by prompt text, not by position
    def fake_input(prompt=""):
        if prompt == PROMPT_DRAW_SOURCE:
            return "e"
        if prompt == PROMPT_DISPOSITION:
            return "D"
        if prompt == PROMPT_KNOCK_OR_END:
            return "K"
        return "E"
    return fake_input


def test_defaults():
    args = build_parser().parse_args([])
    assert args.names == ["Garrett", "Kaleb"]
    assert args.seed is None


def test_full_game_exits_zero(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", answer_by_prompt())
    assert main(["--seed", "1", "--names", "Ann", "Bob"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "Ann's turn" in out
    assert "Bob's turn" in out
    assert "Game finished!" in out
    assert "Winner: " in out


def test_invalid_input_exits_one(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", lambda prompt="": "nope")
    assert main(["--seed", "1"]) == EXIT_ERROR
    assert "Game finished!" not in capsys.readouterr().out


def test_eof_exits_interrupted(monkeypatch):
    def closed(prompt=""):
        raise EOFError
    monkeypatch.setattr(builtins, "input", closed)
    assert main([]) == EXIT_INTERRUPTED
