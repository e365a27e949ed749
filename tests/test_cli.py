"""
Testing the terminal front-end
- Trick: replace builtins.input with a scripted list of answers.
- capsys collects what the game printed.
"""

import builtins

import pytest

from codebreaker.cli import format_code, gameloop, main, parse_guess

def feed(monkeypatch, answers):
    answers = list(answers)

    def fake_input(prompt=""):
        if not answers:
            raise EOFError
        return answers.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)

def test_parse_guess_formats():
    assert parse_guess("1234") == [1, 2, 3, 4]
    assert parse_guess("1 2 3 4") == [1, 2, 3, 4]
    assert parse_guess("1,2,3,4") == [1, 2, 3, 4]
    with pytest.raises(ValueError):
        parse_guess("12a4")
    with pytest.raises(ValueError):
        parse_guess("")

def test_format_code_modes():
    assert format_code([1, 4, 9], accessible=False) == "Red, Green, Brown"
    assert format_code([1, 4, 9], accessible=True) == "1 4 9"

def test_win_flow(monkeypatch, capsys, store_with_secret):
    store = store_with_secret([1,2,3,4])
    feed(monkeypatch, ["123", "9a99", "1243", "history", "1234", "1234", "stats", "exit"])

    gameloop(store, difficulty="easy")

    out = capsys.readouterr().out
    assert "exactly 4 pegs" in out
    assert "Invalid input" in out
    assert "2 correct position, 2 correct color." in out
    assert "#1: Red, Orange, Green, Yellow" in out
    assert "You cracked the Easy code in 2 attempts!" in out
    assert "No more guesses allowed" in out
    assert "Best score: 2" in out
    assert store.get_stats().games_won == 1

def test_loss_reveals_secret(monkeypatch, capsys, store_with_secret):
    store = store_with_secret([5,5,5,5])
    feed(monkeypatch, ["a11y"] + ["0000"] * 10 + ["exit"])

    gameloop(store, difficulty="easy")

    out = capsys.readouterr().out
    assert "Game Over! The code was: 5 5 5 5" in out
    assert store.get_stats().recent_results == ["lost"]

def test_difficulty_switch_starts_new_game(monkeypatch, capsys, store_with_secret):
    store = store_with_secret([0,0,0,0], [1,1,1,1,1,1])
    feed(monkeypatch, ["hard", "111111"])

    gameloop(store, difficulty="easy")

    out = capsys.readouterr().out
    assert "New hard game!" in out
    assert "You cracked the Hard code in 1 attempt!" in out

def test_main_runs_with_seed(monkeypatch, capsys):
    feed(monkeypatch, ["exit"])

    assert main(["--seed", "3", "--difficulty", "impossible"]) == 0
    assert "8-peg code in 15 attempts" in capsys.readouterr().out

def test_main_starts_on_env_difficulty(monkeypatch, capsys):
    monkeypatch.setenv("CODEBREAKER_DIFFICULTY", "Hard")
    feed(monkeypatch, ["exit"])

    assert main(["--seed", "3"]) == 0
    assert "New hard game!" in capsys.readouterr().out

def test_main_rejects_bad_env_difficulty(monkeypatch, capsys):
    monkeypatch.setenv("CODEBREAKER_DIFFICULTY", "medium")
    feed(monkeypatch, ["exit"])

    with pytest.raises(SystemExit) as exit_info:
        main(["--seed", "3"])

    assert exit_info.value.code == 2
    assert "CODEBREAKER_DIFFICULTY must be one of" in capsys.readouterr().err
