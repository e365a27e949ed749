# Command-line interface (text-based play)

import argparse
import logging
from typing import List, Optional

from .config import DIFFICULTIES, configure_logging, get_default_difficulty, get_seed
from .errors import GameError
from .schemas import StatsOut
from .store import GameStore, Session

logger = logging.getLogger(__name__)

COLOR_NAMES = {
    0: "Gray", 1: "Red", 2: "Orange", 3: "Yellow", 4: "Green",
    5: "Teal", 6: "Blue", 7: "Purple", 8: "Pink", 9: "Brown",
}

HELP = (
    "Type a guess as digits (e.g. 1234 or 1 2 3 4).\n"
    "Commands: new, easy, hard, impossible, a11y, history, stats, help, exit"
)


def parse_guess(text: str) -> List[int]:
    """
    "1234" -> [1, 2, 3, 4]; "1 2 3 4" and "1,2,3,4" work too.
    Raises ValueError for anything that is not a number.
    Range and length are left to the store.
    """
    cleaned = text.replace(",", " ")
    parts = cleaned.split() if " " in cleaned.strip() else list(cleaned.strip())
    if not parts:
        raise ValueError("Empty guess.")
    pegs = []
    for part in parts:
        if not part.isdigit():
            raise ValueError(f"{part!r} is not a peg number.")
        pegs.append(int(part))
    return pegs


def format_code(code, accessible: bool) -> str:
    # Accessibility mode shows peg numbers instead of color names
    if accessible:
        return " ".join(str(peg) for peg in code)
    return ", ".join(COLOR_NAMES[peg] for peg in code)


def format_feedback(exact: int, partial: int) -> str:
    return f"{exact} correct position, {partial} correct color."


def format_stats(stats: StatsOut) -> str:
    best = stats.best_score if stats.best_score is not None else "-"
    recent = " ".join(str(r) for r in stats.recent_results) or "-"
    return (
        f"Games played: {stats.games_played} | Best score: {best} | Recent: {recent}"
    )


def _new_game(store: GameStore, difficulty: str) -> Session:
    session = store.start_game(difficulty)
    print(f"\nNew {difficulty} game! Crack the {session.code_length}-peg code "
          f"in {session.max_attempts} attempts.")
    return session


def _show_history(session: Session, accessible: bool) -> None:
    if not session.history:
        print("No guesses yet.")
        return
    # Newest first
    for number in range(len(session.history), 0, -1):
        record = session.history[number - 1]
        print(f"  #{number}: {format_code(record.guess, accessible)} -> "
              f"{format_feedback(record.result.exact, record.result.partial)}")


def gameloop(store: GameStore, difficulty: str = "easy", accessible: bool = False) -> None:
    print("=== Codebreaker ===")
    print(HELP)
    print("Colors: " + ", ".join(f"{peg}={name}" for peg, name in COLOR_NAMES.items()))

    session = _new_game(store, difficulty)

    while True:
        if session.status == "in_progress":
            prompt = f"[{session.attempts_left} left] Enter your guess: "
        else:
            prompt = "Type 'new' to play again or 'exit' to quit: "
        try:
            user_input = input(prompt).strip().lower()
        except EOFError:
            print()
            break

        # handle special commands
        if user_input in ("exit", "quit"):
            print("Exiting game.")
            break
        elif user_input == "help":
            print(HELP)
            continue
        elif user_input == "new":
            session = _new_game(store, difficulty)
            continue
        elif user_input in DIFFICULTIES:
            difficulty = user_input
            session = _new_game(store, difficulty)
            continue
        elif user_input == "a11y":
            accessible = not accessible
            print(f"Accessibility mode {'on' if accessible else 'off'}.")
            continue
        elif user_input == "history":
            _show_history(session, accessible)
            continue
        elif user_input == "stats":
            print(format_stats(store.get_stats()))
            continue

        # Make the guess
        try:
            guess = parse_guess(user_input)
            outcome = store.submit_guess(session, guess)
        except GameError as e:
            print(f"Invalid guess: {e}")
            continue
        except ValueError as e:
            print(f"Invalid input: {e}")
            continue

        feedback = format_feedback(outcome.exact, outcome.partial)
        if outcome.status == "won":
            plural = "s" if outcome.attempts_used != 1 else ""
            print(f"Congratulations! You cracked the {difficulty.capitalize()} code "
                  f"in {outcome.attempts_used} attempt{plural}!")
            print(format_stats(store.get_stats()))
        elif outcome.status == "lost":
            print(f"{feedback}\nGame Over! The code was: "
                  f"{format_code(store.reveal_secret(session), accessible)}")
            print(format_stats(store.get_stats()))
        else:
            print(f"Your guess: {format_code(guess, accessible)}. {feedback}")

    print("\n=== Game Over ===")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="codebreaker", description="Crack the hidden color code.")
    parser.add_argument("--difficulty", choices=sorted(DIFFICULTIES), default=None,
                        help="starting difficulty (default from CODEBREAKER_DIFFICULTY, else easy)")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible secret")
    parser.add_argument("--accessible", action="store_true", help="show peg numbers instead of color names")
    parser.add_argument("--log-level", default=None, help="logging level (default from CODEBREAKER_LOG_LEVEL)")
    args = parser.parse_args(argv)

    # Bad env settings exit with a usage error
    try:
        configure_logging(args.log_level)
        seed = args.seed if args.seed is not None else get_seed()
        difficulty = args.difficulty or get_default_difficulty()
    except RuntimeError as e:
        parser.error(str(e))
    logger.debug("Starting terminal game (difficulty=%s, seed=%s)", difficulty, seed)

    gameloop(GameStore(seed=seed), difficulty=difficulty, accessible=args.accessible)
    return 0
