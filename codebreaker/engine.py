"""
Pure game logic (no UI, no storage).
We compute two feedback numbers for each guess:
- exact: pegs with the right color in the right place (black pegs)
- partial: pegs with a color the secret has, but in another place (white pegs)

Duplicates are allowed in the secret and in the guess, so a secret peg
can only be matched once.
"""

from typing import NamedTuple

from .config import PEG_COUNT
from .types import Code


class EvaluationResult(NamedTuple):
    exact: int
    partial: int


def _check_codes(secret: Code, guess: Code) -> int:
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    for peg in list(secret) + list(guess):
        if peg < 0 or peg >= PEG_COUNT:
            raise ValueError(f"Peg {peg!r} is outside 0..{PEG_COUNT - 1}.")
    return n


def evaluate(secret: Code, guess: Code) -> EvaluationResult:
    """
    Two-pass scoring.

    Example:
      secret = [1, 2, 3, 4]
      guess  = [1, 2, 4, 3]
      exact   = 2  (the 1 and the 2)
      partial = 2  (the 3 and the 4 are in the secret, swapped)
    """
    n = _check_codes(secret, guess)

    # Work on copies; None marks a consumed position
    secret_left = list(secret)
    guess_left = list(guess)

    # 1. Exact matches consume both sides
    exact = 0
    i = 0
    while i < n:
        if guess_left[i] == secret_left[i]:
            exact += 1
            secret_left[i] = None
            guess_left[i] = None
        i += 1

    # 2. Each leftover guess peg takes the first unconsumed secret peg of the same color
    partial = 0
    i = 0
    while i < n:
        peg = guess_left[i]
        if peg is not None:
            j = 0
            while j < n:
                if secret_left[j] == peg:
                    partial += 1
                    secret_left[j] = None
                    break
                j += 1
        i += 1

    return EvaluationResult(exact, partial)


def evaluate_by_counts(secret: Code, guess: Code) -> EvaluationResult:
    """
    Closed-form scoring, used to cross-check evaluate().
    For each color: partial += min(count in secret, count in guess) - exact hits of that color.
    """
    n = _check_codes(secret, guess)

    secret_counts = [0] * PEG_COUNT
    guess_counts = [0] * PEG_COUNT
    exact_counts = [0] * PEG_COUNT

    for idx in range(n):
        secret_counts[secret[idx]] += 1
        guess_counts[guess[idx]] += 1
        if secret[idx] == guess[idx]:
            exact_counts[secret[idx]] += 1

    exact = sum(exact_counts)
    partial = 0
    for peg in range(PEG_COUNT):
        partial += min(secret_counts[peg], guess_counts[peg]) - exact_counts[peg]

    return EvaluationResult(exact, partial)


def is_win(result: EvaluationResult, code_length: int) -> bool:
    # Every peg black
    return result.exact == code_length
