"""
Typed failures raised by the game core.
All of them are caller-input errors, so they derive from ValueError.
"""


class GameError(ValueError):
    """Base class for every error the game core raises."""


class InvalidGuessLength(GameError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"Guess must have exactly {expected} pegs for this game (got {actual}).")
        self.expected = expected
        self.actual = actual


class InvalidPegValue(GameError):
    def __init__(self, position: int, value):
        super().__init__(f"Peg at position {position} is {value!r}; pegs must be between 0 and 9 inclusive.")
        self.position = position
        self.value = value


class GameAlreadyOver(GameError):
    def __init__(self, game_id: str, status: str):
        super().__init__(f"Game {status}. No more guesses allowed.")
        self.game_id = game_id
        self.status = status


class UnknownDifficulty(GameError):
    def __init__(self, difficulty: str):
        super().__init__(f"Unknown difficulty {difficulty!r}; choose easy, hard or impossible.")
        self.difficulty = difficulty
