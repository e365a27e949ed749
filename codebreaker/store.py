"""
In-memory store
Holds game sessions and the scoreboard in memory.

Public methods:
- start_game(difficulty) -> Session
- get(game_id) -> Session | None
- submit_guess(session, guess) -> GuessOutcome
- reveal_secret(session) -> Code
- view(session) -> GameStateOut
- get_stats() -> StatsOut
- reset_stats() -> None
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence
from uuid import uuid4
from time import time

from .config import LOSS_MARKER, PEG_COUNT, RECENT_RESULTS_LIMIT, get_preset
from .engine import EvaluationResult, evaluate, is_win
from .errors import GameAlreadyOver, InvalidGuessLength, InvalidPegValue
from .random_source import RandomSource, default_source, make_code
from .schemas import GameStateOut, GuessEntryOut, GuessOutcome, StatsOut
from .types import Code, Difficulty, GameStatus, RecentResult

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class GuessRecord:
    guess: tuple
    result: EvaluationResult

@dataclass
class Session:
    id: str
    difficulty: Difficulty
    secret: Code
    code_length: int
    max_attempts: int
    attempts_left: int
    attempts_used: int = 0
    status: GameStatus = "in_progress"
    history: List[GuessRecord] = field(default_factory=list)
    created_at: float = field(default_factory=time)
    updated_at: float = field(default_factory=time)

# Scoreboard structure, shared by every game of one store
@dataclass
class Stats:
    games_played: int = 0
    games_won: int = 0
    games_lost: int = 0
    best_score: Optional[int] = None
    recent_results: List[RecentResult] = field(default_factory=list)


class GameStore:
    def __init__(self, source: Optional[RandomSource] = None, seed: Optional[int] = None) -> None:
        self._games: Dict[str, Session] = {}
        self._source = source if source is not None else default_source(seed)
        self._stats = Stats()

    def start_game(self, difficulty: Difficulty = "easy") -> Session:
        preset = get_preset(difficulty)
        secret = make_code(preset.code_length, self._source)

        session = Session(
            id=str(uuid4()),
            difficulty=difficulty,
            secret=secret,
            code_length=preset.code_length,
            max_attempts=preset.max_attempts,
            attempts_left=preset.max_attempts,
        )
        self._games[session.id] = session

        logger.info("New game %s: difficulty=%s, code length=%d, attempts=%d",
                    session.id, difficulty, preset.code_length, preset.max_attempts)
        logger.debug("Secret for game %s: %s", session.id, secret)
        return session

    def get(self, game_id: str) -> Optional[Session]:
        return self._games.get(game_id)

    def submit_guess(self, session: Session, guess: Sequence[int]) -> GuessOutcome:
        # Nothing below mutates the session until every check has passed
        if session.status != "in_progress":
            raise GameAlreadyOver(session.id, session.status)

        if len(guess) != session.code_length:
            raise InvalidGuessLength(session.code_length, len(guess))

        for position, peg in enumerate(guess):
            if isinstance(peg, bool) or not isinstance(peg, int) or peg < 0 or peg >= PEG_COUNT:
                raise InvalidPegValue(position, peg)

        result = evaluate(session.secret, list(guess))
        session.history.append(GuessRecord(guess=tuple(guess), result=result))

        session.attempts_left -= 1
        session.attempts_used += 1

        # Win check comes first: a correct last guess is a win, not a loss
        if is_win(result, session.code_length):
            session.status = "won"
        elif session.attempts_left == 0:
            session.status = "lost"

        session.updated_at = time()
        logger.debug("Game %s guess #%d %s -> exact=%d partial=%d",
                     session.id, session.attempts_used, list(guess), result.exact, result.partial)

        # Scoreboard changes exactly once, on the transition out of in_progress
        if session.status != "in_progress":
            self._update_stats_on_end(session)

        return GuessOutcome(
            exact=result.exact,
            partial=result.partial,
            status=session.status,
            attempts_left=session.attempts_left,
            attempts_used=session.attempts_used,
        )

    def _update_stats_on_end(self, session: Session) -> None:
        stats = self._stats
        stats.games_played += 1

        if session.status == "won":
            stats.games_won += 1
            if stats.best_score is None or session.attempts_used < stats.best_score:
                stats.best_score = session.attempts_used
            stats.recent_results.insert(0, session.attempts_used)
            logger.info("Game %s won in %d attempt(s)", session.id, session.attempts_used)
        else:
            stats.games_lost += 1
            stats.recent_results.insert(0, LOSS_MARKER)
            logger.info("Game %s lost", session.id)

        del stats.recent_results[RECENT_RESULTS_LIMIT:]

    def reveal_secret(self, session: Session) -> Code:
        """Always allowed; deciding when to show it is up to the UI."""
        return list(session.secret)

    def view(self, session: Session) -> GameStateOut:
        finished = session.status != "in_progress"
        return GameStateOut(
            game_id=session.id,
            difficulty=session.difficulty,
            code_length=session.code_length,
            attempts_left=session.attempts_left,
            attempts_used=session.attempts_used,
            status=session.status,
            history=[
                GuessEntryOut(guess=list(r.guess), exact=r.result.exact, partial=r.result.partial)
                for r in session.history
            ],
            secret=self.reveal_secret(session) if finished else None,
        )

    def get_stats(self) -> StatsOut:
        return StatsOut(
            games_played=self._stats.games_played,
            games_won=self._stats.games_won,
            games_lost=self._stats.games_lost,
            best_score=self._stats.best_score,
            recent_results=list(self._stats.recent_results),
        )

    def reset_stats(self) -> None:
        self._stats = Stats()
