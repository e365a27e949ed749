"""
Pydantic models handed to the UI layer.
- The store keeps its own mutable dataclasses; these are read-only snapshots.
- Defines the structure of what a front-end can show (outcomes, game view, scoreboard).
"""

from typing import List, Literal, Optional, Union
from pydantic import BaseModel, Field

# 1. Feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[int] = Field(..., description="The player's guess, as peg ids")
    exact: int = Field(..., description="Pegs with the right color in the right place (black pegs)")
    partial: int = Field(..., description="Pegs with a right color in the wrong place (white pegs)")

# 2. Result of submitting a guess
class GuessOutcome(BaseModel):
    exact: int = Field(..., description="Black pegs for this guess")
    partial: int = Field(..., description="White pegs for this guess")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Game state after this guess")
    attempts_left: int = Field(..., description="How many guesses remain")
    attempts_used: int = Field(..., description="How many guesses were made so far")

# 3. Overall state of one game
class GameStateOut(BaseModel):
    game_id: str = Field(..., description="Unique ID for the game")
    difficulty: Literal["easy", "hard", "impossible"] = Field(..., description="Chosen difficulty level")
    code_length: int = Field(..., description="Number of pegs in the secret")
    attempts_left: int = Field(..., description="How many guesses remain")
    attempts_used: int = Field(..., description="How many guesses were made so far")
    status: Literal["in_progress", "won", "lost"] = Field(..., description="Current state of the game")
    history: List[GuessEntryOut] = Field(..., description="All guesses so far, oldest first")
    secret: Optional[List[int]] = Field(None, description="The secret code (only set once the game is over)")

# 4. Scoreboard
class StatsOut(BaseModel):
    games_played: int = Field(..., description="Finished games (won or lost)")
    games_won: int = Field(..., description="Games won")
    games_lost: int = Field(..., description="Games lost")
    best_score: Optional[int] = Field(None, description="Fewest attempts taken to win a game")
    recent_results: List[Union[int, Literal["lost"]]] = Field(
        ..., description="Last 5 results, most recent first: attempts used, or 'lost'"
    )
