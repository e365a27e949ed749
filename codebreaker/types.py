"""
Labels for clarity.
"""

from typing import List, Literal, Union

Peg = int  # 0 -> 9
Code = List[Peg]  # 4, 6 or 8 pegs depending on difficulty
GameStatus = Literal["in_progress", "won", "lost"]
Difficulty = Literal["easy", "hard", "impossible"]
RecentResult = Union[int, Literal["lost"]]  # attempts used, or the loss marker
