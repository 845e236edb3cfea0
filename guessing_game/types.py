"""
Labels for clarity.
"""

from typing import Literal

Secret = int  # 1 -> 100
Guess = int  # 0 -> MAX_GUESS
Outcome = Literal["too_small", "too_big", "win"]
LoopState = Literal["awaiting_input", "evaluating", "won"]
