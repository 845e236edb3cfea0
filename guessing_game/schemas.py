"""
Pydantic models for what the game reports back.
- GuessFeedback: one evaluated guess
- GameResult: summary of a finished game
"""

from typing import List, Literal

from pydantic import BaseModel, Field

from .engine import MAX_GUESS, SECRET_MAX, SECRET_MIN


# 1. Feedback for a single guess
class GuessFeedback(BaseModel):
    guess: int = Field(..., ge=0, le=MAX_GUESS, description="The player's guess")
    outcome: Literal["too_small", "too_big", "win"] = Field(..., description="Result of the compare")
    message: str = Field(..., description="Feedback message shown to the player")


# 2. Summary of a game that ended with a win
class GameResult(BaseModel):
    secret: int = Field(..., ge=SECRET_MIN, le=SECRET_MAX, description="The number that was guessed")
    guesses: int = Field(..., ge=1, description="How many valid guesses it took")
    discarded_lines: int = Field(0, ge=0, description="Lines that were not a valid number")
    history: List[GuessFeedback] = Field(..., description="All valid guesses in order")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "secret": 42,
                    "guesses": 2,
                    "discarded_lines": 1,
                    "history": [
                        {"guess": 50, "outcome": "too_big", "message": "Too big!"},
                        {"guess": 42, "outcome": "win", "message": "You win!"},
                    ],
                }
            ]
        }
    }
