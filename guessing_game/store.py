"""
In-memory session
Holds the state of one game: the secret, where we are in the loop, and the history.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .engine import SECRET_MAX, SECRET_MIN, compare_guess, feedback_message, is_win, parse_guess
from .errors import GameFinished, InvalidInputFormat
from .schemas import GameResult, GuessFeedback
from .types import LoopState, Secret

logger = logging.getLogger(__name__)


@dataclass
class GuessSession:
    secret: Secret
    status: LoopState = "awaiting_input"
    history: List[GuessFeedback] = field(default_factory=list)
    discarded_lines: int = 0

    def __post_init__(self) -> None:
        if self.secret < SECRET_MIN or self.secret > SECRET_MAX:
            raise ValueError(f"Secret must be between {SECRET_MIN} and {SECRET_MAX}.")

    def __setattr__(self, name, value):
        # the secret is fixed once the session exists
        if name == "secret" and "secret" in self.__dict__:
            raise AttributeError("The secret cannot change during a game.")
        super().__setattr__(name, value)

    def submit_line(self, line: str) -> Optional[GuessFeedback]:
        """
        Returns the feedback for a valid guess, or None when the line was dropped.
        """
        if self.status == "won":
            raise GameFinished("Game already won. No more guesses allowed.")

        try:
            guess = parse_guess(line)
        except InvalidInputFormat:
            # stay in awaiting_input, nothing is shown to the player
            self.discarded_lines += 1
            logger.debug("Discarded line %r", line)
            return None

        self.status = "evaluating"
        outcome = compare_guess(self.secret, guess)
        entry = GuessFeedback(guess=guess, outcome=outcome, message=feedback_message(outcome))
        self.history.append(entry)
        logger.debug("Guess %d -> %s", guess, outcome)

        if is_win(self.secret, guess):
            self.status = "won"
        else:
            self.status = "awaiting_input"
        return entry

    def result(self) -> GameResult:
        if self.status != "won":
            raise ValueError("Game is still in progress.")
        return GameResult(
            secret=self.secret,
            guesses=len(self.history),
            discarded_lines=self.discarded_lines,
            history=self.history,
        )
