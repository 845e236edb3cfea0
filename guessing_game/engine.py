"""
Pure game logic (no terminal, no randomness).
- secret_from_byte: turn one random byte into the secret (1..100)
- parse_guess: turn one line of input into a guess, or raise InvalidInputFormat
- compare_guess: three-way compare of a guess against the secret

A guess is an unsigned 32-bit number. Bigger values are treated like any other bad input.
"""

import re

from .errors import InvalidInputFormat
from .types import Guess, Outcome, Secret

SECRET_MIN = 1
SECRET_MAX = 100
MAX_GUESS = 2**32 - 1
_MAX_GUESS_DIGITS = len(str(MAX_GUESS))

# Unicode White_Space characters; str.strip() would also drop \x1c-\x1f
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# optional "+" then ASCII digits only (str.isdigit would also let "²" or "٣" through)
_GUESS_PATTERN = re.compile(r"\+?[0-9]+")

MESSAGES = {
    "too_small": "Too small!",
    "too_big": "Too big!",
    "win": "You win!",
}


def secret_from_byte(byte: int) -> Secret:
    """
    Example:
      byte = 0   -> 1
      byte = 99  -> 100
      byte = 255 -> 56
    """
    if byte < 0 or byte > 255:
        raise ValueError(f"Expected a single byte (0..255), got {byte}.")
    return (byte % SECRET_MAX) + SECRET_MIN


def parse_guess(line: str) -> Guess:
    text = line.strip(WHITESPACE)
    if not _GUESS_PATTERN.fullmatch(text):
        raise InvalidInputFormat(line)

    # leading zeros are allowed; more significant digits than MAX_GUESS is too big
    significant = text.lstrip("+").lstrip("0")
    if len(significant) > _MAX_GUESS_DIGITS:
        raise InvalidInputFormat(line)

    value = int(text)
    if value > MAX_GUESS:
        raise InvalidInputFormat(line)
    return value


def compare_guess(secret: Secret, guess: Guess) -> Outcome:
    if guess < secret:
        return "too_small"
    if guess > secret:
        return "too_big"
    return "win"


def is_win(secret: Secret, guess: Guess) -> bool:
    return compare_guess(secret, guess) == "win"


def feedback_message(outcome: Outcome) -> str:
    return MESSAGES[outcome]
