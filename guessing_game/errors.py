"""
Error kinds for the game.

Only one of them is recoverable:
- InvalidInputFormat: the line is not a non-negative integer; the loop drops it and asks again.

The rest end the program:
- EntropyUnavailable: could not read a random byte to build the secret.
- InputUnavailable: standard input is closed or cannot be read.
"""


class InvalidInputFormat(ValueError):
    def __init__(self, line: str) -> None:
        super().__init__(f"Not a valid guess: {line!r}")
        self.line = line


class IOUnavailable(RuntimeError):
    """Fatal I/O failure; the program stops with a descriptive message."""


class EntropyUnavailable(IOUnavailable):
    pass


class InputUnavailable(IOUnavailable):
    pass


class GameFinished(RuntimeError):
    """Raised when a guess is sent to a game that was already won."""
