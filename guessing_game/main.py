'''
Guess the number (console)

Flow:
1) Draw the secret once from the entropy source (1..100)
2) Ask for a guess, read one line from stdin
3) Bad numbers are dropped silently and we ask again
4) Too small / too big -> ask again, equal -> "You win!" and stop

Usage:
  guess-the-number
  guess-the-number --secret 42 --summary
  GUESS_LOG_LEVEL=DEBUG guess-the-number
'''

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from pydantic import ValidationError

from . import __version__
from .config import Settings, load_settings
from .engine import SECRET_MAX, SECRET_MIN
from .errors import InputUnavailable, IOUnavailable
from .random_client import fetch_secret
from .schemas import GameResult
from .store import GuessSession
from .types import Secret

logger = logging.getLogger(__name__)


def _read_line(stdin: TextIO) -> str:
    try:
        line = stdin.readline()
    except (OSError, ValueError) as exc:
        # ValueError is what a closed file object gives us
        raise InputUnavailable(f"Failed to read line: {exc}") from exc
    if line == "":
        raise InputUnavailable("Failed to read line: standard input is closed.")
    return line


def play(secret: Secret, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> GameResult:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    session = GuessSession(secret)
    print("Guess the number!", file=stdout)

    while session.status != "won":
        print("Please input your guess.", file=stdout)
        line = _read_line(stdin)

        entry = session.submit_line(line)
        if entry is None:
            continue

        print(f"You guessed: {entry.guess}", file=stdout)
        print(entry.message, file=stdout)

    return session.result()


def _secret_arg(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if value < SECRET_MIN or value > SECRET_MAX:
        raise argparse.ArgumentTypeError(f"must be between {SECRET_MIN} and {SECRET_MAX}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="guess-the-number", description="Guess the number!")
    parser.add_argument("--secret", type=_secret_arg, default=None,
                        help="Force the number to guess (defaults to random)")
    parser.add_argument("--entropy-source", default=None,
                        help="File to read the random byte from, or 'os' (env: GUESS_ENTROPY_SOURCE)")
    parser.add_argument("--log-level", default=None,
                        help="Logging level, logs go to stderr (env: GUESS_LOG_LEVEL)")
    parser.add_argument("--summary", action="store_true",
                        help="Print how many guesses it took after winning")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    # flags win over the environment; re-validate the merged values
    overrides = {}
    if args.entropy_source is not None:
        overrides["entropy_source"] = args.entropy_source
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    try:
        settings = load_settings()
        settings = Settings(**{**settings.model_dump(), **overrides})
    except ValidationError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.secret is not None:
            secret = args.secret
            logger.debug("Secret fixed from the command line")
        else:
            secret = fetch_secret(settings.entropy_source)
        result = play(secret, stdin=stdin, stdout=stdout)
    except IOUnavailable as exc:
        logger.error("%s", exc)
        # shown whatever the log level is
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.summary:
        print(f"Guesses: {result.guesses}", file=stdout)
    logger.info("Won in %d guesses (%d lines discarded)", result.guesses, result.discarded_lines)
    return 0


if __name__ == "__main__":
    sys.exit(main())
