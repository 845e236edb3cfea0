"""
Get the secret from the platform entropy source.
Reads exactly one byte, once per run. If the source cannot be read we stop
with EntropyUnavailable; there is no fallback generator.
"""

import logging
import os

from .engine import secret_from_byte
from .errors import EntropyUnavailable
from .types import Secret

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "/dev/urandom"
# special value: ask the OS directly instead of opening a device file
OS_SOURCE = "os"


def read_entropy_byte(source: str = DEFAULT_SOURCE) -> int:
    try:
        if source == OS_SOURCE:
            data = os.urandom(1)
        else:
            with open(source, "rb") as handle:
                data = handle.read(1)
    except (OSError, NotImplementedError) as exc:
        raise EntropyUnavailable(f"Cannot read entropy source {source!r}: {exc}") from exc

    # an empty file would give us nothing to build a secret from
    if len(data) != 1:
        raise EntropyUnavailable(f"Entropy source {source!r} returned no data.")

    return data[0]


def fetch_secret(source: str = DEFAULT_SOURCE) -> Secret:
    byte = read_entropy_byte(source)
    logger.debug("Secret drawn from %s", source)
    return secret_from_byte(byte)
