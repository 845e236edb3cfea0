"""
Testing the entropy source
- A temp file stands in for /dev/urandom so the secret is predictable.
"""

import pytest

from guessing_game import random_client
from guessing_game.errors import EntropyUnavailable, IOUnavailable
from guessing_game.random_client import fetch_secret, read_entropy_byte


def test_reads_one_byte_from_file(entropy_file):
    path = entropy_file(bytes([41, 7, 9]))
    assert read_entropy_byte(path) == 41
    assert fetch_secret(path) == 42


def test_missing_source_is_fatal(tmp_path):
    with pytest.raises(EntropyUnavailable) as info:
        fetch_secret(str(tmp_path / "does-not-exist"))
    assert "does-not-exist" in str(info.value)
    assert isinstance(info.value, IOUnavailable)


def test_empty_source_is_fatal(entropy_file):
    with pytest.raises(EntropyUnavailable):
        fetch_secret(entropy_file(b""))


def test_os_source_uses_urandom(monkeypatch):
    monkeypatch.setattr(random_client.os, "urandom", lambda n: bytes([199]))
    assert fetch_secret("os") == 100


def test_os_source_failure_is_fatal(monkeypatch):
    def broken_urandom(n):
        raise NotImplementedError("no randomness here")

    monkeypatch.setattr(random_client.os, "urandom", broken_urandom)
    with pytest.raises(EntropyUnavailable):
        read_entropy_byte("os")


def test_default_source_gives_secret_in_range():
    secret = fetch_secret()
    assert 1 <= secret <= 100
