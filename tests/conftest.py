"""
- Keep GUESS_* variables from the developer's shell out of the tests
- Provide a fake entropy source file with a known byte
"""
import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("GUESS_ENTROPY_SOURCE", raising=False)
    monkeypatch.delenv("GUESS_LOG_LEVEL", raising=False)
    # load_dotenv must not pick up a developer's .env during tests
    monkeypatch.setattr("guessing_game.config.load_dotenv", lambda: False)
    yield


@pytest.fixture
def entropy_file(tmp_path):
    """Returns a helper that writes the given bytes and gives back the path."""
    def _write(data: bytes) -> str:
        path = tmp_path / "entropy.bin"
        path.write_bytes(data)
        return str(path)
    return _write
