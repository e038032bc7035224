"""
Test bootstrap:
- Make src/ and tests/ importable without an editable install
- Keep VROPS_* variables from the developer's shell out of the tests
"""
import sys
import pathlib
import pytest

TESTS = pathlib.Path(__file__).resolve().parent
SRC = TESTS.parent / "src"

for path in (SRC, TESTS):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from helpers import MockTransport  # noqa: E402

from vrops_client.config import ClientConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("VROPS_SERVER", "VROPS_TOKEN", "VROPS_VERIFY_SSL", "VROPS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_transport():
    """Recording transport returning an empty resource list."""
    return MockTransport()


@pytest.fixture
def config():
    """Configuration pointing at a test server."""
    return ClientConfig(server="vrops.example.com", token="secret-token")
