import pytest

from digest_columns.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Each test sees settings built from its own environment."""
    for var in ("DIGEST_ALGORITHM", "DIGEST_ENCODING", "DIGEST_AUTO", "MOCK_MODE"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
