import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep FLORIST_* settings and any stray .env file out of each test."""
    monkeypatch.delenv("FLORIST_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FLORIST_REQUIREMENT_ORDER", raising=False)
    monkeypatch.chdir(tmp_path)
