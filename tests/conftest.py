import pytest

from config import ApplicationConfig


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Lowest bcrypt cost keeps hashing-heavy tests fast"""
    monkeypatch.setattr(ApplicationConfig, "BCRYPT_ROUNDS", 4)
