import pytest
from pydantic import ValidationError

from dost.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SOLVE_DELAY_SECONDS", raising=False)
    settings = Settings(_env_file=None)

    assert settings.SOLVE_DELAY_SECONDS == 1.5
    assert settings.SOLUTION_PROVIDER == "template"
    assert settings.PORT == 1234


def test_cors_origins_list():
    settings = Settings(_env_file=None, CORS_ORIGINS="http://a.example, http://b.example,")

    assert settings.cors_origins_list == ["http://a.example", "http://b.example"]


def test_env_override(monkeypatch):
    monkeypatch.setenv("SOLVE_DELAY_SECONDS", "0.25")

    assert Settings(_env_file=None).SOLVE_DELAY_SECONDS == 0.25


def test_negative_delay_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, SOLVE_DELAY_SECONDS=-1)
