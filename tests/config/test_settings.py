"""Tests for SnakeCaseSettings."""

import pytest
from pydantic import ValidationError

from snakecase.config.settings import SnakeCaseSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SNAKECASE_VERBOSE", raising=False)
    monkeypatch.delenv("SNAKECASE_LOG_JSON", raising=False)


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = SnakeCaseSettings()
        assert settings.verbose is False
        assert settings.log_json is False

    def test_frozen(self) -> None:
        settings = SnakeCaseSettings()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


class TestEnvSource:
    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SNAKECASE_VERBOSE", "true")
        assert SnakeCaseSettings().verbose is True

    def test_kwargs_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Init kwargs take priority over environment variables."""
        monkeypatch.setenv("SNAKECASE_LOG_JSON", "true")
        assert SnakeCaseSettings(log_json=False).log_json is False

    def test_unprefixed_env_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERBOSE", "true")
        assert SnakeCaseSettings().verbose is False
