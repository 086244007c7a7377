"""Tests for settings loading."""

import pytest

from src.hello_service.config import DEFAULT_PORT, Settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "HOST", "LOG_LEVEL", "APP_VERSION"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = Settings(_env_file=None)
    assert config.port == DEFAULT_PORT == 3000
    assert config.host == "0.0.0.0"
    assert config.log_level == "INFO"
    assert config.app_version == "1.0.0"


def test_port_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080


@pytest.mark.parametrize("raw", ["abc", "", "  ", "80.5", "70000", "-1"])
def test_invalid_port_falls_back_to_default(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("PORT", raw)
    assert Settings(_env_file=None).port == DEFAULT_PORT


def test_log_level_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"


def test_env_file(tmp_path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4000\nHOST=127.0.0.1\n", encoding="utf-8")
    config = Settings(_env_file=env_file)
    assert config.port == 4000
    assert config.host == "127.0.0.1"
