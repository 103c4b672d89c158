from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_color_log import LogLevel
from lib_color_log import cli as cli_module
from lib_color_log import config as log_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    log_config._reset_dotenv_state_for_testing()
    yield
    log_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values for later level seeding."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LOGGER=notice\n")
    monkeypatch.chdir(nested)

    loaded = log_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ["LOGGER"] == "notice"
    assert log_config.level_from_env() is LogLevel.NOTICE

    os.environ.pop("LOGGER", None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text("LOGGER=debug\n")
    monkeypatch.setenv("LOGGER", "error")

    result = log_config.enable_dotenv(search_from=tmp_path)

    assert result is not None
    assert os.environ["LOGGER"] == "error"


def test_enable_dotenv_loads_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (first / ".env").write_text("LIB_COLOR_LOG_SAMPLE=one\n")
    (second / ".env").write_text("LIB_COLOR_LOG_SAMPLE=two\n")
    monkeypatch.delenv("LIB_COLOR_LOG_SAMPLE", raising=False)

    assert log_config.enable_dotenv(search_from=first) == (first / ".env").resolve()
    assert log_config.enable_dotenv(search_from=second) == (first / ".env").resolve()
    assert os.environ["LIB_COLOR_LOG_SAMPLE"] == "one"

    os.environ.pop("LIB_COLOR_LOG_SAMPLE", None)


@pytest.mark.parametrize(
    "environ, expected",
    [
        ({"LOGGER": "info"}, LogLevel.INFO),
        ({"LOGGER": "disable"}, LogLevel.DISABLE),
        ({"LOGGER": "INFO"}, None),
        ({"LOGGER": ""}, None),
        ({}, None),
    ],
)
def test_level_from_env(environ: dict[str, str], expected: LogLevel | None) -> None:
    assert log_config.level_from_env(environ) is expected


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "yes", True),
        (None, "off", False),
        (None, "maybe", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert log_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(log_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(log_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {log_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []
