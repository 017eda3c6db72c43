from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_cowsay import cli as cli_module
from lib_cowsay import config as cowsay_config
from lib_cowsay.lib_cowsay import cowsay_text


@pytest.fixture(autouse=True)
def _reset_dotenv_state() -> None:
    """Reset shared dotenv state around each test."""

    cowsay_config._reset_dotenv_state_for_testing()
    yield
    cowsay_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values found in a parent directory."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text(f"{cowsay_config.MESSAGE_ENV_VAR}=dotenv-moo\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv(cowsay_config.MESSAGE_ENV_VAR, raising=False)

    loaded = cowsay_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ[cowsay_config.MESSAGE_ENV_VAR] == "dotenv-moo"

    os.environ.pop(cowsay_config.MESSAGE_ENV_VAR, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    (tmp_path / ".env").write_text(f"{cowsay_config.MESSAGE_ENV_VAR}=dotenv-moo\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(cowsay_config.MESSAGE_ENV_VAR, "real-moo")

    result = cowsay_config.enable_dotenv()

    assert result is not None
    assert os.environ[cowsay_config.MESSAGE_ENV_VAR] == "real-moo"


def test_enable_dotenv_only_loads_once(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    first_dir = tmp_path / "first"
    second_dir = tmp_path / "second"
    first_dir.mkdir()
    second_dir.mkdir()
    (first_dir / ".env").write_text("X=1\n")
    (second_dir / ".env").write_text("X=2\n")
    monkeypatch.delenv("X", raising=False)

    monkeypatch.chdir(first_dir)
    first = cowsay_config.enable_dotenv()
    monkeypatch.chdir(second_dir)
    second = cowsay_config.enable_dotenv()

    assert first == second == (first_dir / ".env").resolve()
    assert os.environ["X"] == "1"
    os.environ.pop("X", None)


@pytest.mark.parametrize(
    ("explicit", "env_value", "expected"),
    [
        (None, None, False),
        (None, "1", True),
        (None, " On ", True),
        (None, "0", False),
        (True, None, True),
        (False, "yes", False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert cowsay_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_default_message_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(cowsay_config.MESSAGE_ENV_VAR, "from env")
    assert cowsay_config.default_message() == "from env"

    monkeypatch.setenv(cowsay_config.MESSAGE_ENV_VAR, "")
    assert cowsay_config.default_message() == cowsay_config.FALLBACK_MESSAGE


def _say_without_words(env: dict[str, str | None], args: list[str]) -> str:
    runner = CliRunner()
    isolated: dict[str, str | None] = {
        cowsay_config.MESSAGE_ENV_VAR: None,
        cowsay_config.DOTENV_ENV_VAR: None,
        "FORCE_COLOR": None,
        **env,
    }
    result = runner.invoke(cli_module.cli, [*args, "say"], env=isolated)
    assert result.exit_code == 0
    cowsay_config._reset_dotenv_state_for_testing()
    return result.output


def test_say_uses_dotenv_message_only_when_requested(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The .env default message reaches `say` through the flag or the env toggle, never otherwise."""

    (tmp_path / ".env").write_text(f"{cowsay_config.MESSAGE_ENV_VAR}=moo from dotenv\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(cowsay_config.MESSAGE_ENV_VAR, raising=False)
    from_dotenv = cowsay_text("moo from dotenv")
    fallback = cowsay_text(cowsay_config.FALLBACK_MESSAGE)

    assert _say_without_words({}, []) == fallback
    assert _say_without_words({}, ["--use-dotenv"]) == from_dotenv
    assert _say_without_words({cowsay_config.DOTENV_ENV_VAR: "1"}, []) == from_dotenv
    assert _say_without_words({cowsay_config.DOTENV_ENV_VAR: "1"}, ["--no-use-dotenv"]) == fallback
    assert cowsay_config.MESSAGE_ENV_VAR not in os.environ
