"""Module entry stories ensuring `python -m` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import lib_cli_exit_tools
import pytest

from vercheck import __init__conf__, entry
from vercheck.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["vercheck"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("vercheck.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_exits_with_the_check_outcome(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    managed_traceback_state: None,
    gradle_descriptor: Path,
) -> None:
    """A mismatch through ``python -m`` ends the process with exit code 1."""
    monkeypatch.setattr(
        sys, "argv", ["vercheck", "check", "--descriptor", str(gradle_descriptor), "--expected", "0.6.8"]
    )

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("vercheck.__main__", run_name="__main__")

    assert exc.value.code == 1
    assert '"0.6.8"' in capsys.readouterr().err


@pytest.mark.os_agnostic
def test_module_entry_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback via module entry prints complete traceback on an unexpected error."""
    from vercheck.adapters.cli.commands import check_cmd

    def explode(*_args: object, **_kwargs: object) -> object:
        raise RuntimeError("descriptor loader exploded")

    monkeypatch.setattr(check_cmd, "load_version_check_config", explode)
    monkeypatch.setattr(sys, "argv", ["vercheck", "--traceback", "check", "--expected", "1.0.0"])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("vercheck.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)

    assert exc.value.code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "RuntimeError: descriptor loader exploded" in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports every registered command."""
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}

    assert {"cli_check", "cli_config", "cli_info"}.issubset(exported)
    assert set(cli_mod.cli.commands) == {"check", "config", "info"}


@pytest.mark.os_agnostic
def test_module_entry_subprocess_help() -> None:
    """`python -m vercheck --help` works in a fresh interpreter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "vercheck", "--help"],
        capture_output=True,
        timeout=30,
        check=False,
        # rich-click prints Unicode that cp1252 cannot decode
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert "Usage:" in result.stdout
    assert __init__conf__.shell_command in result.stdout


@pytest.mark.os_agnostic
def test_module_entry_subprocess_check(gradle_descriptor: Path) -> None:
    """A real process run returns 0 for agreeing versions and 65 without a declaration."""
    command = [sys.executable, "-m", "vercheck", "check", "--descriptor", str(gradle_descriptor)]

    ok = subprocess.run(  # noqa: S603
        [*command, "--expected", "0.6.9"], capture_output=True, timeout=30, check=False, encoding="utf-8"
    )
    gradle_descriptor.write_text("plugins {}\n", encoding="utf-8")
    missing = subprocess.run(  # noqa: S603
        [*command, "--expected", "0.6.9"], capture_output=True, timeout=30, check=False, encoding="utf-8"
    )

    assert ok.returncode == 0
    assert "OK:" in ok.stdout
    assert missing.returncode == 65


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    """`python -m vercheck --version` outputs the version."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "vercheck", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["vercheck", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_entry_main_returns_config_error_without_expected_version(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    gradle_descriptor: Path,
    clear_config_cache: None,
) -> None:
    """entry.main() returns 78 when no expected version is given."""
    monkeypatch.setattr(sys, "argv", ["vercheck", "check", "--descriptor", str(gradle_descriptor)])
    monkeypatch.delenv("VERCHECK___VERSION_CHECK__EXPECTED", raising=False)
    monkeypatch.delenv("VERCHECK___VERSION_CHECK__EXPECTED_FROM", raising=False)

    exit_code = entry.main()

    assert exit_code == 78
    assert "No expected version" in capsys.readouterr().err
