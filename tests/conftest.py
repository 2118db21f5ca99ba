"""Shared pytest fixtures for CLI, check, and module-entry tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from vercheck.adapters.memory.descriptor import DescriptorStub
    from vercheck.composition import AppServices

_COVERAGE_BASENAME = ".coverage.vercheck"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a local temp directory.

    Runs before pytest-cov creates its ``Coverage()`` object so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

GRADLE_DESCRIPTOR = """\
plugins {
    id("com.android.library")
}

mavenPublishing {
    coordinates {
        groupId = "ai.ultravox"
        artifactId = "ultravox-client"
        version = "0.6.9"
    }
}
"""


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for clean output (e.g., JSON parsing) so log
    messages written to stderr do not contaminate it.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from vercheck.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before and after the test.

    Clearing afterwards keeps configuration loaded under a monkeypatched
    environment from leaking into later tests.
    """
    from vercheck.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def gradle_descriptor(tmp_path: Path) -> Path:
    """Write a Gradle build script declaring version 0.6.9 and return its path."""
    path = tmp_path / "build.gradle.kts"
    path.write_text(GRADLE_DESCRIPTOR, encoding="utf-8")
    return path


@pytest.fixture
def write_descriptor(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing descriptor text under ``tmp_path``.

    Example:
        def test_x(write_descriptor: Callable[[str, str], Path]) -> None:
            path = write_descriptor("pyproject.toml", 'version = "1.0.0"\\n')
    """

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def inject_config(
    clear_config_cache: None,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory providing production services with an injected Config.

    Only the I/O boundary (``get_config``) is replaced; the Config object,
    logging and descriptor reading stay real.
    """
    from vercheck.composition import AppServices, build_production

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            read_descriptor_lines=prod.read_descriptor_lines,
            resolve_descriptor_path=prod.resolve_descriptor_path,
            resolve_expected_version=prod.resolve_expected_version,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a factory whose get_config records the profile it was called with."""
    from vercheck.composition import AppServices, build_production

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        prod = build_production()
        test_services = AppServices(
            get_config=_capturing_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            read_descriptor_lines=prod.read_descriptor_lines,
            resolve_descriptor_path=prod.resolve_descriptor_path,
            resolve_expected_version=prod.resolve_expected_version,
        )
        return lambda: test_services

    return _inject


@dataclass
class StubCliContext:
    """Services factory plus the DescriptorStub it reads from."""

    factory: Callable[[], Any]
    stub: DescriptorStub


@pytest.fixture
def stub_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[Path, str], dict[str, Any]], StubCliContext]:
    """Create CLI services reading descriptors from memory.

    Takes ``{path: text}`` descriptor contents and the ``[version_check]``
    config section, and returns the wired factory with its stub so tests can
    assert on which paths were read.
    """
    from vercheck.adapters.memory import DescriptorStub as DescriptorStubImpl
    from vercheck.composition import AppServices, build_production

    def _create(files: dict[Path, str], section: dict[str, Any]) -> StubCliContext:
        stub = DescriptorStubImpl(files=dict(files))
        config = Config({"version_check": section}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            get_default_config_path=prod.get_default_config_path,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
            read_descriptor_lines=stub.read_descriptor_lines,
            resolve_descriptor_path=prod.resolve_descriptor_path,
            resolve_expected_version=prod.resolve_expected_version,
        )
        return StubCliContext(factory=lambda: test_services, stub=stub)

    return _create


@pytest.fixture
def project_package(tmp_path: Path) -> Iterator[str]:
    """Write an uninstalled package ``<tmp_path>/vercheck_sample_project`` and return its name.

    ``session.py`` defines ``SDK_VERSION = "0.6.9"``. Imported modules are
    dropped from ``sys.modules`` afterwards so each test imports afresh.
    """
    import sys

    name = "vercheck_sample_project"
    package = tmp_path / name
    package.mkdir()
    (package / "__init__.py").write_text("", encoding="utf-8")
    (package / "session.py").write_text('SDK_VERSION = "0.6.9"\n', encoding="utf-8")
    try:
        yield name
    finally:
        for module in [key for key in sys.modules if key == name or key.startswith(f"{name}.")]:
            del sys.modules[module]
