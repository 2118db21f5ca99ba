"""Port behavioral contract tests: in-memory adapters and the testing composition.

Production adapters are covered by the source and CLI integration tests.
Static type conformance is enforced by pyright.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from vercheck.adapters.memory import (
    DescriptorStub,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
)
from vercheck.composition import AppServices, build_production, build_testing
from vercheck.domain.errors import DescriptorUnreadableError, VersionMismatchError

if TYPE_CHECKING:
    from vercheck.application.ports import GetConfig, ReadDescriptorLines


@pytest.fixture
def get_config_impl() -> GetConfig:
    """Provide in-memory GetConfig implementation."""
    return get_config_in_memory


@pytest.fixture
def descriptor_stub() -> DescriptorStub:
    """Provide a stub holding one Gradle build script."""
    return DescriptorStub(files={Path("client/build.gradle.kts"): 'plugins {}\n    version = "0.6.9"\n'})


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_version_check_section(get_config_impl: GetConfig) -> None:
    """GetConfig must return a Config carrying a [version_check] section."""
    config = get_config_impl()

    assert isinstance(config, Config)
    assert config.as_dict() == {"version_check": {}}


@pytest.mark.os_agnostic
def test_get_config_accepts_profile_and_start_dir(get_config_impl: GetConfig) -> None:
    """The keyword signature matches the production loader."""
    assert isinstance(get_config_impl(profile="ci", start_dir="/tmp"), Config)


@pytest.mark.os_agnostic
def test_default_config_path_is_synthetic_toml() -> None:
    """The in-memory path names a TOML file without creating it."""
    assert get_default_config_path_in_memory().suffix == ".toml"


@pytest.mark.os_agnostic
def test_display_and_logging_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    """In-memory display and logging produce no output."""
    config = Config({"version_check": {}}, {})

    display_config_in_memory(config)
    init_logging_in_memory(config)

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_descriptor_stub_serves_lines(descriptor_stub: DescriptorStub) -> None:
    """Stored text is split into lines without newlines."""
    read_lines: ReadDescriptorLines = descriptor_stub.read_descriptor_lines

    assert read_lines(Path("client/build.gradle.kts")) == ["plugins {}", '    version = "0.6.9"']


@pytest.mark.os_agnostic
def test_descriptor_stub_missing_path_is_unreadable(descriptor_stub: DescriptorStub) -> None:
    """Unknown paths behave like missing files and are still recorded."""
    with pytest.raises(DescriptorUnreadableError, match="not found"):
        descriptor_stub.read_descriptor_lines(Path("other.kts"))

    assert descriptor_stub.reads == [Path("other.kts")]


@pytest.mark.os_agnostic
def test_build_testing_checks_through_the_stub(descriptor_stub: DescriptorStub) -> None:
    """The testing composition never touches the filesystem."""
    services = build_testing(stub=descriptor_stub)
    path = services.resolve_descriptor_path("build.gradle.kts", "client")

    result = services.check_version(path, services.resolve_expected_version("0.6.9"))

    assert result.line_number == 2
    assert descriptor_stub.reads == [Path("client/build.gradle.kts")]


@pytest.mark.os_agnostic
def test_build_testing_reports_mismatch(descriptor_stub: DescriptorStub) -> None:
    """Failures surface unchanged from the use case."""
    services = build_testing(stub=descriptor_stub)

    with pytest.raises(VersionMismatchError):
        services.check_version(Path("client/build.gradle.kts"), "0.6.8")


@pytest.mark.os_agnostic
def test_build_testing_without_stub_reads_nothing() -> None:
    """The default stub is empty, so every descriptor is missing."""
    with pytest.raises(DescriptorUnreadableError):
        build_testing().check_version(Path("pyproject.toml"), "1.0.0")


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    """Production services read from disk and load layered config."""
    from vercheck.adapters.config.loader import get_config
    from vercheck.adapters.sources import read_descriptor_lines

    services = build_production()

    assert isinstance(services, AppServices)
    assert services.get_config is get_config
    assert services.read_descriptor_lines is read_descriptor_lines


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """The container cannot be rewired after construction."""
    services = build_testing()

    with pytest.raises(AttributeError):
        services.get_config = get_config_in_memory  # type: ignore[misc]
