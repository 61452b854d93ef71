"""Tests for environment configuration."""

from pathlib import Path

import pytest

from oai_rfc1807.core import config as config_module
from oai_rfc1807.core.config import (
    DEFAULT_BASE_URL,
    EnvironmentConfig,
    get_config,
    is_test_mode,
    set_production_mode,
    set_test_mode,
)


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "_config", None)


def test_production_paths() -> None:
    config = EnvironmentConfig()
    assert config.mode == "production"
    assert config.log_dir == Path("logs")
    assert config.output_dir == Path("data/rfc1807")


def test_switch_to_test_mode() -> None:
    set_test_mode()
    assert is_test_mode()
    assert get_config().output_dir == Path("test_data/rfc1807")
    set_production_mode()
    assert not is_test_mode()
    assert get_config().log_dir == Path("logs")


def test_base_url_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OAI_BASE_URL", "https://journals.example.org/")
    assert get_config().base_url == "https://journals.example.org"
    monkeypatch.delenv("OAI_BASE_URL")
    assert get_config().base_url == DEFAULT_BASE_URL


def test_ensure_directories(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = EnvironmentConfig(mode="test")
    config.ensure_directories()
    assert (tmp_path / "test_data" / "logs").is_dir()
    assert (tmp_path / "test_data" / "rfc1807").is_dir()
    assert config.get_summary()["mode"] == "test"
