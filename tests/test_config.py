from __future__ import annotations

import logging

import pytest

from autocuber.config import LAYERS_ENV, LOG_LEVEL_ENV, CoreConfig


def test_defaults() -> None:
    config = CoreConfig()
    assert config.layers == 3
    assert config.log_level == "WARNING"
    assert config.logging_level == logging.WARNING


def test_log_level_is_normalised() -> None:
    assert CoreConfig(log_level=" debug ").log_level == "DEBUG"
    assert CoreConfig(log_level="info").logging_level == logging.INFO


def test_invalid_values_fail() -> None:
    with pytest.raises(ValueError):
        CoreConfig(layers=0)
    with pytest.raises(ValueError):
        CoreConfig(log_level="LOUD")


def test_from_env_reads_overrides() -> None:
    config = CoreConfig.from_env({LAYERS_ENV: "4", LOG_LEVEL_ENV: "error"})
    assert config == CoreConfig(layers=4, log_level="ERROR")


def test_from_env_ignores_blank_values() -> None:
    assert CoreConfig.from_env({LAYERS_ENV: "  ", LOG_LEVEL_ENV: ""}) == CoreConfig()


def test_from_env_uses_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LAYERS_ENV, "5")
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert CoreConfig.from_env().layers == 5


def test_from_env_rejects_non_integer_layers() -> None:
    with pytest.raises(ValueError, match=LAYERS_ENV):
        CoreConfig.from_env({LAYERS_ENV: "three"})
