"""Tests for settings module behavior."""

from __future__ import annotations

import importlib

import pytest

from pathgrammar.shared.family import Family


def test_defaults(config_runtime_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without config or environment the manual strategy and host family apply."""
    _ = config_runtime_env

    import pathgrammar.config.settings as settings

    monkeypatch.delenv(settings.ENV_TOKENIZER, raising=False)
    monkeypatch.delenv(settings.ENV_FAMILY, raising=False)
    reloaded = importlib.reload(settings)

    assert reloaded.TOKENIZER_STRATEGY == "manual"
    assert reloaded.DEFAULT_FAMILY is Family.native()
    assert reloaded.BENCH_REPEAT == 5


def test_values_come_from_config(config_runtime_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """Settings derive from the loaded configuration."""
    _ = config_runtime_env

    from pathgrammar.config.config import config as app_config

    app_config.tokenizer = "Generated"
    app_config.default_family = "windows"
    app_config.bench_repeat = 3

    import pathgrammar.config.settings as settings

    monkeypatch.delenv(settings.ENV_TOKENIZER, raising=False)
    monkeypatch.delenv(settings.ENV_FAMILY, raising=False)
    reloaded = importlib.reload(settings)

    assert reloaded.TOKENIZER_STRATEGY == "generated"
    assert reloaded.DEFAULT_FAMILY is Family.WINDOWS
    assert reloaded.BENCH_REPEAT == 3


def test_environment_overrides_config(config_runtime_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment variables win over the configuration file."""
    _ = config_runtime_env

    from pathgrammar.config.config import config as app_config

    app_config.tokenizer = "generated"
    app_config.default_family = "windows"

    import pathgrammar.config.settings as settings

    monkeypatch.setenv(settings.ENV_TOKENIZER, " MANUAL ")
    monkeypatch.setenv(settings.ENV_FAMILY, "posix")
    reloaded = importlib.reload(settings)

    assert reloaded.TOKENIZER_STRATEGY == "manual"
    assert reloaded.DEFAULT_FAMILY is Family.POSIX


def test_invalid_values_fall_back(config_runtime_env: None, monkeypatch: pytest.MonkeyPatch) -> None:
    """Unknown families and non-positive repeats fall back to defaults."""
    _ = config_runtime_env

    from pathgrammar.config.config import config as app_config

    app_config.default_family = "amiga"
    app_config.bench_repeat = 0

    import pathgrammar.config.settings as settings

    monkeypatch.delenv(settings.ENV_FAMILY, raising=False)
    reloaded = importlib.reload(settings)

    assert reloaded.DEFAULT_FAMILY is Family.native()
    assert reloaded.BENCH_REPEAT == 5


def test_unknown_tokenizer_is_kept_for_selection(
    config_runtime_env: None, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Settings do not validate the tokenizer name; selection rejects it."""
    _ = config_runtime_env

    import pathgrammar.config.settings as settings

    monkeypatch.setenv(settings.ENV_TOKENIZER, "Regex")
    reloaded = importlib.reload(settings)

    assert reloaded.TOKENIZER_STRATEGY == "regex"
