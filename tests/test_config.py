"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest

from emojikit.config import EmojiKitConfig, load_config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("EMOJIKIT_SEED", raising=False)
    monkeypatch.delenv("EMOJIKIT_LOG_LEVEL", raising=False)
    cfg = load_config()
    assert cfg == EmojiKitConfig()
    assert cfg.seed is None
    assert cfg.log_level_value == logging.WARNING


def test_seed_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMOJIKIT_SEED", " 42 ")
    assert load_config().seed == 42


@pytest.mark.parametrize("raw,expected", [("abc", None), ("", None), ("99999999999999999999", 2**63 - 1)])
def test_bad_seed_falls_back(monkeypatch: pytest.MonkeyPatch, raw: str, expected) -> None:
    monkeypatch.setenv("EMOJIKIT_SEED", raw)
    assert load_config().seed == expected


def test_negative_seeds_stay_distinct(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EMOJIKIT_SEED", "-7")
    assert load_config().seed == -7
    monkeypatch.setenv("EMOJIKIT_SEED", "-8")
    assert load_config().seed == -8


@pytest.mark.parametrize("raw,expected", [("debug", "DEBUG"), ("Info", "INFO"), ("loud", "WARNING"), ("  ", "WARNING")])
def test_log_level_from_env(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("EMOJIKIT_LOG_LEVEL", raw)
    assert load_config().log_level == expected


def test_config_validation() -> None:
    with pytest.raises(ValueError):
        EmojiKitConfig(log_level="LOUD")
    with pytest.raises(TypeError):
        EmojiKitConfig(seed=True)  # type: ignore[arg-type]
