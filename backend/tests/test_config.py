"""
Tests for environment-driven settings.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import DEFAULT_CORS_ORIGINS, Settings  # noqa: E402

ENV_VARS = [
    "SNAKE_BASE_TICK_MS",
    "SNAKE_SPEED_BOOST_MULTIPLIER",
    "SNAKE_SPECTATOR_TICK_MS",
    "SNAKE_LEADERBOARD_LIMIT",
    "SNAKE_MAX_GAMES",
    "SNAKE_SEED",
    "CORS_ALLOWED_ORIGINS",
    "LOG_LEVEL",
]


def test_defaults(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.base_tick_ms == 150
    assert settings.speed_boost_multiplier == 0.5
    assert settings.spectator_tick_ms == 200
    assert settings.leaderboard_limit == 10
    assert settings.max_games == 100
    assert settings.seed is None
    assert settings.cors_allowed_origins == DEFAULT_CORS_ORIGINS
    assert settings.log_level == "INFO"


def test_overrides(monkeypatch):
    monkeypatch.setenv("SNAKE_BASE_TICK_MS", "100")
    monkeypatch.setenv("SNAKE_SPEED_BOOST_MULTIPLIER", "0.25")
    monkeypatch.setenv("SNAKE_SEED", "7")
    monkeypatch.setenv("SNAKE_MAX_GAMES", "5")
    monkeypatch.setenv("CORS_ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.base_tick_ms == 100
    assert settings.speed_boost_multiplier == 0.25
    assert settings.seed == 7
    assert settings.max_games == 5
    assert settings.cors_allowed_origins == ["https://a.example", "https://b.example"]
    assert settings.log_level == "DEBUG"


def test_blank_values_fall_back(monkeypatch):
    monkeypatch.setenv("SNAKE_BASE_TICK_MS", " ")
    monkeypatch.setenv("SNAKE_SEED", "")
    settings = Settings.from_env()
    assert settings.base_tick_ms == 150
    assert settings.seed is None
