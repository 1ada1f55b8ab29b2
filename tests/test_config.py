"""Tests for environment-driven configuration."""

from config import Config, load_config


def test_env_overrides(monkeypatch):
    monkeypatch.setattr(Config, "array_size", Config.array_size)
    monkeypatch.setenv("STEPPER_ARRAY_SIZE", "12")
    assert load_config().array_size == 12


def test_invalid_value_ignored(monkeypatch, caplog):
    monkeypatch.setattr(Config, "port", 5000)
    monkeypatch.setenv("STEPPER_PORT", "not-a-port")
    load_config()
    assert Config.port == 5000
    assert "STEPPER_PORT" in caplog.text


def test_unknown_speed_falls_back(monkeypatch):
    monkeypatch.setattr(Config, "default_speed", Config.default_speed)
    monkeypatch.setenv("STEPPER_DEFAULT_SPEED", "ludicrous")
    load_config()
    assert Config.default_speed == "medium"


def test_session_cap_override(monkeypatch):
    monkeypatch.setattr(Config, "max_sessions", Config.max_sessions)
    monkeypatch.setenv("STEPPER_MAX_SESSIONS", "8")
    assert load_config().max_sessions == 8
