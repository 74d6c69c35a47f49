"""Tests for timer configuration."""

import logging

from BackEnd.core.config import BREAK_TIME_MIN, STUDY_TIME_MIN, TimerConfig


def test_defaults():
    config = TimerConfig()
    assert config.study_minutes == STUDY_TIME_MIN
    assert config.break_minutes == BREAK_TIME_MIN
    assert config.study_seconds == 60


def test_seconds_are_rounded():
    config = TimerConfig(study_minutes=0.1, break_minutes=0.125)
    assert config.study_seconds == 6
    assert config.break_seconds == 8  # 7.5 rounds up


def test_from_env_reads_overrides(monkeypatch):
    monkeypatch.setenv("FOCUS_STUDY_MINUTES", "25")
    monkeypatch.setenv("FOCUS_BREAK_MINUTES", "5")
    config = TimerConfig.from_env()
    assert config.study_seconds == 25 * 60
    assert config.break_seconds == 5 * 60


def test_from_env_ignores_bad_values(monkeypatch, caplog):
    monkeypatch.setenv("FOCUS_STUDY_MINUTES", "soon")
    monkeypatch.setenv("FOCUS_BREAK_MINUTES", "-3")
    with caplog.at_level(logging.WARNING, logger="BackEnd.core.config"):
        config = TimerConfig.from_env()
    assert config == TimerConfig()
    assert "FOCUS_STUDY_MINUTES" in caplog.text
    assert "FOCUS_BREAK_MINUTES" in caplog.text


def test_from_env_without_overrides(monkeypatch):
    monkeypatch.delenv("FOCUS_STUDY_MINUTES", raising=False)
    monkeypatch.delenv("FOCUS_BREAK_MINUTES", raising=False)
    assert TimerConfig.from_env() == TimerConfig()
