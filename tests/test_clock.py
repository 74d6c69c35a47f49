"""Tests for clock helpers."""

from datetime import datetime

import pytest

from BackEnd.core.clock import (
    fmt_clock,
    local_time_str,
    local_today_str,
    minutes_to_seconds,
    now_ms,
    round_half_up,
)


@pytest.mark.parametrize(
    "seconds, expected",
    [(0, "0:00"), (5, "0:05"), (60, "1:00"), (65, "1:05"), (1500, "25:00"), (3599, "59:59")],
)
def test_fmt_clock(seconds, expected):
    assert fmt_clock(seconds) == expected


def test_round_half_up_rounds_halves_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(130000 / 60000) == 2


def test_minutes_to_seconds():
    assert minutes_to_seconds(1) == 60
    assert minutes_to_seconds(0.1) == 6
    assert minutes_to_seconds(1 / 60) == 1
    assert minutes_to_seconds(0) == 0


def test_local_strings_use_given_datetime():
    dt = datetime(2026, 3, 4, 7, 8, 9)
    assert local_today_str(dt) == "2026-03-04"
    assert local_time_str(dt) == "07:08:09"


def test_now_ms_is_epoch_milliseconds():
    before = int(datetime.now().timestamp() * 1000)
    assert abs(now_ms() - before) < 5000
