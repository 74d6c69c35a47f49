import logging
import os
from dataclasses import dataclass

from BackEnd.core.clock import minutes_to_seconds

logger = logging.getLogger(__name__)

STUDY_TIME_MIN = 1
BREAK_TIME_MIN = 1

TICK_INTERVAL_MS = 1000
AUTO_START_DELAY_MS = 1000
HISTORY_KEY = "sessions"
CHART_MIN_SUGGESTED_MAX = 30


def _minutes_from_env(name, default):
	raw = os.environ.get(name)
	if raw is None or raw.strip() == "":
		return default
	try:
		value = float(raw)
	except ValueError:
		logger.warning("Ignoring %s=%r: not a number", name, raw)
		return default
	if value < 0:
		logger.warning("Ignoring %s=%r: must not be negative", name, raw)
		return default
	return value


@dataclass(frozen=True)
class TimerConfig:
	"""Configured phase lengths, in minutes."""
	study_minutes: float = STUDY_TIME_MIN
	break_minutes: float = BREAK_TIME_MIN

	@property
	def study_seconds(self) -> int:
		return minutes_to_seconds(self.study_minutes)

	@property
	def break_seconds(self) -> int:
		return minutes_to_seconds(self.break_minutes)

	@classmethod
	def from_env(cls):
		return cls(
			study_minutes=_minutes_from_env("FOCUS_STUDY_MINUTES", STUDY_TIME_MIN),
			break_minutes=_minutes_from_env("FOCUS_BREAK_MINUTES", BREAK_TIME_MIN),
		)
