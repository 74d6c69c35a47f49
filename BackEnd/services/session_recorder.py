import logging
from datetime import datetime

from BackEnd.core.clock import local_time_str, local_today_str, now_ms, round_half_up
from BackEnd.core.models import SessionRecord

logger = logging.getLogger(__name__)


def reconcile_minutes(start_ms, configured_minutes, now):
	"""Actual minutes since ``start_ms``, or the configured length when that rounds to 0."""
	fallback = round_half_up(configured_minutes)
	if start_ms is None:
		return fallback
	mins = round_half_up((now - start_ms) / 60000)
	# don't save 0 minutes if for some reason computed 0 -> fallback to configured
	if mins <= 0:
		return fallback
	return mins


class SessionRecorder:
	"""Turns a finished study phase into a persisted SessionRecord."""

	def __init__(self, store, clock=now_ms):
		self.store = store
		self.clock = clock

	def on_study_phase_complete(self, start_ms, configured_minutes):
		now = self.clock()
		duration = reconcile_minutes(start_ms, configured_minutes, now)
		stamp = datetime.fromtimestamp(now / 1000)
		record = SessionRecord(
			date=local_today_str(stamp),
			time=local_time_str(stamp),
			duration=duration,
		)
		return self.store.append(record)
