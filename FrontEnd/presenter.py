import logging
from dataclasses import dataclass

from PySide6.QtCore import QObject, Signal

from BackEnd.core.clock import fmt_clock, local_today_str
from BackEnd.core.models import Phase
from BackEnd.services import stats_service

logger = logging.getLogger(__name__)

DELETE_ONE_PROMPT = "Delete this entry?"
DELETE_ALL_PROMPT = "Are you sure you want to delete all study history? This cannot be undone."


@dataclass(frozen=True)
class HistoryRow:
	index: int  # position in the stored history
	summary: str
	detail: str


class FocusPresenter(QObject):
	"""Routes user intents to the timer/store and prepares what the window shows."""
	display_changed = Signal()
	history_changed = Signal()

	def __init__(self, timer, store, confirm, today=local_today_str):
		super().__init__()
		self.timer = timer
		self.store = store
		self.confirm = confirm
		self.today = today
		self.timer.updated.connect(lambda _snap: self.display_changed.emit())
		self.timer.state_changed.connect(lambda _state: self.display_changed.emit())
		self.timer.session_recorded.connect(lambda _rec: self.history_changed.emit())

	# ----- commands -----
	def start(self):
		self.timer.start()

	def pause(self):
		self.timer.pause()

	def reset(self):
		self.timer.reset()

	def delete_record(self, index):
		if not self.confirm(DELETE_ONE_PROMPT):
			return False
		self.store.delete_at(index)
		self.history_changed.emit()
		return True

	def delete_all(self):
		if not self.confirm(DELETE_ALL_PROMPT):
			return False
		self.store.clear()
		self.history_changed.emit()
		return True

	# ----- view state -----
	def clock_text(self):
		return fmt_clock(self.timer.remaining_sec)

	def status_text(self):
		return "Focus Time" if self.timer.phase is Phase.STUDY else "Break Time"

	def controls_enabled(self):
		"""(start_enabled, pause_enabled)"""
		running = self.timer.running
		return (not running, running)

	def history_rows(self):
		records = self.store.records
		rows = []
		# Show newest first
		for index in range(len(records) - 1, -1, -1):
			s = records[index]
			rows.append(HistoryRow(
				index=index,
				summary=f"{s.date} • {s.time} — {s.duration} mins",
				detail=f"Started: {s.time}\nDuration: {s.duration} mins",
			))
		return rows

	def today_total(self):
		return stats_service.total_for_date(self.store.records, self.today())

	def chart_series(self):
		return stats_service.chart_series(stats_service.by_date(self.store.records))

	def streak(self):
		return stats_service.daily_streak(self.store.records, self.today())

	def total_minutes(self):
		return stats_service.total_minutes(self.store.records)

	def days_studied(self):
		return stats_service.total_days_studied(self.store.records)
