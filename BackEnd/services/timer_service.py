import logging

from PySide6.QtCore import QObject, Signal, QTimer

from BackEnd.core.clock import now_ms
from BackEnd.core.config import AUTO_START_DELAY_MS, TICK_INTERVAL_MS, TimerConfig
from BackEnd.core.models import Phase, PhaseSnapshot

logger = logging.getLogger(__name__)


class PhaseTimer(QObject):
	"""Study/break countdown.

	One periodic QTimer drives ``tick()`` once per second. When a phase runs
	out the study session (if any) is recorded inline, the phase toggles and
	a single-shot timer starts the next phase after a short delay.
	"""
	updated = Signal(object)  # emits PhaseSnapshot
	state_changed = Signal(str)  # emits 'idle', 'running', 'paused', 'stopped'
	phase_changed = Signal(object)  # emits PhaseSnapshot of the new phase
	session_recorded = Signal(object)  # emits SessionRecord

	def __init__(self, config=None, recorder=None, clock=now_ms):
		super().__init__()
		self.config = config or TimerConfig()
		self.recorder = recorder
		self.clock = clock
		self.phase = Phase.STUDY
		self.remaining_sec = self.config.study_seconds
		self.running = False
		self.phase_start_ms = None
		self._timer = QTimer(self)
		self._timer.setInterval(TICK_INTERVAL_MS)
		self._timer.timeout.connect(self.tick)
		self._auto_start = QTimer(self)
		self._auto_start.setSingleShot(True)
		self._auto_start.setInterval(AUTO_START_DELAY_MS)
		self._auto_start.timeout.connect(self.start)

	@property
	def has_active_tick(self):
		return self._timer.isActive()

	@property
	def auto_start_pending(self):
		return self._auto_start.isActive()

	def snapshot(self):
		return PhaseSnapshot(
			phase=self.phase,
			remaining_seconds=self.remaining_sec,
			running=self.running,
			phase_start_ms=self.phase_start_ms,
		)

	def _phase_seconds(self, phase):
		return self.config.study_seconds if phase is Phase.STUDY else self.config.break_seconds

	def _cancel_if_active(self):
		if self._timer.isActive():
			self._timer.stop()

	def start(self):
		self._auto_start.stop()
		if self.running:
			logger.debug("start ignored: already running")
			return
		self.running = True
		# When starting a fresh study session, set the start timestamp
		if self.phase is Phase.STUDY and self.phase_start_ms is None:
			self.phase_start_ms = self.clock()
		self._cancel_if_active()
		self._timer.start()
		self.state_changed.emit('running')

	def pause(self):
		# a pause during the inter-phase delay keeps the next phase from starting
		self._auto_start.stop()
		if not self.running:
			logger.debug("pause ignored: not running")
			return
		self._cancel_if_active()
		self.running = False
		# phase_start_ms is kept so the recorded duration spans the pause
		self.state_changed.emit('paused')

	def reset(self):
		self._auto_start.stop()
		self._cancel_if_active()
		self.running = False
		self.phase = Phase.STUDY
		self.remaining_sec = self.config.study_seconds
		self.phase_start_ms = None
		self.updated.emit(self.snapshot())
		self.state_changed.emit('idle')

	def tick(self):
		self.remaining_sec = max(0, self.remaining_sec - 1)
		self.updated.emit(self.snapshot())
		if self.remaining_sec > 0:
			return

		self._cancel_if_active()
		self.running = False
		finished = self.phase
		if finished is Phase.STUDY and self.recorder is not None:
			record = self.recorder.on_study_phase_complete(
				self.phase_start_ms, self.config.study_minutes)
			self.session_recorded.emit(record)
		self.phase_start_ms = None

		self.phase = finished.toggled()
		self.remaining_sec = self._phase_seconds(self.phase)
		logger.info("%s phase complete, next: %s", finished.value, self.phase.value)
		self.state_changed.emit('stopped')
		self.phase_changed.emit(self.snapshot())
		self.updated.emit(self.snapshot())
		self._auto_start.start()
