from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Phase(str, Enum):
	STUDY = "study"
	BREAK = "break"

	def toggled(self):
		return Phase.BREAK if self is Phase.STUDY else Phase.STUDY


@dataclass(frozen=True)
class SessionRecord:
	date: str  # YYYY-MM-DD (local)
	time: str  # HH:MM:SS (local)
	duration: int  # whole minutes

	def __post_init__(self):
		if self.duration < 0:
			raise ValueError(f"duration must be >= 0, got {self.duration}")

	def to_dict(self):
		return {"date": self.date, "time": self.time, "duration": self.duration}

	@classmethod
	def from_dict(cls, data):
		"""Build a record from its stored form; raises ValueError when the shape is wrong."""
		if not isinstance(data, dict):
			raise ValueError("record is not an object")
		date, time_, duration = data.get("date"), data.get("time"), data.get("duration")
		if not isinstance(date, str) or not isinstance(time_, str):
			raise ValueError("record date/time must be strings")
		if isinstance(duration, bool) or not isinstance(duration, int):
			raise ValueError("record duration must be an integer")
		return cls(date=date, time=time_, duration=duration)


@dataclass(frozen=True)
class PhaseSnapshot:
	phase: Phase
	remaining_seconds: int
	running: bool
	phase_start_ms: Optional[int]
