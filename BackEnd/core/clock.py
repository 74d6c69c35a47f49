import math
import time
from datetime import datetime

def now_ms() -> int:
	"""Return current wall-clock time as epoch milliseconds."""
	return int(time.time() * 1000)

def local_today_str(dt=None):
	"""Return local date as YYYY-MM-DD string."""
	return (dt or datetime.now()).date().isoformat()

def local_time_str(dt=None):
	"""Return local time of day as HH:MM:SS string."""
	return (dt or datetime.now()).strftime("%H:%M:%S")

def round_half_up(value) -> int:
	return int(math.floor(value + 0.5))

def minutes_to_seconds(minutes) -> int:
	return round_half_up(minutes * 60)

def fmt_clock(seconds: int) -> str:
	"""Format seconds as M:SS."""
	m = seconds // 60
	s = seconds % 60
	return f"{m}:{s:02}"
