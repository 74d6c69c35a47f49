import json
import logging

from BackEnd.core.config import HISTORY_KEY
from BackEnd.core.models import SessionRecord

logger = logging.getLogger(__name__)


def decode_history(raw):
	"""Parse the stored JSON array (str or bytes). Anything malformed decodes to an empty history."""
	if raw is None:
		return []
	try:
		data = json.loads(raw)
		if not isinstance(data, list):
			raise ValueError("history is not a list")
		return [SessionRecord.from_dict(item) for item in data]
	except (ValueError, RecursionError) as exc:
		# JSONDecodeError and UnicodeDecodeError are ValueErrors; deep nesting overflows the decoder
		logger.warning("Discarding malformed session history: %s", exc)
		return []


def encode_history(records):
	return json.dumps([r.to_dict() for r in records])


class SessionStore:
	"""Owns the ordered list of completed study sessions.

	Every mutation rewrites the whole list under a single key of the
	backing key-value store; ``clear`` removes the key entirely.
	"""

	def __init__(self, kv, key=HISTORY_KEY):
		self.kv = kv
		self.key = key
		self._records = self.load()

	@property
	def records(self):
		return tuple(self._records)

	def __len__(self):
		return len(self._records)

	def load(self):
		"""Read history from the backing store; [] if absent or malformed."""
		return decode_history(self.kv.get_bytes(self.key))

	def save(self, records=None):
		"""Replace the persisted history with ``records`` (default: current history)."""
		if records is not None:
			self._records = list(records)
		self.kv.set(self.key, encode_history(self._records))

	def append(self, record):
		self._records.append(record)
		self.save()
		logger.info("Saved session %s %s (%d min)", record.date, record.time, record.duration)
		return record

	def delete_at(self, index):
		if not 0 <= index < len(self._records):
			raise IndexError(f"no session at position {index}")
		removed = self._records.pop(index)
		self.save()
		logger.info("Deleted session %d (%s %s)", index, removed.date, removed.time)
		return removed

	def clear(self):
		self._records = []
		self.kv.remove(self.key)
		logger.info("Cleared all session history")
