import sqlite3

from BackEnd.core.paths import db_path

SCHEMA = """
CREATE TABLE IF NOT EXISTS app_state (
	key TEXT PRIMARY KEY,
	value TEXT
);
"""


class KeyValueStore:
	"""Named string entries in a SQLite app_state table."""

	def __init__(self, path=None):
		self.path = str(path or db_path())
		self.conn = sqlite3.connect(self.path)
		self.conn.row_factory = sqlite3.Row
		self.conn.executescript(SCHEMA)

	def get_bytes(self, key):
		"""Stored value as raw bytes, whatever encoding it was written in."""
		row = self.conn.execute(
			"SELECT CAST(value AS BLOB) AS value FROM app_state WHERE key=?",
			(key,),
		).fetchone()
		return bytes(row["value"]) if row and row["value"] is not None else None

	def get(self, key):
		raw = self.get_bytes(key)
		return raw.decode("utf-8") if raw is not None else None

	def set(self, key, value):
		with self.conn:
			self.conn.execute(
				"""
				INSERT INTO app_state(key, value) VALUES(?, ?)
				ON CONFLICT(key) DO UPDATE SET value=excluded.value
				""",
				(key, value),
			)

	def remove(self, key):
		with self.conn:
			self.conn.execute("DELETE FROM app_state WHERE key=?", (key,))

	def close(self):
		self.conn.close()
