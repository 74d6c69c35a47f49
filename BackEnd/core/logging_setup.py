"""Application-wide logging written to the per-user data dir."""

import logging
import logging.handlers

from BackEnd.core.paths import log_path

_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_ROOT = "BackEnd"


def configure_logging(level=logging.INFO):
	"""Attach a rotating file handler to the backend and frontend loggers (once)."""
	handler = None
	for name in (_ROOT, "FrontEnd"):
		logger = logging.getLogger(name)
		logger.setLevel(level)
		if any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers):
			continue
		if handler is None:
			handler = logging.handlers.RotatingFileHandler(
				log_path(),
				maxBytes=_MAX_BYTES,
				backupCount=_BACKUP_COUNT,
				encoding="utf-8",
			)
			handler.setFormatter(
				logging.Formatter(
					fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
					datefmt="%Y-%m-%dT%H:%M:%S",
				)
			)
		logger.addHandler(handler)
	return logging.getLogger(_ROOT)
