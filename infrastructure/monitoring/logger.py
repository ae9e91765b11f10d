import json
import logging
import sys
import traceback
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from config.settings import Settings
from domain.models.graph import VertexId


class CustomJSONEncoder(json.JSONEncoder):
	def default(self, o):
		if isinstance(o, datetime):
			return o.isoformat()
		if isinstance(o, VertexId):
			return {'exchange': o.exchange, 'currency': o.currency}
		return super().default(o)


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now().isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, cls=CustomJSONEncoder)


class AppLogger:
	"""
	Centralized logging configuration.

	Console output always goes to stderr so stdout stays reserved for query
	results. When log_directory is given, JSON files are written to
	<dir>/system/app.log (everything) and <dir>/errors/errors.log (warnings+).
	"""

	def __init__(
		self,
		log_directory: str | None = None,
		console_level: str = 'INFO',
		file_level: str = 'DEBUG',
		max_file_size: int = 10 * 1024 * 1024,
		backup_count: int = 5,
	):
		self.log_directory = Path(log_directory) if log_directory else None
		self.console_level = getattr(logging, console_level.upper())
		self.file_level = getattr(logging, file_level.upper())
		self.max_file_size = max_file_size
		self.backup_count = backup_count

		self._setup_logging()

	def _setup_logging(self) -> None:
		root_logger = logging.getLogger()
		root_logger.handlers.clear()
		root_logger.setLevel(logging.DEBUG)

		self._setup_console_handler(root_logger)
		if self.log_directory is not None:
			self.log_directory.mkdir(parents=True, exist_ok=True)
			self._setup_main_file_handler(root_logger)
			self._setup_error_file_handler(root_logger)

	def _setup_console_handler(self, logger: logging.Logger) -> None:
		console_handler = logging.StreamHandler(sys.stderr)
		console_handler.setLevel(self.console_level)
		console_format = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'
		console_formatter = logging.Formatter(console_format, datefmt='%H:%M:%S')
		console_handler.setFormatter(console_formatter)
		logger.addHandler(console_handler)

	def _rotating_handler(self, subdirectory: str, filename: str) -> RotatingFileHandler:
		log_dir = self.log_directory / subdirectory
		log_dir.mkdir(exist_ok=True)
		handler = RotatingFileHandler(
			log_dir / filename,
			maxBytes=self.max_file_size,
			backupCount=self.backup_count,
			encoding='utf-8',
		)
		handler.setFormatter(JSONFormatter())
		return handler

	def _setup_main_file_handler(self, logger: logging.Logger) -> None:
		file_handler = self._rotating_handler('system', 'app.log')
		file_handler.setLevel(self.file_level)
		logger.addHandler(file_handler)

	def _setup_error_file_handler(self, logger: logging.Logger) -> None:
		error_handler = self._rotating_handler('errors', 'errors.log')
		error_handler.setLevel(logging.WARNING)
		logger.addHandler(error_handler)


def setup_logging(settings: Settings, console_level: str | None = None) -> AppLogger:
	return AppLogger(
		log_directory=settings.LOG_DIRECTORY,
		console_level=console_level or settings.LOG_LEVEL,
	)
