import math
from datetime import datetime
from numbers import Real

from domain.exceptions.graph import InvalidFactorError, InvalidTimestampError, SelfLoopError
from domain.models.graph import VertexId

# Epoch seconds beyond this no longer fit in int64 microseconds.
MAX_EPOCH_SECONDS = 9_000_000_000_000


def ensure_distinct_endpoints(source: VertexId, destination: VertexId) -> None:
	"""Reject records and queries that name the same vertex on both sides."""
	if source == destination:
		raise SelfLoopError(source)


def validate_factor(value: float, name: str) -> float:
	if not math.isfinite(value):
		raise InvalidFactorError(f'{name} must be a finite number, got {value}')
	if value <= 0:
		raise InvalidFactorError(f'{name} must be positive, got {value}')
	return value


def validate_timestamp(value):
	"""Accept a datetime or a finite number of seconds since the Unix epoch."""
	if isinstance(value, datetime):
		return value
	if isinstance(value, bool) or not isinstance(value, Real):
		raise InvalidTimestampError(
			f'timestamp must be a datetime or epoch seconds, got {type(value).__name__}'
		)
	if not math.isfinite(value) or abs(value) > MAX_EPOCH_SECONDS:
		raise InvalidTimestampError(f'timestamp out of range: {value}')
	return value
