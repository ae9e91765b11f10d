import logging
from datetime import UTC, datetime, timedelta

import numpy as np

from domain.exceptions.graph import GraphStateError

logger = logging.getLogger(__name__)

NO_EDGE = 0.0
NEVER_UPDATED = np.iinfo(np.int64).min
# Stamp for same-currency links: older than any real quote, so any quote replaces it.
LINKED = NEVER_UPDATED + 1

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def to_epoch_micros(timestamp: datetime | int | float) -> int:
	"""Naive datetimes are taken to be UTC; numbers are seconds since the epoch."""
	if isinstance(timestamp, datetime):
		if timestamp.tzinfo is None:
			timestamp = timestamp.replace(tzinfo=UTC)
		return (timestamp - _EPOCH) // timedelta(microseconds=1)
	return round(timestamp * 1_000_000)


def from_epoch_micros(micros: int) -> datetime:
	return _EPOCH + timedelta(microseconds=int(micros))


class RateGraph:
	"""
	Dense conversion-factor matrix plus a parallel matrix of last-update stamps.

	Both matrices are allocated with spare capacity that doubles on demand;
	only the leading size x size block is live. Cells outside the live block
	are kept initialised (no edge, 1.0 on the diagonal, never updated) so
	growing within capacity is just a size bump.
	"""

	def __init__(self, initial_capacity: int = 16):
		if initial_capacity <= 0:
			raise ValueError(f'initial_capacity must be positive, got {initial_capacity}')
		self._capacity = initial_capacity
		self._size = 0
		self._factors = self._new_factors(initial_capacity)
		self._last_updated = np.full((initial_capacity, initial_capacity), NEVER_UPDATED, dtype=np.int64)
		self.version = 0

	@staticmethod
	def _new_factors(capacity: int) -> np.ndarray:
		factors = np.full((capacity, capacity), NO_EDGE, dtype=np.float64)
		np.fill_diagonal(factors, 1.0)
		return factors

	@property
	def size(self) -> int:
		return self._size

	@property
	def capacity(self) -> int:
		return self._capacity

	def ensure_capacity(self, index: int) -> None:
		if index < 0:
			raise GraphStateError(f'Vertex index must be non-negative, got {index}')

		required = index + 1
		if required > self._capacity:
			self._grow(required)
		if required > self._size:
			self._size = required
			self.version += 1

	def _grow(self, required: int) -> None:
		capacity = self._capacity
		while capacity < required:
			capacity *= 2

		live = self._size
		factors = self._new_factors(capacity)
		factors[:live, :live] = self._factors[:live, :live]
		last_updated = np.full((capacity, capacity), NEVER_UPDATED, dtype=np.int64)
		last_updated[:live, :live] = self._last_updated[:live, :live]

		logger.debug(f'Rate graph capacity {self._capacity} -> {capacity}')
		self._factors = factors
		self._last_updated = last_updated
		self._capacity = capacity

	def _check_index(self, index: int) -> None:
		if not 0 <= index < self._size:
			raise GraphStateError(f'Vertex index {index} outside graph of size {self._size}')

	def _check_off_diagonal(self, i: int, j: int) -> None:
		self._check_index(i)
		self._check_index(j)
		if i == j:
			raise GraphStateError(f'Refusing to overwrite diagonal cell ({i}, {i})')

	def set_edge(self, i: int, j: int, factor: float, timestamp: datetime | int | float) -> bool:
		"""Write factor[i][j] unless an update at or after timestamp is already recorded."""
		self._check_off_diagonal(i, j)

		stamp = to_epoch_micros(timestamp)
		if stamp <= self._last_updated[i, j]:
			logger.debug(f'Stale write to ({i}, {j}) at {timestamp} ignored')
			return False

		self._factors[i, j] = factor
		self._last_updated[i, j] = stamp
		self.version += 1
		return True

	def set_link(self, i: int, j: int, factor: float) -> bool:
		"""Fill factor[i][j] with a synthetic edge if nothing has ever been written there."""
		self._check_off_diagonal(i, j)
		if self._last_updated[i, j] != NEVER_UPDATED:
			return False

		self._factors[i, j] = factor
		self._last_updated[i, j] = LINKED
		self.version += 1
		return True

	def factor(self, i: int, j: int) -> float:
		self._check_index(i)
		self._check_index(j)
		return float(self._factors[i, j])

	def last_updated(self, i: int, j: int) -> datetime | None:
		self._check_index(i)
		self._check_index(j)
		stamp = self._last_updated[i, j]
		if stamp in (NEVER_UPDATED, LINKED):
			return None
		return from_epoch_micros(stamp)

	def snapshot(self) -> np.ndarray:
		"""Copy of the live factor block; safe to mutate."""
		return self._factors[: self._size, : self._size].copy()
