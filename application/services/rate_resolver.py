import logging
from collections.abc import Sequence

import numpy as np

from domain.exceptions.graph import GraphStateError, NoPathError, UnknownVertexError
from domain.models.graph import BestRate, VertexId
from domain.validation import ensure_distinct_endpoints
from infrastructure.graph import NO_EDGE, RateGraph, VertexRegistry

logger = logging.getLogger(__name__)

NO_SUCCESSOR = -1


def max_product_closure(
	factors: np.ndarray, order: Sequence[int] | None = None
) -> tuple[np.ndarray, np.ndarray]:
	"""
	All-pairs best conversion factors (Floyd-Warshall maximising products).

	Works on a copy of factors. Alongside the closed matrix it returns a
	successor matrix: successors[i, j] is the vertex after i on the best
	path to j, or NO_SUCCESSOR when j is unreachable. The diagonal is never
	improved, so a profitable cycle cannot feed back into other entries
	through a self-step.

	order is the sequence of intermediate vertices; any permutation of
	range(n) yields the same matrix.
	"""
	closed = np.array(factors, dtype=np.float64, copy=True)
	n = closed.shape[0]
	if closed.shape != (n, n):
		raise GraphStateError(f'Factor matrix must be square, got {closed.shape}')

	if order is None:
		order = range(n)
	elif sorted(order) != list(range(n)):
		raise ValueError(f'order must be a permutation of 0..{n - 1}')

	successors = np.where(closed > NO_EDGE, np.arange(n)[np.newaxis, :], NO_SUCCESSOR)
	diagonal = np.eye(n, dtype=bool)

	for k in order:
		# Row k and column k are fixed during step k since closed[k, k] stays 1.0
		via_k = np.outer(closed[:, k], closed[k, :])
		improved = via_k > closed
		improved[diagonal] = False
		if not improved.any():
			continue
		closed[improved] = via_k[improved]
		successors = np.where(improved, successors[:, k][:, np.newaxis], successors)

	return closed, successors


class RateResolver:
	def __init__(self, registry: VertexRegistry, graph: RateGraph):
		self.registry = registry
		self.graph = graph
		self._cached_version: int | None = None
		self._closed: np.ndarray | None = None
		self._successors: np.ndarray | None = None

	def best_rate(self, source: VertexId, destination: VertexId) -> BestRate:
		i = self.registry.lookup(source)
		j = self.registry.lookup(destination)
		unknown = [v for v, index in ((source, i), (destination, j)) if index is None]
		if unknown:
			raise UnknownVertexError(unknown)

		ensure_distinct_endpoints(source, destination)

		closed, successors = self._closure()
		rate = float(closed[i, j])
		if rate <= NO_EDGE:
			raise NoPathError(source, destination)

		return BestRate(
			source=source,
			destination=destination,
			rate=rate,
			path=self._path(successors, i, j),
		)

	def _closure(self) -> tuple[np.ndarray, np.ndarray]:
		if self.graph.size != len(self.registry):
			raise GraphStateError(
				f'Graph size {self.graph.size} does not match {len(self.registry)} registered vertices'
			)

		if self._cached_version != self.graph.version or self._closed is None:
			logger.debug(f'Computing best-rate closure over {self.graph.size} vertices')
			self._closed, self._successors = max_product_closure(self.graph.snapshot())
			self._cached_version = self.graph.version

		return self._closed, self._successors

	def _path(self, successors: np.ndarray, i: int, j: int) -> tuple[VertexId, ...]:
		path = [i]
		current = i
		while current != j:
			current = int(successors[current, j])
			if current == NO_SUCCESSOR or current in path:
				logger.warning(
					f'Could not rebuild best path {self.registry.vertex_at(i)} -> '
					f'{self.registry.vertex_at(j)}; the rates contain a profitable cycle. '
					f'Reporting the rate without a path'
				)
				return ()
			path.append(current)

		return tuple(self.registry.vertex_at(index) for index in path)
