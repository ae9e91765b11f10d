import logging
from collections import defaultdict

from domain.models.graph import VertexId

logger = logging.getLogger(__name__)


class VertexRegistry:
	"""Maps (exchange, currency) identities to dense, never-recycled indices."""

	def __init__(self):
		self._indices: dict[VertexId, int] = {}
		self._vertices: list[VertexId] = []
		self._by_currency: dict[str, list[int]] = defaultdict(list)

	def __len__(self) -> int:
		return len(self._vertices)

	def __contains__(self, vertex: object) -> bool:
		return vertex in self._indices

	def get_or_create(self, vertex: VertexId) -> tuple[int, bool]:
		"""Return (index, created); created is True when the registry grew."""
		index = self._indices.get(vertex)
		if index is not None:
			return index, False

		index = len(self._vertices)
		self._indices[vertex] = index
		self._vertices.append(vertex)
		self._by_currency[vertex.currency].append(index)
		logger.debug(f'Registered vertex {vertex} at index {index}')
		return index, True

	def lookup(self, vertex: VertexId) -> int | None:
		return self._indices.get(vertex)

	def vertex_at(self, index: int) -> VertexId:
		return self._vertices[index]

	def indices_for_currency(self, currency: str) -> list[int]:
		return list(self._by_currency.get(currency, ()))

	@property
	def vertices(self) -> list[VertexId]:
		return list(self._vertices)
