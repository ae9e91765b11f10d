import logging

from domain.models.graph import PriceUpdateRecord
from domain.validation import ensure_distinct_endpoints, validate_factor, validate_timestamp
from infrastructure.graph import RateGraph, VertexRegistry

logger = logging.getLogger(__name__)

SAME_CURRENCY_FACTOR = 1.0


class UpdateProcessor:
	def __init__(self, registry: VertexRegistry, graph: RateGraph, link_same_currency: bool = True):
		self.registry = registry
		self.graph = graph
		self.link_same_currency = link_same_currency

	def apply(self, record: PriceUpdateRecord) -> tuple[bool, bool]:
		"""
		Apply one quote under the per-edge freshness gate.

		Returns whether the forward and backward writes were applied. A False
		entry means a newer (or equally new) quote already set that edge.
		"""
		ensure_distinct_endpoints(record.source, record.destination)
		validate_timestamp(record.timestamp)
		validate_factor(record.forward_factor, 'forward_factor')
		validate_factor(record.backward_factor, 'backward_factor')

		i, source_created = self.registry.get_or_create(record.source)
		j, destination_created = self.registry.get_or_create(record.destination)
		self.graph.ensure_capacity(max(i, j))

		forward = self.graph.set_edge(i, j, record.forward_factor, record.timestamp)
		backward = self.graph.set_edge(j, i, record.backward_factor, record.timestamp)

		if self.link_same_currency:
			self._link_same_currency(i)
			self._link_same_currency(j)

		if source_created or destination_created:
			logger.debug(f'Graph grew to {len(self.registry)} vertices')
		return forward, backward

	def _link_same_currency(self, index: int) -> None:
		vertex = self.registry.vertex_at(index)
		for other in self.registry.indices_for_currency(vertex.currency):
			if other == index:
				continue
			self.graph.set_link(index, other, SAME_CURRENCY_FACTOR)
			self.graph.set_link(other, index, SAME_CURRENCY_FACTOR)
