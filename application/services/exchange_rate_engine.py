from application.services.rate_resolver import RateResolver
from application.services.update_processor import UpdateProcessor
from config.settings import Settings
from domain.models.graph import BestRate, PriceUpdateRecord, RateQuery
from infrastructure.graph import RateGraph, VertexRegistry


class ExchangeRateEngine:
	"""Entry point of the core: feed quotes in arrival order, then ask for best rates."""

	def __init__(self, link_same_currency: bool = True, initial_capacity: int = 16):
		self.registry = VertexRegistry()
		self.graph = RateGraph(initial_capacity=initial_capacity)
		self.update_processor = UpdateProcessor(
			self.registry, self.graph, link_same_currency=link_same_currency
		)
		self.rate_resolver = RateResolver(self.registry, self.graph)

	@classmethod
	def from_settings(cls, settings: Settings) -> 'ExchangeRateEngine':
		return cls(
			link_same_currency=settings.LINK_SAME_CURRENCY,
			initial_capacity=settings.GRAPH_INITIAL_CAPACITY,
		)

	@property
	def vertex_count(self) -> int:
		return len(self.registry)

	def apply_update(self, record: PriceUpdateRecord) -> bool:
		"""Returns True if either direction of the quote was fresh enough to apply."""
		forward, backward = self.update_processor.apply(record)
		return forward or backward

	def resolve_query(self, query: RateQuery) -> BestRate:
		return self.rate_resolver.best_rate(query.source, query.destination)
