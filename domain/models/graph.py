from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class VertexId:
	"""A currency held on a specific exchange."""

	exchange: str
	currency: str

	def __str__(self) -> str:
		return f'<{self.exchange}, {self.currency}>'


@dataclass(frozen=True)
class PriceUpdateRecord:
	"""A two-sided quote between two vertices.

	Produces the directed edges source -> destination (forward_factor) and
	destination -> source (backward_factor), both stamped with timestamp.
	"""

	timestamp: datetime | int | float  # numbers are seconds since the Unix epoch
	source: VertexId
	destination: VertexId
	forward_factor: float
	backward_factor: float


@dataclass(frozen=True)
class RateQuery:
	source: VertexId
	destination: VertexId


@dataclass(frozen=True)
class BestRate:
	source: VertexId
	destination: VertexId
	rate: float
	path: tuple[VertexId, ...]  # source ... destination, inclusive; empty if it could not be rebuilt
