from domain.models.graph import VertexId


class ExchangeRateGraphError(Exception):
	pass


class RecordValidationError(ExchangeRateGraphError):
	pass


class SelfLoopError(RecordValidationError):
	def __init__(self, vertex: VertexId):
		self.vertex = vertex
		super().__init__(f'Both sides of the record name the same vertex {vertex}')


class InvalidFactorError(RecordValidationError):
	pass


class InvalidTimestampError(RecordValidationError):
	pass


class QueryError(ExchangeRateGraphError):
	pass


class UnknownVertexError(QueryError):
	def __init__(self, vertices: list[VertexId]):
		self.vertices = vertices
		names = ', '.join(str(v) for v in vertices)
		super().__init__(f'Unknown vertex: {names}')


class NoPathError(QueryError):
	def __init__(self, source: VertexId, destination: VertexId):
		self.source = source
		self.destination = destination
		super().__init__(f'No conversion path from {source} to {destination}')


class GraphStateError(ExchangeRateGraphError):
	pass
