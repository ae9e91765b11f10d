from pydantic import ValidationError

from cli.schemas import PriceUpdateLine, RateRequestLine
from config.settings import Settings
from domain.exceptions.graph import RecordValidationError
from domain.models.graph import PriceUpdateRecord, RateQuery
from domain.validation import ensure_distinct_endpoints

QUERY_TOKEN = 'EXCHANGE_RATE_REQUEST'

# <timestamp> <exchange> <source_ccy> <dest_ccy> <forward> <backward>
SAME_EXCHANGE_UPDATE_TOKENS = 6
# <timestamp> <exchange_a> <ccy_a> <exchange_b> <ccy_b> <forward> <backward>
CROSS_EXCHANGE_UPDATE_TOKENS = 7
# EXCHANGE_RATE_REQUEST <src_exchange> <src_ccy> <dst_exchange> <dst_ccy>
QUERY_TOKENS = 5


class LineParseError(RecordValidationError):
	pass


class LineParser:
	def __init__(self, max_round_trip: float = 1.0, datetime_format: str | None = None):
		self.context = {'max_round_trip': max_round_trip, 'datetime_format': datetime_format}

	@classmethod
	def from_settings(cls, settings: Settings) -> 'LineParser':
		return cls(
			max_round_trip=settings.MAX_QUOTE_ROUND_TRIP,
			datetime_format=settings.DATETIME_FORMAT,
		)

	def parse(self, line: str) -> PriceUpdateRecord | RateQuery | None:
		"""Returns None for blank and comment lines."""
		tokens = line.split()
		if not tokens or tokens[0].startswith('#'):
			return None

		if tokens[0] == QUERY_TOKEN:
			return self._parse_query(tokens)
		return self._parse_update(tokens)

	def _parse_query(self, tokens: list[str]) -> RateQuery:
		if len(tokens) != QUERY_TOKENS:
			raise LineParseError(
				f'{QUERY_TOKEN} expects {QUERY_TOKENS - 1} fields, got {len(tokens) - 1}'
			)

		fields = dict(
			zip(
				('source_exchange', 'source_currency', 'destination_exchange', 'destination_currency'),
				tokens[1:],
				strict=True,
			)
		)
		query = self._validate(RateRequestLine, fields).to_query()
		ensure_distinct_endpoints(query.source, query.destination)
		return query

	def _parse_update(self, tokens: list[str]) -> PriceUpdateRecord:
		if len(tokens) == SAME_EXCHANGE_UPDATE_TOKENS:
			timestamp, exchange, source_currency, destination_currency, forward, backward = tokens
			source_exchange = destination_exchange = exchange
		elif len(tokens) == CROSS_EXCHANGE_UPDATE_TOKENS:
			(
				timestamp,
				source_exchange,
				source_currency,
				destination_exchange,
				destination_currency,
				forward,
				backward,
			) = tokens
		else:
			raise LineParseError('Input is neither a price update nor an exchange rate request')

		record = self._validate(
			PriceUpdateLine,
			{
				'timestamp': timestamp,
				'source_exchange': source_exchange,
				'source_currency': source_currency,
				'destination_exchange': destination_exchange,
				'destination_currency': destination_currency,
				'forward_factor': forward,
				'backward_factor': backward,
			},
		).to_record()
		ensure_distinct_endpoints(record.source, record.destination)
		return record

	def _validate(self, model, fields: dict):
		try:
			return model.model_validate(fields, context=self.context)
		except ValidationError as e:
			problems = '; '.join(
				f"{'.'.join(str(p) for p in err['loc']) or 'line'}: {err['msg']}" for err in e.errors()
			)
			raise LineParseError(f'Invalid {model.__name__}: {problems}') from e
