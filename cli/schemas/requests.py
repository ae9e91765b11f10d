from datetime import UTC, datetime
from typing import Self

from pydantic import AwareDatetime, BaseModel, Field, ValidationInfo, field_validator, model_validator

from domain.models.graph import PriceUpdateRecord, RateQuery, VertexId


class PriceUpdateLine(BaseModel):
	timestamp: AwareDatetime
	source_exchange: str = Field(..., min_length=1)
	source_currency: str = Field(..., min_length=1)
	destination_exchange: str = Field(..., min_length=1)
	destination_currency: str = Field(..., min_length=1)
	forward_factor: float = Field(..., gt=0, allow_inf_nan=False)
	backward_factor: float = Field(..., gt=0, allow_inf_nan=False)

	model_config = {'frozen': True}

	@field_validator('timestamp', mode='before')
	@classmethod
	def parse_with_configured_format(cls, v, info: ValidationInfo):
		datetime_format = (info.context or {}).get('datetime_format')
		if datetime_format and isinstance(v, str):
			parsed = datetime.strptime(v, datetime_format)
			# formats without %z are read as UTC
			if parsed.tzinfo is None:
				parsed = parsed.replace(tzinfo=UTC)
			return parsed
		return v

	@field_validator(
		'source_exchange', 'source_currency', 'destination_exchange', 'destination_currency'
	)
	@classmethod
	def uppercase(cls, v: str):
		return v.upper()

	@model_validator(mode='after')
	def quote_is_not_an_arbitrage(self, info: ValidationInfo) -> Self:
		max_round_trip = (info.context or {}).get('max_round_trip', 1.0)
		round_trip = self.forward_factor * self.backward_factor
		if round_trip > max_round_trip:
			raise ValueError(
				f'forward_factor * backward_factor = {round_trip} exceeds {max_round_trip}'
			)
		return self

	def to_record(self) -> PriceUpdateRecord:
		return PriceUpdateRecord(
			timestamp=self.timestamp,
			source=VertexId(self.source_exchange, self.source_currency),
			destination=VertexId(self.destination_exchange, self.destination_currency),
			forward_factor=self.forward_factor,
			backward_factor=self.backward_factor,
		)


class RateRequestLine(BaseModel):
	source_exchange: str = Field(..., min_length=1)
	source_currency: str = Field(..., min_length=1)
	destination_exchange: str = Field(..., min_length=1)
	destination_currency: str = Field(..., min_length=1)

	model_config = {'frozen': True}

	@field_validator(
		'source_exchange', 'source_currency', 'destination_exchange', 'destination_currency'
	)
	@classmethod
	def uppercase(cls, v: str):
		return v.upper()

	def to_query(self) -> RateQuery:
		return RateQuery(
			source=VertexId(self.source_exchange, self.source_currency),
			destination=VertexId(self.destination_exchange, self.destination_currency),
		)
