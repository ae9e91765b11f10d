from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	APP_NAME: str = 'Exchange Rate Graph'

	# Logging
	LOG_LEVEL: str = 'INFO'
	LOG_DIRECTORY: str | None = None

	# Graph
	LINK_SAME_CURRENCY: bool = True
	GRAPH_INITIAL_CAPACITY: int = Field(default=16, gt=0)

	# Input
	MAX_QUOTE_ROUND_TRIP: float = Field(default=1.0, gt=0)
	DATETIME_FORMAT: str | None = None

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
