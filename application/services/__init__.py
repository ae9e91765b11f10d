from .exchange_rate_engine import ExchangeRateEngine
from .rate_resolver import RateResolver, max_product_closure
from .update_processor import UpdateProcessor

__all__ = ['ExchangeRateEngine', 'RateResolver', 'UpdateProcessor', 'max_product_closure']
