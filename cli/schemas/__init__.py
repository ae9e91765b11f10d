from .requests import PriceUpdateLine, RateRequestLine

__all__ = ['PriceUpdateLine', 'RateRequestLine']
