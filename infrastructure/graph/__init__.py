from .rate_graph import NO_EDGE, RateGraph
from .registry import VertexRegistry

__all__ = ['NO_EDGE', 'RateGraph', 'VertexRegistry']
