from datetime import UTC, datetime, timedelta

import pytest

from domain.models.graph import PriceUpdateRecord, VertexId

BASE_TIME = datetime(2025, 11, 5, 10, 0, 0, tzinfo=UTC)


@pytest.fixture
def at():
    """Timestamp t seconds after a fixed base time."""

    def _at(t: int) -> datetime:
        return BASE_TIME + timedelta(seconds=t)

    return _at


@pytest.fixture
def make_quote(at):
    def _make_quote(t, exchange_a, currency_a, exchange_b, currency_b, forward, backward):
        return PriceUpdateRecord(
            timestamp=at(t),
            source=VertexId(exchange_a, currency_a),
            destination=VertexId(exchange_b, currency_b),
            forward_factor=forward,
            backward_factor=backward,
        )

    return _make_quote


@pytest.fixture
def usd_ex1():
    return VertexId('EX1', 'USD')


@pytest.fixture
def eur_ex1():
    return VertexId('EX1', 'EUR')


@pytest.fixture
def gbp_ex1():
    return VertexId('EX1', 'GBP')
