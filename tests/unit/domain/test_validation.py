# nosec B101


import math
from datetime import UTC, datetime

import pytest

from domain.exceptions.graph import InvalidFactorError, InvalidTimestampError, RecordValidationError, SelfLoopError
from domain.models.graph import VertexId
from domain.validation import ensure_distinct_endpoints, validate_factor, validate_timestamp


def test_distinct_endpoints_pass():
    ensure_distinct_endpoints(VertexId('EX1', 'USD'), VertexId('EX1', 'EUR'))


def test_same_currency_on_different_exchanges_is_not_a_self_loop():
    ensure_distinct_endpoints(VertexId('EX1', 'USD'), VertexId('EX2', 'USD'))


def test_identical_endpoints_raise_self_loop():
    vertex = VertexId('EX1', 'USD')

    with pytest.raises(SelfLoopError) as exc_info:
        ensure_distinct_endpoints(vertex, VertexId('EX1', 'USD'))

    assert exc_info.value.vertex == vertex
    assert '<EX1, USD>' in str(exc_info.value)
    assert isinstance(exc_info.value, RecordValidationError)


def test_validate_factor_returns_value():
    assert validate_factor(0.9, 'forward_factor') == 0.9


@pytest.mark.parametrize('value', [0.0, -1.0, math.inf, math.nan])
def test_validate_factor_rejects_non_positive_or_non_finite(value):
    with pytest.raises(InvalidFactorError) as exc_info:
        validate_factor(value, 'forward_factor')

    assert 'forward_factor' in str(exc_info.value)


@pytest.mark.parametrize('value', [datetime(2025, 11, 5, tzinfo=UTC), 1, 1.5, 0])
def test_validate_timestamp_accepts_datetimes_and_epoch_seconds(value):
    assert validate_timestamp(value) == value


@pytest.mark.parametrize('value', ['1', None, True, math.inf, math.nan, 1e20])
def test_validate_timestamp_rejects_unorderable_or_out_of_range(value):
    with pytest.raises(InvalidTimestampError):
        validate_timestamp(value)
