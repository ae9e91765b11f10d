# nosec B101


from domain.models.graph import VertexId
from infrastructure.graph import VertexRegistry


def test_get_or_create_assigns_sequential_indices():
    registry = VertexRegistry()

    assert registry.get_or_create(VertexId('EX1', 'USD')) == (0, True)
    assert registry.get_or_create(VertexId('EX1', 'EUR')) == (1, True)
    assert registry.get_or_create(VertexId('EX2', 'USD')) == (2, True)
    assert len(registry) == 3


def test_get_or_create_returns_existing_index():
    registry = VertexRegistry()
    registry.get_or_create(VertexId('EX1', 'USD'))
    registry.get_or_create(VertexId('EX1', 'EUR'))

    assert registry.get_or_create(VertexId('EX1', 'USD')) == (0, False)
    assert len(registry) == 2


def test_lookup_unknown_vertex_returns_none():
    registry = VertexRegistry()
    registry.get_or_create(VertexId('EX1', 'USD'))

    assert registry.lookup(VertexId('EX1', 'USD')) == 0
    assert registry.lookup(VertexId('EX2', 'USD')) is None
    assert VertexId('EX2', 'USD') not in registry


def test_lookup_does_not_register():
    registry = VertexRegistry()

    registry.lookup(VertexId('EX1', 'USD'))

    assert len(registry) == 0


def test_vertex_at_and_vertices_follow_arrival_order():
    registry = VertexRegistry()
    vertices = [VertexId('EX1', 'USD'), VertexId('EX1', 'EUR'), VertexId('EX2', 'GBP')]
    for vertex in vertices:
        registry.get_or_create(vertex)

    assert registry.vertices == vertices
    assert registry.vertex_at(2) == VertexId('EX2', 'GBP')


def test_indices_for_currency_groups_across_exchanges():
    registry = VertexRegistry()
    registry.get_or_create(VertexId('EX1', 'USD'))
    registry.get_or_create(VertexId('EX1', 'EUR'))
    registry.get_or_create(VertexId('EX2', 'USD'))

    assert registry.indices_for_currency('USD') == [0, 2]
    assert registry.indices_for_currency('EUR') == [1]
    assert registry.indices_for_currency('JPY') == []
