import pytest

from hexkernel import HexCoord, HexTransform, hex_edges, hex_range, hex_vertices


@pytest.mark.parametrize("radius", [0, 1, 2, 5])
def test_range_covers_hexagon(radius):
    cells = list(hex_range(radius))
    assert len(cells) == 3 * radius * radius + 3 * radius + 1
    assert len(set(cells)) == len(cells)
    for c in cells:
        assert HexCoord.hex_distance(HexCoord.ZERO, c) <= radius


def test_range_order():
    cells = list(hex_range(1))
    assert cells == [
        HexCoord(-1, 0), HexCoord(-1, 1),
        HexCoord(0, -1), HexCoord(0, 0), HexCoord(0, 1),
        HexCoord(1, -1), HexCoord(1, 0),
    ]


def test_range_under_transform():
    t = HexTransform(HexCoord(5, -2), 2)
    cells = list(hex_range(2, t))
    assert cells == [t.apply_to(c) for c in hex_range(2)]
    assert {HexCoord.hex_distance(HexCoord(5, -2), c) for c in cells} == {0, 1, 2}


def test_range_is_single_pass_and_restartable():
    gen = hex_range(1)
    assert len(list(gen)) == 7
    assert list(gen) == []
    assert len(list(hex_range(1))) == 7


def test_range_rejects_negative_radius():
    with pytest.raises(ValueError):
        list(hex_range(-1))


def test_vertex_and_edge_sequences():
    c = HexCoord(-2, 1)
    assert list(hex_vertices(c)) == [c.get_vertex(i) for i in range(6)]
    assert list(hex_edges(c)) == [c.get_half_edge(i) for i in range(6)]
