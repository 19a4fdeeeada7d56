from hexkernel import HexCoord, HexShape, HexTransform, hex_range

L_SHAPE = [HexCoord(0, 0), HexCoord(1, 0), HexCoord(2, 0), HexCoord(2, -1)]


def test_shape_keeps_order_and_duplicates():
    shape = HexShape(L_SHAPE)
    shape.push(HexCoord(0, 0))
    assert len(shape) == 5
    assert list(shape) == L_SHAPE + [HexCoord(0, 0)]
    assert shape.get(4) == HexCoord(0, 0)


def test_shape_get_out_of_range_is_none():
    shape = HexShape(L_SHAPE)
    assert shape.get(4) is None
    assert shape.get(-1) is None
    assert HexShape().get(0) is None


def test_shape_contains():
    shape = HexShape(L_SHAPE)
    assert shape.contains(HexCoord(2, -1))
    assert HexCoord(1, 0) in shape
    assert HexCoord(5, 5) not in shape
    assert "not a coord" not in shape


def test_view_get_applies_transform():
    shape = HexShape(L_SHAPE)
    t = HexTransform(HexCoord(3, -4), 2)
    view = shape.transformed(t)
    assert len(view) == len(shape)
    for i in range(len(shape)):
        assert view.get(i) == t.apply_to(shape.get(i))
    assert view.get(len(shape)) is None
    assert list(view) == [t.apply_to(c) for c in shape]


def test_view_contains_uses_inverse():
    shape = HexShape(L_SHAPE)
    t = HexTransform(HexCoord(-1, 2), 5)
    view = shape.transformed(t)
    for c in shape:
        assert view.contains(t.apply_to(c))
        assert t.apply_to(c) in view
    for c in hex_range(4):
        assert view.contains(c) == shape.contains(t.inverse().apply_to(c))


def test_translated_and_rotated_views():
    shape = HexShape(L_SHAPE)
    offset = HexCoord(2, 2)
    assert list(shape.translated(offset)) == [c + offset for c in L_SHAPE]
    assert list(shape.rotated(1)) == [c.rotate_forward() for c in L_SHAPE]


def test_chained_views_compose_without_copying():
    shape = HexShape(L_SHAPE)
    view = shape.rotated(2).translated(HexCoord(1, 0)).transformed(HexTransform.from_rotation(-1))
    assert view.shape is shape
    expected = HexTransform.from_rotation(-1) * HexTransform.from_translation(HexCoord(1, 0)) * HexTransform.from_rotation(2)
    assert view.transform == expected
    for i, c in enumerate(shape):
        assert view.get(i) == expected.apply_to(c)


def test_view_sees_later_pushes():
    shape = HexShape(L_SHAPE)
    view = shape.translated(HexCoord(0, 1))
    shape.push(HexCoord(-5, 5))
    assert len(view) == 5
    assert view.get(4) == HexCoord(-5, 6)
