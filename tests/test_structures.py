from slide2048.structures import BoardElement, Position, Tile


def test_position_negation_flips_both_parts():
    assert -Position(1, 0) == Position(-1, 0)
    assert -Position(0, -1) == Position(0, 1)


def test_position_double_negation_round_trip():
    p = Position(3, -7)
    assert -(-p) == p


def test_position_is_zero():
    assert Position(0, 0).is_zero is True
    assert Position(0, 1).is_zero is False
    assert Position(-1, 0).is_zero is False


def test_position_is_hashable_and_equal_by_value():
    assert len({Position(1, 2), Position(1, 2), Position(2, 1)}) == 2


def test_board_element_defaults():
    cell = BoardElement()
    assert cell.element == 0
    assert cell.is_merged is False


def test_tile_defaults_and_mutability():
    tile = Tile()
    assert (tile.pos, tile.max_pos, tile.value) == (0, 0, 0)
    assert tile.is_occupied is False
    tile.x += 5
    tile.value = 8
    assert tile.x == 5
    assert tile.value == 8