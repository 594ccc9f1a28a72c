from aocsolutions.direction import Direction, all_directions


def test_all_directions_covers_every_member_once():
    directions = all_directions()
    assert len(directions) == len(set(directions))
    assert set(directions) == set(Direction)


def test_all_directions_starts_with_straight_ones():
    directions = all_directions()
    assert directions[:4] == (
        Direction.RIGHT,
        Direction.LEFT,
        Direction.DOWN,
        Direction.UP,
    )


def test_offsets_are_distinct_unit_steps():
    offsets = [d.offset for d in all_directions()]
    assert len(set(offsets)) == 8
    assert all(max(abs(dx), abs(dy)) == 1 for dx, dy in offsets)


def test_offsets_cancel_out():
    offsets = [d.offset for d in all_directions()]
    assert sum(dx for dx, _ in offsets) == 0
    assert sum(dy for _, dy in offsets) == 0


def test_every_direction_has_an_opposite():
    offsets = {d.offset for d in all_directions()}
    assert all((-dx, -dy) in offsets for dx, dy in offsets)


def test_straight_offsets_in_order():
    offsets = [d.offset for d in all_directions()[:4]]
    assert offsets == [(1, 0), (-1, 0), (0, 1), (0, -1)]