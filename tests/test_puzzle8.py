import pytest

from eightpuzzle.domains.puzzle8 import (
    GOAL,
    blank_index,
    format_rows,
    inversions,
    is_solvable,
    make_state,
    make_unsolvable_variant,
    parse_board,
    parse_row,
    scramble,
    successors,
)

CENTER = (1, 2, 3, 4, 0, 5, 6, 7, 8)

@pytest.mark.parametrize("blank, expected", [
    (0, 2), (2, 2), (6, 2), (8, 2),   # corners
    (1, 3), (3, 3), (5, 3), (7, 3),   # edges
    (4, 4),                           # center
])
def test_successor_count_by_blank_position(blank, expected):
    tiles = [t for t in range(1, 9)]
    tiles.insert(blank, 0)
    assert len(successors(tuple(tiles))) == expected

def test_successor_order_up_down_left_right():
    up, down, left, right = successors(CENTER)
    assert up == (1, 0, 3, 4, 2, 5, 6, 7, 8)
    assert down == (1, 2, 3, 4, 7, 5, 6, 0, 8)
    assert left == (1, 2, 3, 0, 4, 5, 6, 7, 8)
    assert right == (1, 2, 3, 4, 5, 0, 6, 7, 8)

def test_no_wraparound_across_rows():
    # blank at the end of the first row must not move to the start of the second
    s = (1, 2, 0, 3, 4, 5, 6, 7, 8)
    assert sorted(blank_index(n) for n in successors(s)) == [1, 5]

def test_goal_is_solvable():
    assert inversions(GOAL) == 0
    assert is_solvable(GOAL)

def test_single_swap_is_unsolvable():
    s = (1, 2, 3, 4, 5, 6, 8, 7, 0)
    assert inversions(s) == 1
    assert not is_solvable(s)

def test_blank_ignored_in_inversions():
    assert inversions((0, 1, 2, 3, 4, 5, 6, 7, 8)) == 0
    assert inversions((8, 7, 6, 5, 4, 3, 2, 1, 0)) == 28

def test_make_state_rejects_bad_boards():
    with pytest.raises(ValueError):
        make_state([1, 2, 3])
    with pytest.raises(ValueError):
        make_state([1, 1, 2, 3, 4, 5, 6, 7, 8])
    with pytest.raises(ValueError):
        make_state([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert make_state([1, 2, 3, 4, 5, 6, 7, 8, 0]) == GOAL

def test_parse_row_drops_non_integers():
    assert parse_row("4 x 5  6") == [4, 5, 6]
    assert parse_row("") == []

def test_parse_board():
    assert parse_board(["1 2 3", "4 0 6", "7 5 8"]) == (1, 2, 3, 4, 0, 6, 7, 5, 8)
    with pytest.raises(ValueError):
        parse_board(["1 2", "3 4 5", "6 7 8 0"])
    with pytest.raises(ValueError):
        parse_board(["1 2 3", "4 5 6"])

def test_format_rows():
    assert format_rows(GOAL) == ["[1, 2, 3]", "[4, 5, 6]", "[7, 8, 0]"]

def test_scramble_is_deterministic_and_solvable():
    for seed in range(20):
        s = scramble(15, seed)
        assert s == scramble(15, seed)
        assert sorted(s) == list(range(9))
        assert is_solvable(s)

def test_unsolvable_variant_flips_parity():
    for seed in range(10):
        s = scramble(10, seed)
        assert not is_solvable(make_unsolvable_variant(s))
