from streams.helpers.board import Board, BOARD_SIZE
from streams.helpers.scoring import SCORE_TABLE, run_lengths, run_score

def test_eighteen_long_run_then_gap():
    b = Board.from_str("123456789ABCDEFGHI__")
    assert run_lengths(b) == [18]
    assert run_score(b) == 100

def test_full_ascending_board_scores_max():
    assert run_score(Board.from_str("123456789ABCDEFGHIJK")) == 300

def test_descent_splits_runs():
    # 5 6 | 2 3 4 | 1 ...
    b = Board.from_str("56234" + "1" + "_" * 14)
    assert run_lengths(b) == [2, 3, 1]
    assert run_score(b) == 1 + 3 + 0

def test_equal_values_continue_a_run():
    b = Board.from_str("BB" + "_" * 18)
    assert run_lengths(b) == [2]

def test_wildcard_continues_run_and_keeps_previous_value():
    # 5 ★ 6 -> one run of 3; 9 ★ 3 -> ★ extends, 3 breaks
    assert run_lengths(Board.from_str("5★6" + "_" * 17)) == [3]
    assert run_lengths(Board.from_str("9★3" + "_" * 17)) == [2, 1]

def test_empty_cells_break_runs():
    assert run_lengths(Board.from_str("12_34" + "_" * 15)) == [2, 2]
    assert run_score(Board.empty()) == 0

def test_wildcard_without_previous_value_breaks():
    # first cell, and right after an empty cell
    assert run_lengths(Board.from_str("★1" + "_" * 18)) == [1]
    assert run_score(Board.from_str("★1" + "_" * 18)) == 0
    assert run_lengths(Board.from_str("5_★6" + "_" * 16)) == [1, 1]
    assert run_lengths(Board.from_str("★_12" + "_" * 16)) == [2]

def test_score_table_covers_every_run_length():
    assert len(SCORE_TABLE) == BOARD_SIZE + 1
    assert SCORE_TABLE[0] == 0 and SCORE_TABLE[BOARD_SIZE] == 300
