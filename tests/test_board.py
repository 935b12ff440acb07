import pytest

from streams.helpers.board import Board, BOARD_SIZE
from streams.helpers.cards import EMPTY, WILDCARD
from streams.helpers.errors import InputError, StateError

def test_board_string_roundtrip():
    s = "1_5_A_K_U_★_________"
    b = Board.from_str(s)
    assert b.to_str() == s
    assert b.cells[4] == 10
    assert b.cells[10] == WILDCARD

def test_wrong_length_is_input_error():
    with pytest.raises(InputError):
        Board.from_str("_" * 19)
    with pytest.raises(InputError):
        Board.from_str("_" * 21)

def test_unknown_character_is_input_error():
    with pytest.raises(InputError):
        Board.from_str("V" + "_" * 19)
    with pytest.raises(InputError):
        Board.from_str("0" + "_" * 19)

def test_place_returns_new_board():
    b = Board.empty()
    b2 = b.place(3, 7)
    assert b.cells[3] == EMPTY
    assert b2.cells[3] == 7
    assert b2.num_empty == BOARD_SIZE - 1
    assert 3 not in b2.empty_positions()

def test_place_on_occupied_cell_is_state_error():
    b = Board.empty().place(0, 5)
    with pytest.raises(StateError):
        b.place(0, 6)
    with pytest.raises(StateError):
        b.place(20, 6)

def test_complete_board():
    b = Board.from_str("123456789ABCDEFGHIJK")
    assert b.is_complete
    assert b.empty_positions() == []
    assert len(b.rows()) == 4 and len(b.rows()[0]) == 5
