import pytest

from streams.engine.board_state import Act, Action, BoardState, apply_action, is_terminal, legal_actions
from streams.engine.render import best_cell, render_board, render_palette, render_values
from streams.helpers.cards import WILDCARD
from streams.helpers.errors import StateError

def test_select_then_place():
    s = BoardState.initial()
    s1 = apply_action(s, Action(Act.SELECT, card=7))
    assert s1.selected == 7
    s2 = apply_action(s1, Action(Act.PLACE, pos=4))
    assert s2.board.cells[4] == 7
    assert s2.selected is None
    assert s2.deck.count(7) == 0
    # old states untouched
    assert s.board.cells[4] == 0 and s1.board.cells[4] == 0

def test_select_exhausted_card_rejected():
    s = BoardState.from_str("★" + "_" * 19)
    with pytest.raises(StateError):
        apply_action(s, Action(Act.SELECT, card=WILDCARD))

def test_place_without_selection_rejected():
    with pytest.raises(StateError):
        apply_action(BoardState.initial(), Action(Act.PLACE, pos=0))

def test_clear_returns_card_to_deck():
    s = BoardState.from_str("9" + "_" * 19)
    assert s.deck.count(9) == 0
    s2 = apply_action(s, Action(Act.CLEAR, pos=0))
    assert s2.deck.count(9) == 1

def test_reset_and_terminal():
    s = BoardState.from_str("123456789ABCDEFGHIJK")
    assert is_terminal(s)
    acts = legal_actions(s)
    assert all(a.act in (Act.RESET, Act.CLEAR) for a in acts)
    assert apply_action(s, Action(Act.RESET)) == BoardState.initial()

def test_legal_place_actions_follow_empty_cells():
    s = apply_action(BoardState.from_str("12" + "_" * 18), Action(Act.SELECT, card=3))
    places = [a.pos for a in legal_actions(s) if a.act == Act.PLACE]
    assert places == list(range(2, 20))

def test_render_text():
    s = BoardState.from_str("1_5_A" + "_" * 15)
    grid = render_board(s)
    assert len(grid.splitlines()) == 4
    assert "10" in grid
    pal = render_palette(apply_action(s, Action(Act.SELECT, card=11)))
    assert "[Bx2]" in pal
    vals = [float("nan")] + [float(i) for i in range(1, 20)]
    assert best_cell(vals) == 19
    assert "*" in render_values(vals, best=19)
