from .board_state import (
    Act,
    Action,
    BoardState,
    legal_actions,
    apply_action,
    is_terminal,
)
from .render import render_board, render_palette, render_values, best_cell

__all__ = [
    "Act",
    "Action",
    "BoardState",
    "legal_actions",
    "apply_action",
    "is_terminal",
    "render_board",
    "render_palette",
    "render_values",
    "best_cell",
]
