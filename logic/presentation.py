"""
Helpers for whatever draws the game.
Turns engine state into text and screen coordinates - no UI toolkit needed.
"""

from typing import Optional, Tuple
from .game_state import GameState, BOARD_SIZE


def status_text(state: GameState) -> str:
    """
    The one-line status shown above the board.
    
    Returns:
        "Turn: X", "X Wins!" or "It's a Draw!".
    """
    if state.winner is not None:
        return f"{state.winner.value} Wins!"
    if state.is_draw:
        return "It's a Draw!"
    return f"Turn: {state.turn.value}"


def cell_at(x: float, y: float, cell_size: float) -> Optional[int]:
    """
    Map a click/tap at pixel (x, y) to a board position.
    
    Args:
        x, y: Pixel coordinates relative to the board's top-left corner.
        cell_size: Width/height of one cell in pixels.
        
    Returns:
        Position 0-8 (row-major), or None if the point is off the board.
    """
    board_px = cell_size * BOARD_SIZE
    if not (0 <= x < board_px and 0 <= y < board_px):
        return None
    
    row = int(y // cell_size)
    col = int(x // cell_size)
    return row * BOARD_SIZE + col


def cell_center(position: int, cell_size: float) -> Tuple[float, float]:
    """Pixel center of a board position."""
    row, col = divmod(position, BOARD_SIZE)
    return (col * cell_size + cell_size / 2, row * cell_size + cell_size / 2)


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def strike_line_coords(
    winning_line: Tuple[int, int, int],
    cell_size: float
) -> Tuple[float, float, float, float]:
    """
    Endpoints of the strike-through line drawn over a winning line.
    
    The line runs through the centers of the three cells and reaches
    the board edge on both ends.
    
    Returns:
        (x1, y1, x2, y2) in pixels.
    """
    x1, y1 = cell_center(winning_line[0], cell_size)
    x2, y2 = cell_center(winning_line[-1], cell_size)
    
    # Push both ends out by half a cell along the line's direction
    half = cell_size / 2
    dx, dy = _sign(x2 - x1), _sign(y2 - y1)
    
    return (x1 - dx * half, y1 - dy * half, x2 + dx * half, y2 + dy * half)
