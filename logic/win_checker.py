"""
Win checker for TicTacToe.
Checks if a mark has won or if the game is a draw.
"""

from typing import Optional, List, Sequence, Tuple
from .game_state import GameState, Mark, Outcome, CELL_COUNT


Line = Tuple[int, int, int]

# All possible winning lines, as board indices.
# Checked in this order - the first complete line wins.
WINNING_LINES: List[Line] = [
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
]


def _check_line(board: Sequence[Optional[Mark]], line: Line) -> Optional[Mark]:
    """Return the mark filling all three cells of the line, or None."""
    a, b, c = line
    if board[a] is not None and board[a] == board[b] == board[c]:
        return board[a]
    return None


def evaluate(board: Sequence[Optional[Mark]]) -> Tuple[Outcome, Optional[Line]]:
    """
    Work out the outcome of a board from scratch.
    
    Args:
        board: 9 cells, row-major, None for empty.
        
    Returns:
        (outcome, winning_line). winning_line is None unless the outcome is WON.
        
    Raises:
        ValueError: if the board does not have exactly 9 cells.
    """
    if len(board) != CELL_COUNT:
        raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(board)}")
    
    for line in WINNING_LINES:
        mark = _check_line(board, line)
        if mark is not None:
            return Outcome.won(mark), line
    
    if all(cell is not None for cell in board):
        return Outcome.draw(), None
    
    return Outcome.in_progress(), None


class WinChecker:
    """
    Checks for win conditions in TicTacToe.
    
    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """
    
    WINNING_LINES = WINNING_LINES
    
    def check_winner(self, game_state: GameState) -> Optional[Mark]:
        """
        Check if there's a winner.
        
        Args:
            game_state: The current game state.
            
        Returns:
            The winning Mark, or None if no winner yet.
        """
        outcome, _ = evaluate(game_state.board)
        return outcome.winner
    
    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a draw.
        
        A draw occurs when all cells are filled AND there is no winner.
        """
        outcome, _ = evaluate(game_state.board)
        return outcome == Outcome.draw()
    
    def get_winning_line(self, game_state: GameState) -> Optional[Line]:
        """Get the winning line if there is one."""
        _, line = evaluate(game_state.board)
        return line
    
    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with the outcome and winning line.
        
        Args:
            game_state: The game state to update.
            
        Returns:
            Updated game state.
        """
        game_state.outcome, game_state.winning_line = evaluate(game_state.board)
        return game_state
