"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, CELL_COUNT


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.
    
    Rules, checked in this order:
    1. Position must be on the board (0-8)
    2. Can only place on empty cells
    3. Game must not be over
    """
    
    def validate_move(self, game_state: GameState, position: int) -> ValidationResult:
        """
        Validate a move.
        
        Args:
            game_state: Current game state.
            position: Cell index to place the mark on (0-8).
            
        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass, but True/False are not positions
        if not isinstance(position, int) or isinstance(position, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position!r}. Must be an integer."
            )
        
        # Check if position is in valid range
        if not (0 <= position < CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {position}. Must be 0-{CELL_COUNT - 1}."
            )
        
        # Check if cell is empty
        occupant = game_state.board[position]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {position} is already occupied by {occupant.value}"
            )
        
        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )
        
        return ValidationResult(is_valid=True)
    
    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current turn.
        
        Returns:
            List of valid positions, empty once the game is over.
        """
        if game_state.is_game_over:
            return []
        
        return game_state.get_empty_cells()
