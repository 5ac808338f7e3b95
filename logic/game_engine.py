"""
Game engine for TicTacToe.
The single owner of the game state: place marks, evaluate, reset.
"""

from typing import Optional, List, Tuple
from .config import GameConfig
from .game_state import GameState, Outcome
from .move_validator import MoveValidator
from .win_checker import evaluate, Line


class GameEngine:
    """
    Holds the board, the turn and the outcome, and applies the rules.
    
    Game flow:
    1. The UI calls place_mark(position) when a cell is tapped
    2. Illegal moves are ignored - the state is left untouched
    3. Legal moves place the current mark and re-evaluate the board
    4. The turn passes to the other mark unless the game just ended
    5. reset() starts a fresh game at any time
    
    Every read hands out a copy, so the caller can never change the
    engine's state behind its back.
    """
    
    def __init__(self, debug: Optional[bool] = None):
        """
        Initialize the engine with a fresh game.
        
        Args:
            debug: Print why moves are ignored. Defaults to GameConfig.DEBUG_MODE.
        """
        self.debug = GameConfig.DEBUG_MODE if debug is None else debug
        self.validator = MoveValidator()
        self._state = GameState()
    
    @property
    def state(self) -> GameState:
        """Snapshot of the current state."""
        return self._state.copy()
    
    @property
    def move_count(self) -> int:
        return sum(1 for cell in self._state.board if cell is not None)
    
    def get_valid_moves(self) -> List[int]:
        return self.validator.get_valid_moves(self._state)
    
    def evaluate(self) -> Tuple[Outcome, Optional[Line]]:
        """Outcome and winning line of the current board."""
        return evaluate(self._state.board)
    
    def place_mark(self, position: int) -> GameState:
        """
        Place the current turn's mark at the given position.
        
        Out-of-range positions, occupied cells and moves after the game
        ended are no-ops, never errors.
        
        Args:
            position: Cell index (0-8), row-major.
            
        Returns:
            Snapshot of the state after the move.
        """
        result = self.validator.validate_move(self._state, position)
        if not result.is_valid:
            if self.debug:
                print(f"Ignoring move: {result.error_message}")
            return self.state
        
        state = self._state
        mark = state.turn
        state.board[position] = mark
        state.outcome, state.winning_line = evaluate(state.board)
        
        if not state.outcome.is_over:
            state.turn = mark.opposite()
        
        if self.debug:
            print(f"{mark.value} -> {position} ({state.outcome.status.value})")
        
        return self.state
    
    def reset(self) -> GameState:
        """Throw away the current game and start a fresh one."""
        self._state = GameState()
        
        if self.debug:
            print("Game reset!")
        
        return self.state
