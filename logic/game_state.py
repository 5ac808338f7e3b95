"""
Game state for TicTacToe.
Tracks the board, whose turn it is, and the outcome of the game.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field
from .config import GameConfig


BOARD_SIZE = GameConfig.BOARD_SIZE
CELL_COUNT = GameConfig.CELL_COUNT


class Mark(Enum):
    """The two marks a player can place."""
    X = "X"
    O = "O"
    
    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    The result of evaluating a board.
    
    `winner` is only set when status is WON.
    """
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Optional[Mark] = None
    
    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)
    
    @classmethod
    def won(cls, mark: Mark) -> "Outcome":
        return cls(GameStatus.WON, mark)
    
    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)
    
    @property
    def is_over(self) -> bool:
        """True once the game is won or drawn."""
        return self.status != GameStatus.IN_PROGRESS


def empty_board() -> List[Optional[Mark]]:
    """A fresh board - 9 empty cells."""
    return [None] * CELL_COUNT


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.
    
    Tracks:
    - The board (9 cells, row-major, None means empty)
    - Whose turn it is
    - The outcome (in progress, won, draw)
    - The winning line, if someone has won
    """
    
    # The board - index = row * 3 + col
    board: List[Optional[Mark]] = field(default_factory=empty_board)
    
    # Mark that plays next
    turn: Mark = field(default_factory=lambda: Mark(GameConfig.FIRST_MARK))
    
    # Derived from the board after every placement
    outcome: Outcome = field(default_factory=Outcome.in_progress)
    
    # The three cells that won the game
    winning_line: Optional[Tuple[int, int, int]] = None
    
    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over
    
    @property
    def winner(self) -> Optional[Mark]:
        return self.outcome.winner
    
    @property
    def is_draw(self) -> bool:
        return self.outcome.status == GameStatus.DRAW
    
    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.
        
        Returns:
            List of position indices (0-8).
        """
        return [i for i, cell in enumerate(self.board) if cell is None]
    
    def copy(self) -> "GameState":
        """Create a copy of the game state that shares nothing mutable."""
        return GameState(
            board=list(self.board),
            turn=self.turn,
            outcome=self.outcome,
            winning_line=self.winning_line
        )
    
    def print_board(self):
        """Print the board to console."""
        print("\n┌───┬───┬───┐")
        
        for row in range(BOARD_SIZE):
            row_str = "│"
            for col in range(BOARD_SIZE):
                position = row * BOARD_SIZE + col
                cell = self.board[position]
                # Show the index on empty cells so the player knows what to type
                row_str += f" {cell.value if cell else position} │"
            print(row_str)
            
            if row < BOARD_SIZE - 1:
                print("├───┼───┼───┤")
        
        print("└───┴───┴───┘")
        
        # Print game info
        if self.is_game_over:
            if self.winner:
                print(f"\n🏆 {self.winner.value} WINS! (line {list(self.winning_line)})")
            else:
                print("\n🤝 It's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.turn.value}")
