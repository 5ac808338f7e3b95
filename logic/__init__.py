"""
Logic module for TicTacToe.
Handles game state, rules and the engine that ties them together.
"""

from .config import GameConfig
from .game_state import GameState, GameStatus, Mark, Outcome
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, WINNING_LINES, evaluate
from .game_engine import GameEngine
