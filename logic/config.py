"""
Game configuration for TicTacToe.
Fixed board constants and debug settings.
"""


class GameConfig:
    """
    Configuration class for the game engine.
    The board size is fixed - only the debug settings are meant to change.
    """
    
    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    
    # Cells are stored row-major: index = row * BOARD_SIZE + col
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells
    
    # ==================== TURN SETTINGS ====================
    # X always moves first
    FIRST_MARK = "X"
    
    # ==================== DEBUG SETTINGS ====================
    # Print why a move was ignored (occupied cell, game over, ...)
    DEBUG_MODE = False
