"""
TicTacToe UI
A graphical interface for the game engine using Tkinter.

Shows:
- The 3x3 board (click a cell to place the current mark)
- Game status (whose turn, who won, or a draw)
- A strike-through line over the winning cells
- A reset button
"""

import tkinter as tk
from typing import Optional

from logic.game_engine import GameEngine
from logic.game_state import GameState, Mark
from logic.presentation import status_text, cell_at, cell_center, strike_line_coords


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    
    The UI keeps no game state of its own - it forwards clicks to the
    engine and redraws whatever state the engine hands back.
    """
    
    # ==================== LAYOUT ====================
    CELL_SIZE = 100
    BOARD_PX = CELL_SIZE * 3
    LINE_WIDTH = 6
    
    # ==================== COLORS ====================
    BG_COLOR = '#0ca192'
    GRID_COLOR = 'teal'
    STATUS_COLOR = '#333333'
    BUTTON_COLOR = '#3c4043'
    MARK_COLORS = {
        Mark.X: '#3c4043',
        Mark.O: '#ffffff',
    }
    
    def __init__(self, engine: Optional[GameEngine] = None):
        """
        Initialize the UI.
        
        Args:
            engine: Engine to drive. A new one is created if not given.
        """
        self.engine = engine or GameEngine()
        self._create_ui()
        self._render(self.engine.state)
    
    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=self.BG_COLOR)
        self.root.resizable(False, False)
        
        self.status_label = tk.Label(
            self.root,
            text="",
            font=('Segoe UI', 20, 'bold'),
            bg=self.BG_COLOR,
            fg=self.STATUS_COLOR
        )
        self.status_label.pack(pady=(20, 10))
        
        self.canvas = tk.Canvas(
            self.root,
            width=self.BOARD_PX,
            height=self.BOARD_PX,
            bg=self.BG_COLOR,
            highlightthickness=0
        )
        self.canvas.pack(padx=20)
        self.canvas.bind("<Button-1>", self._on_click)
        
        tk.Button(
            self.root,
            text="Reset Game",
            font=('Segoe UI', 14, 'bold'),
            bg=self.BUTTON_COLOR,
            fg='white',
            width=20,
            command=self._reset_game
        ).pack(pady=20)
        
        self.root.protocol("WM_DELETE_WINDOW", self._quit)
    
    def _on_click(self, event):
        """Map a click to a cell and play it."""
        position = cell_at(event.x, event.y, self.CELL_SIZE)
        if position is None:
            return
        self._render(self.engine.place_mark(position))
    
    def _reset_game(self):
        self._render(self.engine.reset())
    
    def _render(self, state: GameState):
        """Redraw the whole board from a state snapshot."""
        self.canvas.delete("all")
        cs = self.CELL_SIZE
        
        # Cell borders
        for position in range(len(state.board)):
            row, col = divmod(position, 3)
            self.canvas.create_rectangle(
                col * cs, row * cs, (col + 1) * cs, (row + 1) * cs,
                outline=self.GRID_COLOR, width=4
            )
        
        # Marks
        for position, mark in enumerate(state.board):
            if mark is None:
                continue
            x, y = cell_center(position, cs)
            self.canvas.create_text(
                x, y,
                text=mark.value,
                font=('Segoe UI', 40, 'bold'),
                fill=self.MARK_COLORS[mark]
            )
        
        # Strike-through, in the winner's color
        if state.winning_line is not None:
            self.canvas.create_line(
                *strike_line_coords(state.winning_line, cs),
                width=self.LINE_WIDTH,
                fill=self.MARK_COLORS[state.winner]
            )
        
        self.status_label.configure(text=status_text(state))
    
    def _quit(self):
        """Close the window."""
        self.root.destroy()
    
    def run(self):
        """Start the Tkinter main loop."""
        self.root.mainloop()
