"""
Main entry point for TicTacToe.

Two ways to play:
- Tkinter UI (default) - click cells, press "Reset Game"
- Console mode (--no-ui) - type a cell number, 'r' to reset, 'q' to quit
"""

from typing import Callable, Optional

from logic.game_engine import GameEngine
from logic.presentation import status_text


CONSOLE_HELP = "Enter a cell (0-8), 'r' to reset, 'q' to quit."


def play_console(
    engine: Optional[GameEngine] = None,
    input_fn: Callable[[str], str] = input
) -> GameEngine:
    """
    Play in the terminal until the user quits or input runs out.
    
    Args:
        engine: Engine to drive. A new one is created if not given.
        input_fn: Where to read commands from (swap out for tests).
        
    Returns:
        The engine, in whatever state the session left it.
    """
    engine = engine or GameEngine()
    
    print(CONSOLE_HELP)
    state = engine.state
    state.print_board()
    
    while True:
        try:
            command = input_fn(f"{status_text(state)} > ").strip().lower()
        except EOFError:
            break
        
        if command == 'q':
            break
        elif command == 'r':
            state = engine.reset()
        else:
            try:
                position = int(command)
            except ValueError:
                print(CONSOLE_HELP)
                continue
            # Out-of-range numbers go to the engine, which ignores them
            state = engine.place_mark(position)
        
        state.print_board()
    
    return engine


def main():
    """Main entry point."""
    import argparse
    
    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print why moves are ignored"
    )
    
    args = parser.parse_args()
    
    engine = GameEngine(debug=args.debug or None)
    
    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        TicTacToeUI(engine).run()
        return
    
    try:
        play_console(engine)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
