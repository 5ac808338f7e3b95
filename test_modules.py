"""
Tests for the TicTacToe modules.
Run with pytest, or run this file directly for a summary.
"""

import random
import sys
from itertools import permutations

from logic.game_engine import GameEngine
from logic.game_state import GameState, GameStatus, Mark, Outcome
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker, WINNING_LINES, evaluate
from logic.presentation import status_text, cell_at, strike_line_coords
from main import play_console


X, O = Mark.X, Mark.O


def play(engine, *positions):
    """Place marks in order and return the final state."""
    state = engine.state
    for position in positions:
        state = engine.place_mark(position)
    return state


def scripted(*lines):
    """An input() stand-in that replays lines, then hits end of input."""
    remaining = list(lines)
    
    def input_fn(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)
    
    return input_fn


# ==================== GAME STATE ====================

def test_fresh_state():
    state = GameEngine().state
    assert state.board == [None] * 9
    assert state.turn == X
    assert state.outcome == Outcome.in_progress()
    assert state.winning_line is None
    assert not state.is_game_over


def test_state_snapshot_is_detached():
    engine = GameEngine()
    snapshot = engine.place_mark(4)
    snapshot.board[0] = O
    assert engine.state.board[0] is None
    assert engine.state.board[4] == X


def test_get_empty_cells():
    engine = GameEngine()
    state = play(engine, 0, 8)
    assert state.get_empty_cells() == [1, 2, 3, 4, 5, 6, 7]
    assert engine.get_valid_moves() == [1, 2, 3, 4, 5, 6, 7]


# ==================== WIN CHECKER ====================

def test_winning_lines_fixed_order():
    assert WINNING_LINES == [
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    ]


def test_every_line_wins():
    for line in WINNING_LINES:
        board = [None] * 9
        for position in line:
            board[position] = O
        outcome, winning_line = evaluate(board)
        assert outcome == Outcome.won(O)
        assert winning_line == line


def test_evaluate_in_progress_and_draw():
    assert evaluate([None] * 9) == (Outcome.in_progress(), None)
    
    full = [X, O, X,
            X, O, O,
            O, X, X]
    assert evaluate(full) == (Outcome.draw(), None)


def test_evaluate_reports_first_of_several_lines():
    # Not reachable in play, but must not blow up
    board = [X, X, X,
             X, None, None,
             X, None, None]
    outcome, line = evaluate(board)
    assert outcome.winner == X
    assert line == (0, 1, 2)


def test_evaluate_rejects_bad_board():
    try:
        evaluate([None] * 8)
    except ValueError:
        pass
    else:
        raise AssertionError("8-cell board was accepted")


def test_win_checker_updates_state():
    state = GameState(board=[O, O, O, X, X, None, X, None, None])
    checker = WinChecker()
    assert checker.check_winner(state) == O
    assert not checker.check_draw(state)
    assert checker.get_winning_line(state) == (0, 1, 2)
    
    checker.update_game_state(state)
    assert state.outcome == Outcome.won(O)
    assert state.winning_line == (0, 1, 2)


# ==================== MOVE VALIDATOR ====================

def test_validator_checks_in_order():
    validator = MoveValidator()
    
    # Out of range wins over everything else
    finished = GameState(board=[X, X, X, O, O, None, None, None, None],
                         outcome=Outcome.won(X), winning_line=(0, 1, 2))
    result = validator.validate_move(finished, 9)
    assert not result.is_valid
    assert "Invalid position" in result.error_message
    
    # Occupied wins over game over
    result = validator.validate_move(finished, 0)
    assert "occupied" in result.error_message
    
    result = validator.validate_move(finished, 5)
    assert result.error_message == "Game is already over!"
    
    assert validator.validate_move(GameState(), 4).is_valid
    assert validator.get_valid_moves(finished) == []


def test_validator_rejects_non_integers():
    validator = MoveValidator()
    assert not validator.validate_move(GameState(), True).is_valid
    assert not validator.validate_move(GameState(), "4").is_valid
    assert not validator.validate_move(GameState(), 4.0).is_valid


# ==================== ENGINE ====================

def test_row_win_scenario():
    state = play(GameEngine(), 0, 4, 1, 3, 2)
    assert state.outcome == Outcome.won(X)
    assert state.outcome.status == GameStatus.WON
    assert state.winning_line == (0, 1, 2)
    # Turn stays with the winner
    assert state.turn == X


def test_draw_scenario():
    state = play(GameEngine(), 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert state.board == [X, O, X,
                           X, O, O,
                           O, X, X]
    assert state.outcome == Outcome.draw()
    assert state.is_draw
    assert state.winning_line is None


def test_out_of_range_is_noop():
    engine = GameEngine()
    play(engine, 4)
    before = engine.state
    for position in (9, -1, 100, -100):
        assert engine.place_mark(position) == before


def test_occupied_cell_is_noop():
    engine = GameEngine()
    before = play(engine, 4, 0)
    assert engine.place_mark(4) == before
    assert engine.place_mark(0) == before
    assert engine.move_count == 2


def test_moves_after_game_over_are_noop():
    engine = GameEngine()
    finished = play(engine, 0, 4, 1, 3, 2)
    for position in engine.state.get_empty_cells():
        assert engine.place_mark(position) == finished


def test_turn_alternates():
    engine = GameEngine()
    for position in (4, 0, 8, 2, 1):
        placed = engine.state.turn
        state = engine.place_mark(position)
        assert state.board[position] == placed
        assert not state.is_game_over
        assert state.turn == placed.opposite()


def test_full_sequences_always_finish():
    # All 9! orders is too slow to play out, so sample them
    rng = random.Random(1234)
    orders = [tuple(rng.sample(range(9), 9)) for _ in range(500)]
    orders.append(tuple(range(9)))
    for order in orders:
        state = play(GameEngine(), *order)
        assert state.is_game_over, order
        assert state.outcome.status in (GameStatus.WON, GameStatus.DRAW)


def test_first_move_positions():
    for position in range(9):
        state = GameEngine().place_mark(position)
        assert state.board[position] == X
        assert state.turn == O


def test_no_win_before_five_moves():
    for order in permutations(range(9), 4):
        assert not play(GameEngine(), *order).is_game_over


def test_reset_from_any_state():
    fresh = GameEngine().state
    for moves in [(), (4,), (0, 4, 1, 3, 2), (0, 1, 2, 4, 3, 5, 7, 6, 8)]:
        engine = GameEngine()
        play(engine, *moves)
        assert engine.reset() == fresh
        assert engine.state == fresh
        assert engine.move_count == 0


def test_engine_evaluate_matches_state():
    engine = GameEngine()
    state = play(engine, 2, 0, 4, 1, 6)
    assert engine.evaluate() == (state.outcome, state.winning_line)
    assert state.winning_line == (2, 4, 6)


# ==================== PRESENTATION ====================

def test_status_text():
    engine = GameEngine()
    assert status_text(engine.state) == "Turn: X"
    assert status_text(engine.place_mark(0)) == "Turn: O"
    assert status_text(play(engine, 4, 1, 3, 2)) == "X Wins!"
    
    engine.reset()
    assert status_text(play(engine, 0, 1, 2, 4, 3, 5, 7, 6, 8)) == "It's a Draw!"


def test_cell_at():
    assert cell_at(0, 0, 100) == 0
    assert cell_at(150, 50, 100) == 1
    assert cell_at(299, 299, 100) == 8
    assert cell_at(50, 150, 100) == 3
    assert cell_at(300, 50, 100) is None
    assert cell_at(-1, 50, 100) is None


def test_strike_line_coords():
    assert strike_line_coords((0, 1, 2), 100) == (0, 50, 300, 50)
    assert strike_line_coords((1, 4, 7), 100) == (150, 0, 150, 300)
    assert strike_line_coords((0, 4, 8), 100) == (0, 0, 300, 300)
    assert strike_line_coords((2, 4, 6), 100) == (300, 0, 0, 300)


# ==================== CONSOLE ====================

def test_console_plays_and_quits():
    engine = play_console(input_fn=scripted("0", "4", "1", "3", "2", "q", "5"))
    state = engine.state
    assert state.outcome == Outcome.won(X)
    assert state.board[5] is None


def test_console_ignores_junk_and_resets():
    engine = play_console(input_fn=scripted("4", "hello", "", "-1", "9", "r", "8"))
    state = engine.state
    assert state.board[4] is None
    assert state.board[8] == X
    assert state.turn == O


def run_all_tests():
    """Run all tests and print a summary."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)
    
    tests = [
        (name, func) for name, func in sorted(globals().items())
        if name.startswith("test_") and callable(func)
    ]
    
    failed = []
    for name, func in tests:
        try:
            func()
            print(f"  ✓ {name}")
        except Exception as e:
            print(f"  ✗ {name}: {e!r}")
            failed.append(name)
    
    print("="*60)
    
    if not failed:
        print(f"\n🎉 All {len(tests)} tests passed!\n")
        return 0
    else:
        print(f"\n⚠ {len(failed)} of {len(tests)} tests failed.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
