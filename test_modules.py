"""
Smoke tests for the TicTacToe modules.
Run this to verify all components are wired together before playing.
"""

import sys


def test_game_config():
    """Test game configuration."""
    from logic.config import GameConfig
    config = GameConfig()
    print(f"  Default mode: {config.DEFAULT_MODE}")
    print(f"  Default difficulty: {config.DEFAULT_DIFFICULTY}")
    print(f"  Opponent delay: {config.OPPONENT_DELAY_MS}ms")
    assert config.OPPONENT_DELAY_MS == 300
    assert config.MEDIUM_RANDOM_THRESHOLD == 0.5


def test_game_logic():
    """Test game logic components working together."""
    from logic import (
        Board, Difficulty, GameSession, Mark, MinimaxSearch,
        OpponentPolicy, WinChecker
    )

    session = GameSession(difficulty=Difficulty.HARD)
    session.cell_selected(4)
    move = session.complete_opponent_turn()
    print(f"  Opponent answered center with: {move}")
    assert move == 0

    checker = WinChecker()
    assert checker.check_winner(session.board) is None

    search = MinimaxSearch(Mark.O)
    policy = OpponentPolicy(Mark.O, search=search)
    assert policy.choose_move(Board(), Difficulty.HARD, 0.3) == search.best_move(Board())


def test_display():
    """Test rendering a session."""
    from display import BoardRenderer
    from logic import GameSession

    image = BoardRenderer().render(GameSession())
    print(f"  Frame shape: {image.shape}")
    assert image.shape[2] == 3


def test_simulation_cli():
    """Test the --simulate entry point."""
    from main import run_simulation
    assert run_simulation(20, "hard", seed=1) == 0


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "Display": test_display,
        "Simulation": test_simulation_cli,
    }

    results = {}
    for name, test in tests.items():
        print(f"\n=== Testing {name} ===")
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")

    print("="*60)

    if all(results.values()):
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    print("\n⚠ Some tests failed. Check the errors above.\n")
    return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
