"""
Main entry point for TicTacToe.

This script ties together:
- Logic (board, win checking, minimax opponent, game session)
- Display (OpenCV board rendering)
- UI (Tkinter window)

Run this script to play TicTacToe against the computer or a friend!
"""

import cv2
import time
from typing import Callable, List, Optional, Tuple

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer

# Logic imports
from logic.arena import play_random_games
from logic.config import GameConfig
from logic.opponent import Difficulty
from logic.session import GameMode, GameSession


class TicTacToeWindow:
    """
    TicTacToe in a plain OpenCV window.

    Controls:
    - Click a cell to place your mark
    - 'n' new game, 'r' reset scores, 'm' toggle mode
    - '1' / '2' / '3' easy / medium / hard
    - 's' save screenshot, 'q' quit
    """

    DIFFICULTY_KEYS = {
        ord('1'): Difficulty.EASY,
        ord('2'): Difficulty.MEDIUM,
        ord('3'): Difficulty.HARD,
    }

    def __init__(
        self,
        mode=None,
        difficulty=None,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """
        Initialize the window.

        Args:
            mode: Starting game mode.
            difficulty: Starting opponent difficulty.
            game_config: Game configuration. Uses defaults if not provided.
            display_config: Display configuration. Uses defaults if not provided.
        """
        self.display_config = display_config or DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)

        # Opponent turns waiting for their delay: (due time, callback)
        self.pending: List[Tuple[float, Callable[[], None]]] = []

        self.session = GameSession(
            mode=mode,
            difficulty=difficulty,
            config=game_config,
            scheduler=self._schedule
        )
        self.is_running = False

    def _schedule(self, delay_ms: int, callback: Callable[[], None]):
        self.pending.append((time.monotonic() + delay_ms / 1000.0, callback))

    def _run_due_callbacks(self):
        """Fire opponent turns whose delay has passed."""
        now = time.monotonic()
        due = [callback for when, callback in self.pending if when <= now]
        self.pending = [(when, callback) for when, callback in self.pending if when > now]

        for callback in due:
            callback()

    def _on_mouse(self, event, x, y, flags, param):
        if event != cv2.EVENT_LBUTTONDOWN:
            return

        index = self.renderer.cell_at(x, y)
        if index is not None:
            self.session.cell_selected(index)

    def start(self):
        """Open the window and play until 'q' is pressed."""
        print("\nStarting TicTacToe...")
        print("Click a cell to play. Keys: n=new game, r=reset scores, m=mode,")
        print("1/2/3=difficulty, s=screenshot, q=quit\n")

        cv2.namedWindow(self.display_config.WINDOW_NAME)
        cv2.setMouseCallback(self.display_config.WINDOW_NAME, self._on_mouse)

        self.is_running = True
        while self.is_running:
            self._run_due_callbacks()

            frame = self.renderer.render(self.session)
            cv2.imshow(self.display_config.WINDOW_NAME, frame)

            # Handle key presses
            key = cv2.waitKey(15) & 0xFF
            self._handle_key(key, frame)

        cv2.destroyAllWindows()

    def _handle_key(self, key: int, frame):
        if key == ord('q'):
            print("\nGame quit by user.")
            self.is_running = False
        elif key == ord('n'):
            if self.session.pending_ticket is not None:
                print(f"Cancelled opponent turn {self.session.pending_ticket}")
            self.session.request_new_game()
        elif key == ord('r'):
            self.session.request_score_reset()
        elif key == ord('m'):
            if self.session.mode == GameMode.VS_OPPONENT:
                new_mode = GameMode.TWO_PLAYER
            else:
                new_mode = GameMode.VS_OPPONENT
            self.session.set_mode(new_mode)
            print(f"Game mode set to: {new_mode.value}")
        elif key in self.DIFFICULTY_KEYS:
            level = self.DIFFICULTY_KEYS[key]
            self.session.set_difficulty(level)
            print(f"Difficulty set to: {level.value}")
        elif key == ord('s'):
            filename = f"{self.display_config.SCREENSHOT_PREFIX}_{int(time.time())}.png"
            cv2.imwrite(filename, frame)
            print(f"Saved: {filename}")


def run_simulation(games: int, difficulty: str, seed: Optional[int]) -> int:
    """
    Play random moves against the opponent and print the tally.

    Returns:
        Exit code: 0 if the opponent never lost on hard, else 1.
    """
    print("\n" + "="*60)
    print(f"   Simulating {games} games vs {difficulty.upper()} opponent")
    print("="*60)

    start = time.time()
    result = play_random_games(games, Difficulty(difficulty), seed=seed)
    elapsed = time.time() - start

    print(f"  {result.summary()}")
    print(f"  Opponent loss rate: {result.opponent_loss_rate:.1%}")
    print(f"  Took {elapsed:.2f}s")
    print("="*60 + "\n")

    if difficulty == Difficulty.HARD.value and result.scores.side_a > 0:
        print("⚠ Hard opponent lost a game!")
        return 1
    return 0


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in a plain OpenCV window instead of the Tkinter UI"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameConfig.DEFAULT_MODE,
        help="ai = play the computer, friend = two players"
    )
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="Opponent difficulty"
    )
    parser.add_argument(
        "--simulate",
        type=int,
        metavar="GAMES",
        help="Play GAMES random games against the opponent and print the score"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for simulations"
    )

    args = parser.parse_args()

    if args.simulate is not None:
        return run_simulation(args.simulate, args.difficulty, args.seed)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")

        game_config = GameConfig()
        game_config.DEFAULT_MODE = args.mode
        game_config.DEFAULT_DIFFICULTY = args.difficulty

        ui = TicTacToeUI(game_config=game_config)
        ui.run()
        return 0

    # OpenCV window mode (--no-ui)
    window = TicTacToeWindow(mode=args.mode, difficulty=args.difficulty)

    try:
        window.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
