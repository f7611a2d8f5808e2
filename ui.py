"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The board (drawn with OpenCV, clicks select a cell)
- Game mode selection (vs AI / vs Friend)
- Difficulty level selection
- Score, game status and "AI is thinking..." indicator
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

# Display imports
from display.config import DisplayConfig
from display.board_renderer import BoardRenderer

# Logic imports
from logic.config import GameConfig
from logic.opponent import Difficulty
from logic.session import GameMode, GameSession


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        game_config: Optional[GameConfig] = None,
        display_config: Optional[DisplayConfig] = None
    ):
        """Initialize the UI."""
        self.game_config = game_config or GameConfig()
        self.display_config = display_config or DisplayConfig()
        self.renderer = BoardRenderer(self.display_config)

        # Create UI first: the session schedules opponent turns on root.after
        self._create_ui()

        self.session = GameSession(
            config=self.game_config,
            scheduler=self._schedule
        )
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 20, 'bold'))

        # Left panel - mode, score, difficulty
        left_frame = ttk.Frame(main_frame, width=260)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))

        ttk.Label(left_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 10))

        # Game mode section
        ttk.Label(left_frame, text="Game Mode").pack()
        mode_frame = ttk.Frame(left_frame)
        mode_frame.pack(pady=5)

        self.mode_buttons = {}
        for text, mode in (("vs AI", GameMode.VS_OPPONENT), ("vs Friend", GameMode.TWO_PLAYER)):
            btn = tk.Button(
                mode_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=9,
                command=lambda m=mode: self._set_mode(m)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons[mode] = btn

        # Score section
        ttk.Separator(left_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(left_frame, text="Score").pack()

        score_frame = ttk.Frame(left_frame)
        score_frame.pack(pady=5)

        self.score_values = {}
        self.score_names = {}
        for column, (key, color) in enumerate(
            (("side_a", '#60a5fa'), ("draws", '#a1a1aa'), ("side_b", '#f87171'))
        ):
            value = ttk.Label(score_frame, text="0", style='Score.TLabel', foreground=color)
            value.grid(row=0, column=column, padx=12)
            name = ttk.Label(score_frame, text="")
            name.grid(row=1, column=column, padx=12)
            self.score_values[key] = value
            self.score_names[key] = name
        self.score_names["draws"].configure(text="Draws")

        # Difficulty section (vs AI only)
        self.difficulty_frame = ttk.Frame(left_frame)
        self.difficulty_frame.pack(fill=tk.X)

        ttk.Separator(self.difficulty_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        ttk.Label(self.difficulty_frame, text="Difficulty").pack()

        diff_frame = ttk.Frame(self.difficulty_frame)
        diff_frame.pack(pady=5)

        diff_buttons = [
            ("Easy", Difficulty.EASY, "#4ade80"),
            ("Medium", Difficulty.MEDIUM, "#fbbf24"),
            ("Hard", Difficulty.HARD, "#f87171")
        ]

        self.difficulty_buttons = {}
        for text, level, color in diff_buttons:
            btn = tk.Button(
                diff_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=7,
                activebackground=color,
                command=lambda d=level: self._set_difficulty(d)
            )
            btn.pack(side=tk.LEFT, padx=3)
            self.difficulty_buttons[level] = (btn, color)

        self.legend_label = ttk.Label(left_frame, text="")
        self.legend_label.pack(side=tk.BOTTOM, pady=10)

        # Center - board canvas
        center_frame = ttk.Frame(main_frame)
        center_frame.pack(side=tk.LEFT, padx=10)

        width, height = self.renderer.image_size
        self.board_canvas = tk.Canvas(
            center_frame, width=width, height=height, bg='#0f0f1a',
            highlightthickness=2, highlightbackground='#00d4ff'
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        self.status_label = ttk.Label(center_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=8)

        # Right panel - actions
        right_frame = ttk.Frame(main_frame)
        right_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(10, 0))

        tk.Button(
            right_frame,
            text="New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#2563eb',
            fg='white',
            width=14,
            command=self._new_game
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="Reset Scores",
            font=('Segoe UI', 11, 'bold'),
            bg='#3f3f46',
            fg='white',
            width=14,
            command=self._reset_scores
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=14,
            command=self._quit
        ).pack(pady=(30, 5))

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _schedule(self, delay_ms: int, callback):
        """Run the opponent's move after a delay, then redraw."""
        def run():
            callback()
            self._refresh()
        self.root.after(delay_ms, run)

    def _on_canvas_click(self, event):
        """Handle a click on the board."""
        index = self.renderer.cell_at(event.x, event.y)
        if index is None:
            return

        if self.session.cell_selected(index):
            self._refresh()

    def _set_mode(self, mode: GameMode):
        """Switch between vs AI and vs Friend."""
        self.session.set_mode(mode)
        print(f"Game mode set to: {mode.value}")
        self._refresh()

    def _set_difficulty(self, level: Difficulty):
        """Set the AI difficulty level."""
        self.session.set_difficulty(level)
        print(f"Difficulty set to: {level.value}")
        self._refresh()

    def _new_game(self):
        if self.session.pending_ticket is not None:
            print(f"Cancelled opponent turn {self.session.pending_ticket}")
        self.session.request_new_game()
        self._refresh()

    def _reset_scores(self):
        self.session.request_score_reset()
        self._refresh()

    def _refresh(self):
        """Redraw everything from the session state."""
        self._update_board_canvas()
        self._update_game_info()

    def _update_board_canvas(self):
        """Update the board canvas with a fresh rendering."""
        frame = self.renderer.render(self.session)

        # Convert BGR to RGB
        frame_rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(frame_rgb)
        photo = ImageTk.PhotoImage(image)

        # Update canvas
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_game_info(self):
        """Update status, score and button labels."""
        session = self.session

        self.status_label.configure(text=session.status_text())

        left, right = session.score_labels()
        self.score_names["side_a"].configure(text=left)
        self.score_names["side_b"].configure(text=right)
        self.score_values["side_a"].configure(text=str(session.scores.side_a))
        self.score_values["draws"].configure(text=str(session.scores.draws))
        self.score_values["side_b"].configure(text=str(session.scores.side_b))

        # Update button colors
        for mode, btn in self.mode_buttons.items():
            if mode == session.mode:
                btn.configure(bg='#2563eb', fg='white')
            else:
                btn.configure(bg='#2d3748', fg='white')

        for level, (btn, color) in self.difficulty_buttons.items():
            if level == session.difficulty:
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

        if session.mode == GameMode.VS_OPPONENT:
            self.difficulty_frame.pack(fill=tk.X, before=self.legend_label)
            self.legend_label.configure(text="You are X, AI is O")
        else:
            self.difficulty_frame.pack_forget()
            self.legend_label.configure(text=f"Current: {session.current_mark}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
