"""
Game configuration for TicTacToe.
Settings for the session, the automated opponent and debugging.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values (or subclass) to tune the game!
    """
    
    # ==================== SESSION SETTINGS ====================
    # Mode the session starts in: "ai" (vs opponent) or "friend" (two humans)
    DEFAULT_MODE = "ai"
    
    # Opponent strength at start-up: "easy", "medium" or "hard"
    DEFAULT_DIFFICULTY = "medium"
    
    # ==================== OPPONENT SETTINGS ====================
    # Pause before the opponent moves, so its play is visible (milliseconds)
    OPPONENT_DELAY_MS = 300
    
    # On medium, samples below this play randomly, the rest play perfectly
    MEDIUM_RANDOM_THRESHOLD = 0.5
    
    # Seed for the opponent's random source (None = fresh entropy each run)
    RANDOM_SEED = None
    
    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
