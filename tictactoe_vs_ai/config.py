import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

# -----------------------------------------------------------------------------
# BOARD
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                        # fixed 3x3 grid
GRID_LENGTH = BOARD_SIZE * BOARD_SIZE # cells, row-major 0..8
MAX_MOVES = GRID_LENGTH               # full board

# -----------------------------------------------------------------------------
# LABELS
# -----------------------------------------------------------------------------

HUMAN_SYMBOL = "X"
OPPONENT_SYMBOL = "O"
EMPTY_SYMBOL = ""

STATUS_YOUR_TURN = "Your Turn"
STATUS_AI_TURN = "AI Turn"
STATUS_YOU_WON = "You Won!"
STATUS_AI_WON = "AI WON!"
STATUS_DRAW = "Draw"
STATUS_ERROR = "Error"

# -----------------------------------------------------------------------------
# COLORS
# -----------------------------------------------------------------------------

BOARD_BACKGROUND_COLOR = "#333"
GRID_LINE_COLOR = "#555"
HUMAN_COLOR = "#8acaff"
OPPONENT_COLOR = "#ff8a8a"
HUMAN_WIN_FILL_COLOR = "#1f4a6e"
OPPONENT_WIN_FILL_COLOR = "#6e1f1f"

# -----------------------------------------------------------------------------
# ENVIRONMENT
# -----------------------------------------------------------------------------

DEFAULT_STRATEGY = "minimax"
DEFAULT_AI_DELAY_MS = 350
DEFAULT_LOG_LEVEL = "INFO"

# keep in step with strategy.STRATEGIES
STRATEGY_NAMES = ("easy", "hard", "minimax", "random")
LOG_LEVEL_NAMES = ("debug", "info", "warning", "error", "critical")


def _read_int(name, default):
    """
    int from env var, default on missing or junk
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("ignoring %s=%r, not an integer", name, raw)
        return default
    if value < 0:
        logger.warning("ignoring %s=%r, must be >= 0", name, raw)
        return default
    return value


def _read_choice(name, choices, default):
    """
    lowercased env var if it is one of choices, default otherwise
    """
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("ignoring %s=%r, expected one of %s", name, raw, ", ".join(choices))
        return default
    return value


STRATEGY = _read_choice("TTT_STRATEGY", STRATEGY_NAMES, DEFAULT_STRATEGY)
AI_DELAY_MS = _read_int("TTT_AI_DELAY_MS", DEFAULT_AI_DELAY_MS)
LOG_LEVEL = _read_choice("TTT_LOG_LEVEL", LOG_LEVEL_NAMES, DEFAULT_LOG_LEVEL.lower()).upper()
