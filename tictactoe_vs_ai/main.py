import argparse
import logging
import sys

from .config import AI_DELAY_MS, LOG_LEVEL, LOG_LEVEL_NAMES, STRATEGY
from .strategy import STRATEGIES, get_strategy

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# -----------------------------------------------------------------------------
# PALETTE
# -----------------------------------------------------------------------------

# role -> rgb, dark theme
PALETTE_COLORS = {
    "Window": (53, 53, 53),
    "WindowText": (255, 255, 255),
    "Base": (35, 35, 35),
    "AlternateBase": (53, 53, 53),
    "ToolTipBase": (255, 255, 255),
    "ToolTipText": (0, 0, 0),
    "Text": (255, 255, 255),
    "Button": (66, 66, 66),
    "ButtonText": (255, 255, 255),
    "BrightText": (255, 0, 0),
    "Highlight": (42, 130, 218),
    "HighlightedText": (255, 255, 255),
    "PlaceholderText": (160, 160, 160),
}
DISABLED_COLOR = (127, 127, 127)
DISABLED_ROLES = ("Text", "ButtonText", "WindowText")


def apply_default_palette(app):
    """
    Apply the dark theme palette from PALETTE_COLORS.
    """
    from PySide6.QtGui import QPalette, QColor

    palette = QPalette()
    for role, rgb in PALETTE_COLORS.items():
        palette.setColor(getattr(QPalette, role), QColor(*rgb))
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, getattr(QPalette, role), QColor(*DISABLED_COLOR))
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def build_parser():
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against the computer")
    parser.add_argument(
        "--strategy",
        default=STRATEGY,
        choices=sorted(STRATEGIES),
        help="opponent strategy (default: %(default)s)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=AI_DELAY_MS,
        help="milliseconds before the AI replies in the window (default: %(default)s)"
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="play in the terminal instead of a window"
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL.lower(),
        type=str.lower,
        choices=LOG_LEVEL_NAMES,
        help="logging level (default: %(default)s)"
    )
    return parser


def run_window(args):
    # qt only needed here, console mode runs without a display
    from PySide6.QtWidgets import QApplication
    from .ui.main_window import TicTacToeWindow

    app = QApplication.instance() or QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow(strategy_name=args.strategy, ai_delay_ms=args.delay)
    window.show()
    return app.exec()


def run_console(args):
    from .console import ConsoleGame

    game = ConsoleGame(get_strategy(args.strategy))
    return 0 if game.run() else 1


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.delay < 0:
        build_parser().error("--delay must be >= 0")

    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    logger.info("starting (strategy=%s, console=%s)", args.strategy, args.console)

    if args.console:
        return run_console(args)
    return run_window(args)


if __name__ == '__main__':
    sys.exit(main())
