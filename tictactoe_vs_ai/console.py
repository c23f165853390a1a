import logging

from .config import BOARD_SIZE
from .game_logic import GameEngine, Phase

logger = logging.getLogger(__name__)

QUIT_WORDS = ("q", "quit", "exit")
RESET_WORDS = ("r", "reset")


class ConsoleGame:
    """
    Plays the engine in a terminal. The opponent replies right away,
    there is no event loop to defer it to.
    """

    def __init__(self, strategy, input_func=None, output_func=None):
        """wire engine + io; io is swappable for tests"""
        self.engine = GameEngine(strategy)
        self.input = input_func or input
        self.output = output_func or print

    def render_board(self):
        """
        board as text; blank cells show their index so the human knows
        what to type
        """
        rows = []
        for r in range(BOARD_SIZE):
            cells = []
            for c in range(BOARD_SIZE):
                index = r * BOARD_SIZE + c
                cells.append(self.engine.cell_symbol(index) or str(index))
            rows.append(" " + " | ".join(cells))
        divider = "\n" + "+".join(["---"] * BOARD_SIZE) + "\n"
        return divider.join(rows)

    def print_board(self):
        self.output("\n" + self.render_board())
        status = self.engine.status_text
        if self.engine.winning_line:
            status += f"  (line {', '.join(map(str, self.engine.winning_line))})"
        self.output(status)

    def handle_command(self, text):
        """
        one line of input. returns False when the player wants out
        """
        text = text.strip().lower()
        if text in QUIT_WORDS:
            return False
        if text in RESET_WORDS:
            self.engine.reset()
            return True
        try:
            index = int(text)
        except ValueError:
            self.output("!! Enter a cell number 0-8, 'r' to reset or 'q' to quit.")
            return True
        if not self.engine.handle_human_select(index):
            self.output("!! That cell can't be played right now.")
            return True
        self.engine.step()
        return True

    def run(self):
        """loop until quit or end of input"""
        self.output("Tic-Tac-Toe vs AI. You are X.")
        while True:
            self.print_board()
            if self.engine.is_over:
                prompt = "Game over. 'r' to play again, 'q' to quit: "
            else:
                prompt = "Your move (0-8): "
            try:
                line = self.input(prompt)
            except EOFError:
                break
            if not self.handle_command(line):
                break
        logger.info("console game finished in phase %s", self.engine.phase.name)
        return self.engine.phase is not Phase.ERROR
