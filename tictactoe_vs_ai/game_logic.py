import logging
from dataclasses import dataclass
from enum import Enum

from .config import (
    GRID_LENGTH, MAX_MOVES,
    HUMAN_SYMBOL, OPPONENT_SYMBOL, EMPTY_SYMBOL,
    STATUS_YOUR_TURN, STATUS_AI_TURN, STATUS_YOU_WON,
    STATUS_AI_WON, STATUS_DRAW, STATUS_ERROR,
)

logger = logging.getLogger(__name__)


class GameError(Exception):
    """base class for engine errors"""


class InvalidMoveError(GameError):
    """
    raised when apply_move is asked for a move the rules forbid
    (wrong phase, taken cell, bad index or occupant)
    """


class Occupant(Enum):
    """what sits in a cell"""
    EMPTY = "empty"
    HUMAN = "human"
    OPPONENT = "opponent"

    @property
    def symbol(self):
        return CELL_SYMBOLS[self]


class Phase(Enum):
    """stage of the turn state machine"""
    HUMAN_TURN = "human_turn"
    OPPONENT_TURN = "opponent_turn"
    HUMAN_WON = "human_won"
    OPPONENT_WON = "opponent_won"
    DRAW = "draw"
    ERROR = "error"

    @property
    def is_terminal(self):
        return self not in (Phase.HUMAN_TURN, Phase.OPPONENT_TURN)

    @property
    def status_text(self):
        return STATUS_LABELS[self]


CELL_SYMBOLS = {
    Occupant.HUMAN: HUMAN_SYMBOL,
    Occupant.OPPONENT: OPPONENT_SYMBOL,
    Occupant.EMPTY: EMPTY_SYMBOL,
}

STATUS_LABELS = {
    Phase.HUMAN_TURN: STATUS_YOUR_TURN,
    Phase.OPPONENT_TURN: STATUS_AI_TURN,
    Phase.HUMAN_WON: STATUS_YOU_WON,
    Phase.OPPONENT_WON: STATUS_AI_WON,
    Phase.DRAW: STATUS_DRAW,
    Phase.ERROR: STATUS_ERROR,
}

# whose turn a phase belongs to, and what a line of theirs wins
TURN_PHASES = {Occupant.HUMAN: Phase.HUMAN_TURN, Occupant.OPPONENT: Phase.OPPONENT_TURN}
WIN_PHASES = {Occupant.HUMAN: Phase.HUMAN_WON, Occupant.OPPONENT: Phase.OPPONENT_WON}

# checked in this order: rows, cols, diags
WINNING_LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class Outcome:
    """
    terminal result of a position; line holds the 3 winning
    indices, empty for draw/error
    """
    result: Phase
    line: tuple = ()


def create_empty_grid():
    return [Occupant.EMPTY] * GRID_LENGTH


def is_valid_index(index):
    # bool is an int subclass, never a cell
    return isinstance(index, int) and not isinstance(index, bool) \
        and 0 <= index < GRID_LENGTH


def count_occupied(grid):
    return sum(1 for cell in grid if cell is not Occupant.EMPTY)


def empty_cells(grid):
    """indices of blank cells, ascending"""
    return [i for i, cell in enumerate(grid) if cell is Occupant.EMPTY]


def evaluate(grid, move_count):
    """
    look for a finished game

    returns Outcome for a win, a draw or a malformed position
    (wrong grid length, move_count not matching the marks on the
    board), None while the game is still running. pure: never
    touches grid.
    """
    if len(grid) != GRID_LENGTH or move_count != count_occupied(grid):
        return Outcome(Phase.ERROR)
    for line in WINNING_LINES:
        a, b, c = line
        if grid[a] is not Occupant.EMPTY and grid[a] == grid[b] == grid[c]:
            return Outcome(WIN_PHASES[grid[a]], line)
    if move_count == MAX_MOVES:
        return Outcome(Phase.DRAW)
    return None


class GameEngine:
    """
    owns the grid, move counter, phase and winning line of one game
    of human vs opponent strategy. hosts read state through the
    properties and drive it with handle_human_select / step / reset.
    """
    def __init__(self, strategy):
        """
        strategy: OpponentStrategy asked for a cell on the opponent's turn
        """
        self.strategy = strategy
        self.reset()

    # ---- observable state ----

    @property
    def grid(self):
        # copy, callers never alias the live grid
        return tuple(self._grid)

    @property
    def move_count(self):
        return self._move_count

    @property
    def phase(self):
        return self._phase

    @property
    def winning_line(self):
        return self._winning_line

    @property
    def is_over(self):
        return self._phase.is_terminal

    @property
    def status_text(self):
        return self._phase.status_text

    def cell(self, index):
        if not is_valid_index(index):
            raise IndexError(f"cell index out of range: {index!r}")
        return self._grid[index]

    def cell_symbol(self, index):
        return self.cell(index).symbol

    # ---- mutation ----

    def reset(self):
        """
        fresh game, whatever phase we were in
        """
        # all four together, nothing stale survives
        self._grid, self._move_count, self._phase, self._winning_line = (
            create_empty_grid(), 0, Phase.HUMAN_TURN, ()
        )
        logger.info("new game, human to move")

    def apply_move(self, index, occupant):
        """
        put occupant at index and count the move; phase is left alone
        raises InvalidMoveError (state untouched) if the move is illegal
        """
        if occupant not in TURN_PHASES:
            raise InvalidMoveError(f"cannot place {occupant!r}")
        if not is_valid_index(index):
            raise InvalidMoveError(f"cell index out of range: {index!r}")
        if self._phase is not TURN_PHASES[occupant]:
            raise InvalidMoveError(
                f"{occupant.name.lower()} cannot move during {self._phase.name}"
            )
        if self._grid[index] is not Occupant.EMPTY:
            raise InvalidMoveError(f"cell {index} already holds {self._grid[index].name}")
        self._grid[index] = occupant
        self._move_count += 1
        logger.debug("%s took cell %d (move %d)", occupant.name.lower(), index, self._move_count)

    def handle_human_select(self, index):
        """
        human picked a cell. ignored unless it's the human's turn and
        the cell is a valid blank one. returns True if a move was made.
        """
        if self._phase is not Phase.HUMAN_TURN:
            logger.debug("ignoring select %r during %s", index, self._phase.name)
            return False
        if not is_valid_index(index) or self._grid[index] is not Occupant.EMPTY:
            logger.debug("ignoring select %r, not an empty cell", index)
            return False
        self.apply_move(index, Occupant.HUMAN)
        self._settle(evaluate(self._grid, self._move_count), Phase.OPPONENT_TURN)
        return True

    def step(self):
        """
        run the opponent's turn if it is due; returns the phase after it
        """
        if self._phase is not Phase.OPPONENT_TURN:
            return self._phase
        try:
            index = self.strategy.select_move(self.grid, self._move_count)
        except Exception:
            logger.exception("opponent strategy %r crashed", self.strategy)
            self._phase = Phase.ERROR
            return self._phase
        if not is_valid_index(index) or self._grid[index] is not Occupant.EMPTY:
            logger.error("opponent strategy %r returned unusable cell %r", self.strategy, index)
            self._phase = Phase.ERROR
            return self._phase
        self.apply_move(index, Occupant.OPPONENT)
        self._settle(evaluate(self._grid, self._move_count), Phase.HUMAN_TURN)
        return self._phase

    def play(self, index):
        """
        human move plus the opponent's reply in one call, for hosts
        without an event loop
        """
        if self.handle_human_select(index):
            self.step()
        return self._phase

    def _settle(self, outcome, next_phase):
        # outcome wins over the normal hand-off
        if outcome is None:
            self._phase = next_phase
            return
        self._phase = outcome.result
        self._winning_line = outcome.line
        if outcome.result is Phase.ERROR:
            logger.error("inconsistent board after move %d", self._move_count)
        else:
            logger.info("game over: %s %s", outcome.result.name, list(outcome.line))
