"""
Opponent strategies for the automated player.

A strategy is asked for a cell on the opponent's turn. The engine hands
it a snapshot of the grid (tuple of 9 Occupant) and the move count, and
expects back the index of an empty cell. Anything else puts the game into
the Error phase, so strategies should never guess.
"""

import logging
import random
from abc import ABC, abstractmethod

from .game_logic import Occupant, evaluate, empty_cells, WIN_PHASES

logger = logging.getLogger(__name__)

CENTER = 4


class OpponentStrategy(ABC):
    """
    picks the opponent's cell given grid + move count
    """
    name = "base"

    @abstractmethod
    def select_move(self, grid, move_count):
        """return index 0-8 of an empty cell in grid"""

    def __repr__(self):
        return f"{type(self).__name__}()"


class RandomStrategy(OpponentStrategy):
    """
    any empty cell, uniformly. pass a seed for repeatable games
    """
    name = "random"

    def __init__(self, seed=None):
        self._rng = random.Random(seed)

    def select_move(self, grid, move_count):
        return self._rng.choice(empty_cells(grid))


class MinimaxStrategy(OpponentStrategy):
    """
    Plays TicTacToe perfectly using Minimax with alpha-beta pruning.

    It will take a win when one is there, block the human's win, and
    otherwise never lose (at worst, draw). Faster wins and slower
    losses score higher, so it doesn't toy with the human.
    """
    name = "minimax"

    def __init__(self, me=Occupant.OPPONENT):
        """
        Args:
            me: which occupant this strategy plays for (default: OPPONENT)
        """
        self.me = me
        self.other = Occupant.HUMAN if me is Occupant.OPPONENT else Occupant.OPPONENT

        # how many positions the last search looked at (for debugging)
        self.positions_evaluated = 0

    def __repr__(self):
        return f"MinimaxStrategy(me={self.me.name})"

    def select_move(self, grid, move_count):
        """
        Get the best move for the current position.

        Args:
            grid: snapshot of the 9 cells.
            move_count: moves played so far.

        Returns:
            Index of the chosen cell.
        """
        self.positions_evaluated = 0
        board = list(grid)
        valid_moves = empty_cells(board)

        if not valid_moves:
            raise ValueError("no empty cell left to play")

        # only one move left, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        # centre is the strongest reply to an opening move
        if move_count <= 1 and board[CENTER] is Occupant.EMPTY:
            return CENTER

        best_score = float('-inf')
        best_move = valid_moves[0]

        for index in valid_moves:
            board[index] = self.me
            score = self._minimax(board, move_count + 1, len(valid_moves) - 1, False)
            board[index] = Occupant.EMPTY

            if score > best_score:
                best_score = score
                best_move = index

        logger.debug(
            "minimax looked at %d positions, best move %d (score %s)",
            self.positions_evaluated, best_move, best_score,
        )
        return best_move

    def _minimax(self, board, move_count, depth, is_maximizing,
                 alpha=float('-inf'), beta=float('inf')):
        """
        Score board from self.me's point of view.

        Args:
            board: cells, mutated in place and restored before returning.
            move_count: marks on board.
            depth: empty cells left, used to prefer quick wins.
            is_maximizing: True when self.me moves next.
            alpha, beta: pruning window.
        """
        self.positions_evaluated += 1

        outcome = evaluate(board, move_count)
        if outcome is not None:
            if outcome.result is WIN_PHASES[self.me]:
                return 10 + depth
            if outcome.result is WIN_PHASES[self.other]:
                return -10 - depth
            return 0

        mover = self.me if is_maximizing else self.other
        best = float('-inf') if is_maximizing else float('inf')

        for index in empty_cells(board):
            board[index] = mover
            score = self._minimax(board, move_count + 1, depth - 1,
                                  not is_maximizing, alpha, beta)
            board[index] = Occupant.EMPTY
            if is_maximizing:
                best = max(best, score)
                alpha = max(alpha, score)
            else:
                best = min(best, score)
                beta = min(beta, score)
            if beta <= alpha:
                break  # prune
        return best


# difficulty names shown in the UI map onto these too
STRATEGIES = {
    "minimax": MinimaxStrategy,
    "hard": MinimaxStrategy,
    "random": RandomStrategy,
    "easy": RandomStrategy,
}


def get_strategy(name):
    """
    build a strategy from its name (minimax/hard, random/easy)
    """
    try:
        factory = STRATEGIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"unknown strategy {name!r} (choose from {known})") from None
    return factory()
