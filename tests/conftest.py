import os

# no display in CI
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe_vs_ai.game_logic import GameEngine
from tictactoe_vs_ai.strategy import OpponentStrategy


class ScriptedStrategy(OpponentStrategy):
    """replies with a fixed list of cells, records what it was shown"""
    name = "scripted"

    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = []

    def select_move(self, grid, move_count):
        self.calls.append((grid, move_count))
        return self.moves.pop(0)


@pytest.fixture
def scripted():
    def make(*moves):
        return ScriptedStrategy(moves)
    return make


@pytest.fixture
def engine_with(scripted):
    def make(*opponent_moves):
        return GameEngine(scripted(*opponent_moves))
    return make


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app
