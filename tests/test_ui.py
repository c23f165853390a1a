import pytest

from tictactoe_vs_ai.game_logic import Occupant, Phase
from tictactoe_vs_ai.strategy import MinimaxStrategy, RandomStrategy
from tictactoe_vs_ai.ui.board_widget import cell_at

from conftest import ScriptedStrategy


@pytest.fixture
def window(qapp):
    from tictactoe_vs_ai.ui.main_window import TicTacToeWindow
    win = TicTacToeWindow(strategy_name="minimax", ai_delay_ms=0)
    yield win
    win.opponent_timer.stop()
    win.close()
    win.deleteLater()


@pytest.mark.parametrize("x,y,expected", [
    (10, 10, 0),
    (150, 10, 1),
    (299, 299, 8),
    (150, 150, 4),
    (300, 150, None),     # right of the board
    (-1, 10, None),
])
def test_cell_at_square_widget(x, y, expected):
    assert cell_at(x, y, 300, 300) == expected


def test_cell_at_centres_board_in_wide_widget():
    # 500x300 -> board spans x 100..400
    assert cell_at(50, 150, 500, 300) is None
    assert cell_at(110, 10, 500, 300) == 0
    assert cell_at(390, 290, 500, 300) == 8


def test_window_starts_on_human_turn(window):
    assert window.status_label.text() == "Your Turn"
    assert window.board_widget.accepts_clicks()
    assert isinstance(window.engine.strategy, MinimaxStrategy)


def test_click_defers_opponent_reply(window):
    window.board_widget.cell_clicked.emit(4)
    assert window.engine.cell(4) is Occupant.HUMAN
    assert window.status_label.text() == "AI Turn"
    assert not window.board_widget.accepts_clicks()
    assert window.opponent_timer.isActive()

    window.opponent_timer.stop()
    window._run_opponent_turn()
    assert window.engine.move_count == 2
    assert window.status_label.text() == "Your Turn"
    assert window.board_widget.accepts_clicks()


def test_click_on_taken_cell_is_ignored(window):
    window.board_widget.cell_clicked.emit(4)
    window.opponent_timer.stop()
    window._run_opponent_turn()
    window.board_widget.cell_clicked.emit(4)
    assert window.engine.move_count == 2
    assert not window.opponent_timer.isActive()


def test_reset_cancels_pending_reply(window):
    window.board_widget.cell_clicked.emit(0)
    window.reset_game()
    assert not window.opponent_timer.isActive()
    assert window.engine.move_count == 0
    assert window.status_label.text() == "Your Turn"


def test_win_shows_status_and_paints_highlight(window):
    window.engine.strategy = ScriptedStrategy([3, 4])
    for index in (0, 1):
        window.board_widget.cell_clicked.emit(index)
        window.opponent_timer.stop()
        window._run_opponent_turn()
    window.board_widget.cell_clicked.emit(2)
    assert window.engine.phase is Phase.HUMAN_WON
    assert window.status_label.text() == "You Won!"
    assert not window.board_widget.accepts_clicks()
    window.board_widget.resize(300, 300)
    assert not window.board_widget.grab().isNull()


def test_strategy_error_shows_error_status(window):
    window.engine.strategy = ScriptedStrategy([4])
    window.board_widget.cell_clicked.emit(4)
    window.opponent_timer.stop()
    window._run_opponent_turn()
    assert window.status_label.text() == "Error"
    window.board_widget.cell_clicked.emit(0)
    assert window.engine.move_count == 1


def test_set_strategy_swaps_opponent(window):
    window.set_strategy("easy")
    assert isinstance(window.engine.strategy, RandomStrategy)
    assert window.strategy_name == "easy"
