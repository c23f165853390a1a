import logging

from ..config import AI_DELAY_MS, STRATEGY, HUMAN_COLOR, OPPONENT_COLOR
from ..game_logic import GameEngine, Phase
from ..strategy import get_strategy
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QActionGroup, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

# status label look per phase
PHASE_STYLES = {
    Phase.HUMAN_TURN: f"color: {HUMAN_COLOR}; font-weight: bold;",
    Phase.OPPONENT_TURN: "color: #eee;",
    Phase.HUMAN_WON: "color: lime; font-weight: bold;",
    Phase.OPPONENT_WON: f"color: {OPPONENT_COLOR}; font-weight: bold;",
    Phase.DRAW: "color: #eee; font-weight: bold;",
    Phase.ERROR: f"color: {OPPONENT_COLOR}; font-weight: bold;",
}

# menu label -> strategy name
OPPONENT_CHOICES = (("Easy", "random"), ("Hard", "minimax"))


class TicTacToeWindow(QMainWindow):
    """
    main window: status, board, reset. drives the engine and
    defers the opponent's reply through a single-shot timer
    """
    def __init__(self, strategy_name=STRATEGY, ai_delay_ms=AI_DELAY_MS):
        """
        init engine, ui widgets, signals
        """
        super().__init__()
        self.strategy_name = strategy_name
        self.engine = GameEngine(get_strategy(strategy_name))
        self.board_widget = BoardWidget(self.engine, parent=self)
        self.ai_delay_ms = ai_delay_ms
        # pending opponent turn; stopped on reset so a stale reply never lands
        self.opponent_timer = QTimer(self)
        self.opponent_timer.setSingleShot(True)
        self.opponent_timer.timeout.connect(self._run_opponent_turn)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe vs AI")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QPushButton { padding: 6px 18px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.status_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # reset button
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu: new game, opponent level, quit'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        game_menu.addAction(new_action)

        opponent_menu = game_menu.addMenu("Opponent")
        self.opponent_actions = QActionGroup(self)
        self.opponent_actions.setExclusive(True)
        for label, name in OPPONENT_CHOICES:
            act = QAction(label, self)
            act.setCheckable(True)
            act.setChecked(get_strategy(name).name == self.engine.strategy.name)
            act.triggered.connect(lambda checked=False, n=name: self.set_strategy(n))
            self.opponent_actions.addAction(act)
            opponent_menu.addAction(act)

        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # reset button, centred
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.reset_button = QPushButton("Reset")
        self.reset_button.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.reset_button)

    def _refresh(self):
        # status text + clickability follow the engine's phase
        phase = self.engine.phase
        self.status_label.setStyleSheet(PHASE_STYLES[phase])
        self.status_label.setText(self.engine.status_text)
        self.board_widget.set_accept_clicks(phase is Phase.HUMAN_TURN)
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # engine ignores anything illegal
        if not self.engine.handle_human_select(index):
            return
        self._refresh()
        if self.engine.phase is Phase.OPPONENT_TURN:
            self.opponent_timer.start(self.ai_delay_ms)

    @Slot()
    def _run_opponent_turn(self):
        self.engine.step()
        self._refresh()

    @Slot(str)
    def set_strategy(self, name):
        # swap opponent, takes effect on its next turn
        self.engine.strategy = get_strategy(name)
        self.strategy_name = name
        logger.info("opponent strategy set to %s", self.engine.strategy.name)

    @Slot()
    def reset_game(self):
        # drop any queued reply, then a fresh game
        self.opponent_timer.stop()
        self.engine.reset()
        self._refresh()

    def closeEvent(self, event):
        # ensure cleanup on close
        self.opponent_timer.stop()
        event.accept()
