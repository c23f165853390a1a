from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_SIZE,
    BOARD_BACKGROUND_COLOR, GRID_LINE_COLOR, HUMAN_COLOR, OPPONENT_COLOR,
    HUMAN_WIN_FILL_COLOR, OPPONENT_WIN_FILL_COLOR,
)
from ..game_logic import Occupant, Phase


def cell_at(x, y, width, height, size=BOARD_SIZE):
    """
    map widget coords to a cell index, None when outside the square board
    """
    side = min(width, height)
    if side <= 0:
        return None
    ox, oy = (width - side) / 2, (height - side) / 2
    if not (ox <= x < ox + side and oy <= y < oy + side):
        return None
    cell = side / size
    col = int((x - ox) // cell); row = int((y - oy) // cell)
    # clamp float edge cases
    row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
    return row * size + col


class BoardWidget(QWidget):
    """
    draws the engine's grid, highlights the winning line, turns clicks
    into cell indices. never changes the engine itself.
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, engine, parent=None):
        super().__init__(parent)
        self.engine = engine            # read-only view of game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def sizeHint(self):
        return QSize(360, 360)

    def paintEvent(self, event):
        """
        draw grid, winning cells, X/O marks
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            w, h = self.width(), self.height()
            side = min(w, h)
            offset_x, offset_y = (w - side) / 2, (h - side) / 2
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND_COLOR))
            size = BOARD_SIZE
            cell_size = side / size

            # winning cells get a tinted background
            phase = self.engine.phase
            if phase in (Phase.HUMAN_WON, Phase.OPPONENT_WON):
                fill = QColor(HUMAN_WIN_FILL_COLOR if phase is Phase.HUMAN_WON
                              else OPPONENT_WIN_FILL_COLOR)
                for index in self.engine.winning_line:
                    r, c = divmod(index, size)
                    painter.fillRect(QRectF(offset_x + c * cell_size, offset_y + r * cell_size,
                                            cell_size, cell_size), fill)

            # grid lines
            painter.setPen(QPen(QColor(GRID_LINE_COLOR), 2))
            for i in range(1, size):
                x = offset_x + i * cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y + side))
                y = offset_y + i * cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x + side), int(y))

            # marks
            for index, occupant in enumerate(self.engine.grid):
                if occupant is Occupant.EMPTY:
                    continue
                r, c = divmod(index, size)
                cx = offset_x + c * cell_size + cell_size / 2
                cy = offset_y + r * cell_size + cell_size / 2
                rad = cell_size / 2 * 0.7
                if occupant is Occupant.HUMAN:
                    painter.setPen(QPen(QColor(HUMAN_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                    painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
                else:
                    painter.setPen(QPen(QColor(OPPONENT_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        map click to a cell and emit it; the engine decides if it counts
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        index = cell_at(pos.x(), pos.y(), self.width(), self.height())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
