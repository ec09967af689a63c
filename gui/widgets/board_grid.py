"""
Board Grid Widget

Category headers over a grid of value tiles. Consumed questions leave an
empty cell; the active question's tile is highlighted.
"""

from typing import Optional

from PySide6.QtWidgets import QWidget, QGridLayout, QLabel, QPushButton, QSizePolicy
from PySide6.QtCore import Qt, Slot, Signal

from config import UI_SETTINGS
from engine.controller import ActiveSelection
from models.board import BoardModel
from gui.styles import theme


class BoardGridWidget(QWidget):
    """
    The trivia board.

    Signals:
        question_clicked: (category, row) of a tile the host clicked
    """

    question_clicked = Signal(int, int)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._buttons: dict[tuple[int, int], QPushButton] = {}
        self._selected: Optional[tuple[int, int]] = None

        self._layout = QGridLayout(self)
        self._layout.setSpacing(theme.SPACING_SM)

    def set_board(self, board: BoardModel) -> None:
        """Rebuild the grid from the board."""
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._buttons.clear()
        self._selected = None

        for cat_idx, name in enumerate(board.category_names):
            header = QLabel(name.upper())
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            header.setWordWrap(True)
            header.setStyleSheet(f"""
                background-color: {theme.SURFACE_HEADER};
                color: {theme.TEXT_PRIMARY};
                font-weight: bold;
                padding: {theme.SPACING_MD}px;
                border-radius: {theme.RADIUS_SM}px;
            """)
            self._layout.addWidget(header, 0, cat_idx)

            for row_idx in range(board.row_count):
                question = board.get(cat_idx, row_idx)
                button = QPushButton(str(question.value) if question else "")
                button.setMinimumHeight(60)
                button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
                button.clicked.connect(
                    lambda _checked=False, c=cat_idx, r=row_idx: self.question_clicked.emit(c, r)
                )
                self._buttons[(cat_idx, row_idx)] = button
                self._layout.addWidget(button, row_idx + 1, cat_idx)
                self._style_tile(button, present=question is not None, selected=False)

    @Slot(int, int)
    def mark_consumed(self, category: int, row: int) -> None:
        """Blank out a played question."""
        button = self._buttons.get((category, row))
        if button is not None:
            button.setText("")
            self._style_tile(button, present=False, selected=False)
        if self._selected == (category, row):
            self._selected = None

    @Slot(object)
    def set_selection(self, selection: Optional[ActiveSelection]) -> None:
        """Highlight the active question's tile."""
        if self._selected is not None:
            previous = self._buttons.get(self._selected)
            if previous is not None and previous.isEnabled():
                self._style_tile(previous, present=True, selected=False)
            self._selected = None

        if selection is not None:
            self._selected = (selection.category, selection.row)
            button = self._buttons.get(self._selected)
            if button is not None:
                self._style_tile(button, present=True, selected=True)

    def _style_tile(self, button: QPushButton, present: bool, selected: bool) -> None:
        button.setEnabled(present)
        if not present:
            background, hover = theme.BOARD_EMPTY, theme.BOARD_EMPTY
        elif selected:
            background, hover = theme.BOARD_SELECTED, theme.BOARD_SELECTED
        else:
            background, hover = theme.BOARD_BLUE, theme.BOARD_BLUE_HOVER
        button.setStyleSheet(f"""
            QPushButton {{
                background-color: {background};
                color: {theme.VALUE_GOLD};
                font-size: {UI_SETTINGS.value_font_size}pt;
                font-weight: bold;
                border: none;
                border-radius: {theme.RADIUS_SM}px;
            }}
            QPushButton:hover {{ background-color: {hover}; }}
        """)
