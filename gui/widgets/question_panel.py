"""
Question Panel

Shows the active clue, the Daily Double wager entry, the answer countdown
and the revealed answer.
"""

from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QLineEdit
)
from PySide6.QtCore import Qt, Slot, Signal, QRegularExpression
from PySide6.QtGui import QRegularExpressionValidator

from config import UI_SETTINGS
from engine.controller import SessionSnapshot
from gui.styles import theme

# Digits only, no upper bound
WAGER_INPUT_PATTERN = r"[0-9]*"


class QuestionPanel(QWidget):
    """
    Renders the question in play from a SessionSnapshot.

    Signals:
        wager_submitted: raw text typed into the wager box
        show_answer_clicked: host asked to reveal the answer
    """

    wager_submitted = Signal(str)
    show_answer_clicked = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._build_ui()
        self.render(SessionSnapshot())

    def _build_ui(self) -> None:
        """Build the question display UI."""
        layout = QVBoxLayout(self)
        layout.setSpacing(theme.SPACING_MD)

        self.banner_label = QLabel("DAILY DOUBLE!")
        self.banner_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.banner_label.setStyleSheet(
            f"font-size: 24pt; font-weight: bold; color: {theme.VALUE_GOLD};"
        )
        layout.addWidget(self.banner_label)

        # Wager entry
        wager_row = QHBoxLayout()
        self.wager_input = QLineEdit()
        self.wager_input.setPlaceholderText("Enter wager")
        self.wager_input.setValidator(
            QRegularExpressionValidator(QRegularExpression(WAGER_INPUT_PATTERN), self)
        )
        self.wager_input.returnPressed.connect(self._submit_wager)
        wager_row.addWidget(self.wager_input)

        self.btn_wager = QPushButton("Submit Wager")
        self.btn_wager.clicked.connect(self._submit_wager)
        wager_row.addWidget(self.btn_wager)
        self.wager_widget = QWidget()
        self.wager_widget.setLayout(wager_row)
        layout.addWidget(self.wager_widget)

        self.clue_label = QLabel("")
        self.clue_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.clue_label.setWordWrap(True)
        self.clue_label.setStyleSheet(
            f"font-size: {UI_SETTINGS.clue_font_size}pt; color: {theme.TEXT_PRIMARY};"
        )
        layout.addWidget(self.clue_label)

        self.countdown_label = QLabel("")
        self.countdown_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.countdown_label.setStyleSheet(f"""
            font-size: {UI_SETTINGS.countdown_font_size}pt;
            font-weight: bold;
            font-family: {theme.FONT_MONO};
            color: {theme.DANGER};
        """)
        layout.addWidget(self.countdown_label)

        self.btn_show_answer = QPushButton("Show Answer")
        self.btn_show_answer.setStyleSheet("font-size: 14px; padding: 12px 24px;")
        self.btn_show_answer.clicked.connect(self.show_answer_clicked.emit)
        layout.addWidget(self.btn_show_answer)

        self.answer_label = QLabel("")
        self.answer_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.answer_label.setWordWrap(True)
        self.answer_label.setStyleSheet(
            f"font-size: 18pt; font-weight: bold; color: {theme.SUCCESS};"
        )
        layout.addWidget(self.answer_label)

    @Slot(object)
    def render(self, snapshot: SessionSnapshot) -> None:
        """Redraw from the latest snapshot."""
        active = snapshot.active
        self.setVisible(active is not None)
        if active is None:
            self.wager_input.clear()
            self.countdown_label.setText("")
            return

        self.banner_label.setVisible(active.is_special)
        self.wager_widget.setVisible(snapshot.awaiting_wager)
        if snapshot.awaiting_wager:
            self.clue_label.setText("")
            self.wager_input.setFocus()
        elif active.is_special:
            self.clue_label.setText(f"For {snapshot.wager}: {active.clue}")
        else:
            self.clue_label.setText(active.clue)

        self.btn_show_answer.setEnabled(not snapshot.awaiting_wager)
        self.answer_label.setText(
            f"Answer: {snapshot.revealed_answer}" if snapshot.revealed_answer else ""
        )
        self.set_countdown(snapshot.countdown)

    @Slot(int)
    def set_countdown(self, remaining) -> None:
        """Show the seconds left, or nothing when the countdown is idle."""
        if remaining:
            self.countdown_label.setText(f"Time Left: {remaining}s")
        else:
            self.countdown_label.setText("")

    def _submit_wager(self) -> None:
        self.wager_submitted.emit(self.wager_input.text())
