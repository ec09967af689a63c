"""
Scoreboard Widget

Team scores with award/deduct buttons for the question in play.
"""

from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel, QFrame, QPushButton
from PySide6.QtCore import Qt, Slot, Signal

from config import TEAM_SETTINGS, UI_SETTINGS
from gui.styles import theme


class ScoreboardWidget(QWidget):
    """
    Always-visible scoreboard.

    Signals:
        score_requested: (team_id, is_add) when a host presses + or -
    """

    score_requested = Signal(str, bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._score_labels: dict[str, QLabel] = {}
        self._build_ui()

    def _build_ui(self) -> None:
        """Build the scoreboard UI."""
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(theme.SPACING_XL)

        for team_id, name, color in zip(TEAM_SETTINGS.team_ids,
                                        TEAM_SETTINGS.display_names,
                                        theme.TEAM_COLORS):
            layout.addWidget(self._create_team_section(team_id, name, color))

    def _create_team_section(self, team_id: str, name: str, color: str) -> QFrame:
        """Create a team score section."""
        frame = QFrame()
        frame.setStyleSheet(f"""
            QFrame {{
                background-color: {theme.SURFACE_CARD};
                border-radius: {theme.RADIUS_MD}px;
                padding: 10px;
            }}
        """)

        layout = QVBoxLayout(frame)
        layout.setSpacing(5)

        header = QLabel(name)
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet(f"font-size: 18pt; font-weight: bold; color: {color};")
        layout.addWidget(header)

        score = QLabel("0 pts")
        score.setAlignment(Qt.AlignmentFlag.AlignCenter)
        score.setStyleSheet(f"font-size: {UI_SETTINGS.score_font_size}pt; font-weight: bold;")
        layout.addWidget(score)
        self._score_labels[team_id] = score

        buttons = QHBoxLayout()
        btn_add = QPushButton("+ Correct")
        btn_add.setStyleSheet(
            f"background-color: {theme.SUCCESS}; color: white; font-size: 14px; padding: 12px;"
        )
        btn_add.clicked.connect(lambda: self.score_requested.emit(team_id, True))
        buttons.addWidget(btn_add)

        btn_sub = QPushButton("- Wrong")
        btn_sub.setStyleSheet(
            f"background-color: {theme.DANGER}; color: white; font-size: 14px; padding: 12px;"
        )
        btn_sub.clicked.connect(lambda: self.score_requested.emit(team_id, False))
        buttons.addWidget(btn_sub)
        layout.addLayout(buttons)

        return frame

    @Slot(dict)
    def update_scores(self, scores: dict) -> None:
        """Refresh all team totals."""
        for team_id, value in scores.items():
            label = self._score_labels.get(team_id)
            if label is not None:
                label.setText(f"{value} pts")
