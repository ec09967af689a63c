"""
Score Ledger - running totals for the two teams.
"""

from dataclasses import dataclass
from typing import Optional

from config import TEAM_SETTINGS
from models.board import Coordinate


@dataclass(frozen=True)
class ScoreDelta:
    """One applied score change, kept for reconciliation."""
    team: str
    delta: int
    coordinate: Optional[Coordinate] = None
    was_special: bool = False


class ScoreLedger:
    """
    Integer scores for a fixed pair of teams.

    Scores have no floor or ceiling. Every change is recorded so the total
    for a team always equals the sum of its deltas.
    """

    def __init__(self, team_ids: tuple[str, ...] = TEAM_SETTINGS.team_ids):
        if len(team_ids) != 2 or len(set(team_ids)) != 2:
            raise ValueError("A ledger needs exactly two distinct teams")
        self.team_ids = tuple(team_ids)
        self._scores: dict[str, int] = {team: 0 for team in self.team_ids}
        self._history: list[ScoreDelta] = []

    def validate_team(self, team: str) -> None:
        """Raise ValueError for an unknown team identifier."""
        if team not in self._scores:
            raise ValueError(f"Unknown team: {team!r}")

    def apply(self, team: str, delta: int, coordinate: Optional[Coordinate] = None,
              was_special: bool = False) -> int:
        """
        Add a delta to a team's score.

        Returns:
            The team's new score
        """
        self.validate_team(team)
        self._scores[team] += delta
        self._history.append(ScoreDelta(team, delta, coordinate, was_special))
        return self._scores[team]

    def score(self, team: str) -> int:
        self.validate_team(team)
        return self._scores[team]

    def scores(self) -> dict[str, int]:
        """Copy of the current scores."""
        return dict(self._scores)

    @property
    def history(self) -> tuple[ScoreDelta, ...]:
        return tuple(self._history)

    def leader(self) -> Optional[str]:
        """
        Team currently ahead.

        Returns:
            The leading team id, or None on a tie
        """
        first, second = self.team_ids
        if self._scores[first] > self._scores[second]:
            return first
        elif self._scores[second] > self._scores[first]:
            return second
        return None

    def reset(self) -> None:
        """Zero both scores and forget history."""
        self._scores = {team: 0 for team in self.team_ids}
        self._history.clear()
