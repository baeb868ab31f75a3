"""Data models for the GoalFut tournament engine."""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import Optional


_SPANISH_DAYS = {
    "lunes": "Mon",
    "martes": "Tue",
    "miercoles": "Wed",
    "miércoles": "Wed",
    "jueves": "Thu",
    "viernes": "Fri",
    "sabado": "Sat",
    "sábado": "Sat",
    "domingo": "Sun",
}


class DayOfWeek(Enum):
    Mon = 0
    Tue = 1
    Wed = 2
    Thu = 3
    Fri = 4
    Sat = 5
    Sun = 6

    @classmethod
    def from_str(cls, s: str) -> "DayOfWeek":
        s = s.strip().lower()
        if s in _SPANISH_DAYS:
            return cls[_SPANISH_DAYS[s]]
        return cls[s[:3].capitalize()]

    @classmethod
    def of(cls, d: date) -> "DayOfWeek":
        return cls(d.weekday())

    def is_weekend(self) -> bool:
        return self.value >= 5


class MatchStatus(Enum):
    """Match lifecycle. Values are what the persistence layer stores."""
    SCHEDULED = "programado"
    LIVE = "en_juego"
    PAUSED = "pausado"
    HALF_TIME = "medio_tiempo"
    FINISHED = "finalizado"
    SUSPENDED = "suspendido"
    POSTPONED = "aplazado"

    @classmethod
    def from_str(cls, s: str) -> "MatchStatus":
        s = s.strip().lower()
        for status in cls:
            if s in (status.value, status.name.lower()):
                return status
        raise ValueError(f"Unknown match status: {s!r}")


GROUP_LETTERS = ["A", "B", "C", "D", "E", "F", "G", "H"]
MAX_TEAMS = 32


@dataclass(frozen=True)
class PointsRules:
    """Points awarded per result."""
    win: int = 3
    draw: int = 1
    loss: int = 0


@dataclass(frozen=True)
class Team:
    """A team with the aggregate counters the standings use."""
    id: str
    name: str
    short_name: str = ""
    group: str = ""
    points: int = 0
    played: int = 0
    won: int = 0
    drawn: int = 0
    lost: int = 0
    goals_for: int = 0
    goals_against: int = 0
    yellow_cards: int = 0
    blue_cards: int = 0
    red_cards: int = 0

    def __post_init__(self):
        if not self.short_name:
            object.__setattr__(self, "short_name", self.name[:3].upper())

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against


@dataclass(frozen=True)
class Pairing:
    """A home/away pairing that has no date yet.

    round_index is 0-based within the group's own rotation.
    """
    group: str
    home: Team
    away: Team
    round_index: int


@dataclass(frozen=True)
class Match:
    """A dated group-stage match, as handed to the persistence layer."""
    tournament_id: str
    home_id: str
    away_id: str
    group: str
    matchday: int
    date: Optional[date]  # None for imported results without a date
    time: time
    status: MatchStatus = MatchStatus.SCHEDULED
    home_goals: Optional[int] = None
    away_goals: Optional[int] = None
    phase: str = "grupos"

    @property
    def is_finished(self) -> bool:
        return self.status is MatchStatus.FINISHED

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home_id, self.away_id)

    def is_between(self, team_a: str, team_b: str) -> bool:
        return {self.home_id, self.away_id} == {team_a, team_b}

    def goals_for(self, team_id: str) -> int:
        if team_id == self.home_id:
            return self.home_goals or 0
        return self.away_goals or 0

    def goals_against(self, team_id: str) -> int:
        if team_id == self.home_id:
            return self.away_goals or 0
        return self.home_goals or 0
