"""Match result import for GoalFut.

Reads a results CSV (as exported by the persistence layer, or written by
``goalfut`` itself and filled in by hand) back into Match objects.
"""

import csv
from datetime import time
from pathlib import Path
from typing import Optional

from goalfut.config import parse_date, parse_time
from goalfut.errors import ConfigurationError
from goalfut.models import Match, MatchStatus


def _int_or_none(s: str):
    s = (s or "").strip()
    return int(s) if s else None


def _parse_row(row: dict, tournament_id: str) -> Optional[Match]:
    home = (row.get("home_id") or "").strip()
    away = (row.get("away_id") or "").strip()
    if not home or not away:
        return None

    home_goals = _int_or_none(row.get("home_goals"))
    away_goals = _int_or_none(row.get("away_goals"))

    status_str = (row.get("status") or "").strip()
    if status_str:
        status = MatchStatus.from_str(status_str)
    elif home_goals is not None and away_goals is not None:
        status = MatchStatus.FINISHED
    else:
        status = MatchStatus.SCHEDULED

    date_str = (row.get("date") or "").strip()
    time_str = (row.get("time") or "").strip()

    return Match(
        tournament_id=(row.get("tournament_id") or tournament_id).strip(),
        home_id=home,
        away_id=away,
        group=(row.get("group") or "").strip(),
        matchday=_int_or_none(row.get("matchday")) or 0,
        date=parse_date(date_str) if date_str else None,
        time=parse_time(time_str) if time_str else time(0, 0),
        status=status,
        home_goals=home_goals,
        away_goals=away_goals,
    )


def parse_results_csv(csv_path: str | Path, tournament_id: str = "") -> list[Match]:
    """Parse a results CSV into Match objects.

    Required columns: home_id, away_id. Optional: home_goals, away_goals,
    status, group, matchday, date, time. Rows without both team ids are
    skipped. A row with both scores and no status counts as finished.

    Raises ConfigurationError naming the line of the first malformed row.
    """
    matches = []
    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            try:
                match = _parse_row(row, tournament_id)
            except (ValueError, IndexError) as e:
                raise ConfigurationError(
                    f"{csv_path}: line {reader.line_num}: {e}"
                ) from None
            if match is not None:
                matches.append(match)

    return matches
