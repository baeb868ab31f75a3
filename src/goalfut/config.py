"""Config loading and validation for GoalFut tournaments."""

from datetime import date, time
from pathlib import Path

import yaml

from goalfut.errors import ConfigurationError
from goalfut.models import (
    DayOfWeek, GROUP_LETTERS, MAX_TEAMS, PointsRules, Team,
)


def parse_time(s: str) -> time:
    """Parse time strings like '5:30pm', '10am', '17:00'."""
    s_clean = s.strip().lower()

    is_pm = s_clean.endswith("pm")
    is_am = s_clean.endswith("am")
    if is_pm or is_am:
        s_clean = s_clean[:-2].strip()

    if ":" in s_clean:
        parts = s_clean.split(":")
        h = int(parts[0])
        m = int(parts[1])
    else:
        h = int(s_clean)
        m = 0

    if is_pm and h < 12:
        h += 12
    elif is_am and h == 12:
        h = 0

    return time(h, m)


def parse_date(s: str) -> date:
    """Parse date string YYYY-MM-DD."""
    parts = s.strip().split("-")
    return date(int(parts[0]), int(parts[1]), int(parts[2]))


def _yaml_time(value) -> time:
    # Unquoted 10:30 loads as the base-60 integer 630.
    if isinstance(value, int):
        return time(*divmod(value, 60))
    return parse_time(str(value))


def _parse_days(values, path: Path) -> list[DayOfWeek]:
    days = set()
    for d in values or []:
        try:
            days.add(DayOfWeek.from_str(str(d)))
        except KeyError:
            raise ConfigurationError(f"{path}: unknown day {d!r} in schedule.days") from None
    return sorted(days, key=lambda d: d.value)


def _parse_times(values, path: Path) -> list[time]:
    times = set()
    for t in values or []:
        try:
            times.add(_yaml_time(t))
        except ValueError:
            raise ConfigurationError(f"{path}: invalid time {t!r} in schedule.times") from None
    return sorted(times)


def _parse_team(entry, group: str, position: int) -> Team:
    """Build a Team from a plain name or a mapping.

    Mappings may carry id, short_name and the disciplinary counters
    yellow_cards, blue_cards and red_cards.
    """
    if isinstance(entry, dict):
        return Team(
            id=str(entry.get("id") or f"{group}{position}"),
            name=str(entry["name"]),
            short_name=str(entry.get("short_name", "")),
            group=group,
            yellow_cards=int(entry.get("yellow_cards", 0)),
            blue_cards=int(entry.get("blue_cards", 0)),
            red_cards=int(entry.get("red_cards", 0)),
        )
    return Team(id=f"{group}{position}", name=str(entry), group=group)


def load_config(path: str | Path) -> dict:
    """Load and validate a tournament YAML file.

    Returns dict with:
    - tournament: {id, name, start_date}
    - points: PointsRules
    - game_days: list[DayOfWeek], in weekday order
    - time_slots: list[time], ascending
    - groups: dict[letter -> list[Team]], in file order within a group
    - teams: dict[id -> Team]

    Raises ConfigurationError when no calendar can be built from the file.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    # Tournament
    traw = raw.get("tournament", {})
    start = traw.get("start_date")
    tournament = {
        "id": str(traw.get("id", path.stem)),
        "name": traw.get("name", ""),
        "start_date": parse_date(str(start)) if start else None,
    }

    praw = traw.get("points", {})
    points = PointsRules(
        win=int(praw.get("win", 3)),
        draw=int(praw.get("draw", 1)),
        loss=int(praw.get("loss", 0)),
    )

    # Schedule
    sraw = raw.get("schedule", {})
    game_days = _parse_days(sraw.get("days"), path)
    time_slots = _parse_times(sraw.get("times"), path)
    if not game_days:
        raise ConfigurationError(f"{path}: schedule.days must list at least one day")
    if not time_slots:
        raise ConfigurationError(f"{path}: schedule.times must list at least one time")

    # Groups
    groups: dict[str, list[Team]] = {}
    teams: dict[str, Team] = {}
    for label, entries in (raw.get("groups") or {}).items():
        label = str(label).upper()
        if label not in GROUP_LETTERS:
            raise ConfigurationError(
                f"{path}: unknown group {label!r} (expected one of "
                f"{', '.join(GROUP_LETTERS)})"
            )
        members = []
        for i, entry in enumerate(entries or [], 1):
            try:
                team = _parse_team(entry, label, i)
            except KeyError as e:
                raise ConfigurationError(
                    f"{path}: team {i} of group {label} is missing {e.args[0]!r}"
                ) from None
            except ValueError:
                raise ConfigurationError(
                    f"{path}: team {i} of group {label} has a non-integer card count"
                ) from None
            if team.id in teams:
                print(f"Warning: duplicate team id {team.id} in group {label}; skipped")
                continue
            teams[team.id] = team
            members.append(team)
        groups[label] = members

    if len(teams) > MAX_TEAMS:
        raise ConfigurationError(
            f"{path}: {len(teams)} teams exceeds the maximum of {MAX_TEAMS}"
        )

    return {
        "tournament": tournament,
        "points": points,
        "game_days": game_days,
        "time_slots": time_slots,
        "groups": groups,
        "teams": teams,
    }
