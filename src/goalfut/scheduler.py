"""Calendar assignment for GoalFut.

Two phases:
1. Generate round-robin pairings per group (roundrobin.py)
2. Slot assignment — walk enabled game days and time slots in order,
   giving every pairing a concrete date and time

The reference date is always passed in; nothing here reads the clock.
All pairings of one group share one matchday label, and the label counts
groups, not rounds.
"""

import logging
import warnings
from datetime import date, time, timedelta
from typing import Iterable

from goalfut.errors import ConfigurationError, DegenerateGroupWarning
from goalfut.models import DayOfWeek, Match, MatchStatus, Pairing, Team
from goalfut.roundrobin import generate_pairings

logger = logging.getLogger(__name__)


def next_game_day(d: date, game_days: set[DayOfWeek],
                  inclusive: bool = True) -> date:
    """Return the first date on or after ``d`` that falls on a game day.

    With ``inclusive=False`` the search starts the day after ``d``.
    """
    if not game_days:
        raise ConfigurationError("No game days enabled")
    current = d if inclusive else d + timedelta(days=1)
    while DayOfWeek.of(current) not in game_days:
        current += timedelta(days=1)
    return current


def _check_slots(game_days: Iterable[DayOfWeek],
                 time_slots: Iterable[time]) -> tuple[set[DayOfWeek], list[time]]:
    days = set(game_days)
    times = sorted(set(time_slots))
    if not days:
        raise ConfigurationError("At least one game day is required")
    if not times:
        raise ConfigurationError("At least one time slot is required")
    return days, times


def assign_calendar(tournament_id: str,
                    group_pairings: list[list[Pairing]],
                    game_days: Iterable[DayOfWeek],
                    time_slots: Iterable[time],
                    today: date) -> list[Match]:
    """Assign a date and time to every pairing, group by group.

    Time slots are used in ascending order; when they run out the cursor
    moves to the next enabled game day. The slot index carries over from
    one group to the next, so groups never share a (date, time). Empty
    groups are skipped without consuming a matchday.

    Raises ConfigurationError when there are no game days or no time slots.
    """
    days, times = _check_slots(game_days, time_slots)

    cursor = next_game_day(today, days)
    slot_index = 0
    matchday = 1
    matches = []

    for pairings in group_pairings:
        if not pairings:
            continue

        for p in pairings:
            if slot_index >= len(times):
                slot_index = 0
                cursor = next_game_day(cursor, days, inclusive=False)

            matches.append(Match(
                tournament_id=tournament_id,
                home_id=p.home.id,
                away_id=p.away.id,
                group=p.group,
                matchday=matchday,
                date=cursor,
                time=times[slot_index],
                status=MatchStatus.SCHEDULED,
            ))
            slot_index += 1

        logger.debug("Group %s: %d matches on matchday %d, last on %s",
                     pairings[0].group, len(pairings), matchday, cursor)
        matchday += 1

    return matches


def group_teams(teams: list[Team]) -> dict[str, list[Team]]:
    """Bucket teams by group label, keeping input order within each group."""
    groups: dict[str, list[Team]] = {}
    for t in teams:
        groups.setdefault(t.group, []).append(t)
    return {g: groups[g] for g in sorted(groups)}


def schedule_tournament(tournament_id: str,
                        groups: dict[str, list[Team]],
                        game_days: Iterable[DayOfWeek],
                        time_slots: Iterable[time],
                        today: date) -> list[Match]:
    """Build the full group-stage calendar for a tournament.

    Groups are processed in the mapping's order. A group with fewer than
    two teams produces no matches and a DegenerateGroupWarning; the other
    groups are still scheduled.
    """
    days, times = _check_slots(game_days, time_slots)

    group_pairings = []
    for label, members in groups.items():
        if len(members) < 2:
            warnings.warn(
                f"Group {label} has {len(members)} team(s); no matches generated",
                DegenerateGroupWarning,
                stacklevel=2,
            )
            continue
        group_pairings.append(generate_pairings(members, group=label))

    matches = assign_calendar(tournament_id, group_pairings, days, times, today)
    logger.info("Scheduled %d matches across %d group(s)",
                len(matches), len(group_pairings))
    return matches
