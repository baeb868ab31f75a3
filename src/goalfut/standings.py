"""Standings: result tallying, tie-breaking and ranking.

Tiebreakers, in order:
1. Points (higher first)
2. Goal difference (higher first)
3. Goals for (higher first)
4. Fair-play score (lower first): red x3 + blue x2 + yellow x1
5. Team name, case-insensitive

When finished matches are supplied, teams level on points alone are then
re-examined head-to-head. Only two-team ties are resolved that way.
"""

import logging
import warnings
from dataclasses import replace
from typing import Optional

from goalfut.errors import UnresolvedTieWarning
from goalfut.models import Match, PointsRules, Team

logger = logging.getLogger(__name__)


def fair_play_score(team: Team) -> int:
    return team.red_cards * 3 + team.blue_cards * 2 + team.yellow_cards


def _standings_key(team: Team) -> tuple:
    # Raw name and id keep the order total when names differ only by case.
    return (
        -team.points,
        -team.goal_difference,
        -team.goals_for,
        fair_play_score(team),
        team.name.casefold(),
        team.name,
        team.id,
    )


def sort_by_standings(teams: list[Team]) -> list[Team]:
    """Order teams by criteria 1-5, best first."""
    return sorted(teams, key=_standings_key)


def _find_head_to_head(team_a: Team, team_b: Team,
                       matches: list[Match]) -> Optional[Match]:
    for m in matches:
        if m.is_finished and m.is_between(team_a.id, team_b.id):
            return m
    return None


def resolve_head_to_head(tied: list[Team], matches: list[Match]) -> list[Team]:
    """Reorder a cluster of teams level on points by their direct result.

    Only a cluster of exactly two teams is resolved: the winner of their
    finished match goes first. A draw, a missing match, or a cluster of any
    other size leaves the incoming order untouched.
    """
    if len(tied) != 2:
        if len(tied) > 2:
            warnings.warn(
                f"{len(tied)}-way tie on {tied[0].points} points left in base order: "
                + ", ".join(t.name for t in tied),
                UnresolvedTieWarning,
                stacklevel=2,
            )
        return list(tied)

    first, second = tied
    match = _find_head_to_head(first, second, matches)
    if match is None:
        warnings.warn(
            f"No finished match between {first.name} and {second.name}; "
            f"tie left in base order",
            UnresolvedTieWarning,
            stacklevel=2,
        )
        return [first, second]

    first_goals = match.goals_for(first.id)
    second_goals = match.goals_for(second.id)
    if second_goals > first_goals:
        logger.debug("Head-to-head: %s over %s (%d-%d)",
                     second.name, first.name, second_goals, first_goals)
        return [second, first]
    return [first, second]


def rank_standings(teams: list[Team],
                   matches: Optional[list[Match]] = None) -> list[Team]:
    """Produce the official standings, best first.

    Without match history this is sort_by_standings. With it, each run of
    teams sharing a points total goes through resolve_head_to_head; a team
    never moves past a team with a different points total.
    """
    ordered = sort_by_standings(teams)
    if not matches:
        return ordered

    result = []
    i = 0
    while i < len(ordered):
        j = i + 1
        while j < len(ordered) and ordered[j].points == ordered[i].points:
            j += 1
        cluster = ordered[i:j]
        if len(cluster) == 1:
            result.extend(cluster)
        else:
            result.extend(resolve_head_to_head(cluster, matches))
        i = j

    return result


def standings_by_group(teams: list[Team],
                       matches: Optional[list[Match]] = None) -> dict[str, list[Team]]:
    """Rank each group separately; labels sorted, ungrouped teams under ''."""
    groups: dict[str, list[Team]] = {}
    for t in teams:
        groups.setdefault(t.group, []).append(t)

    tables = {}
    for label in sorted(groups):
        ids = {t.id for t in groups[label]}
        group_matches = None
        if matches:
            group_matches = [m for m in matches
                             if m.home_id in ids and m.away_id in ids]
        tables[label] = rank_standings(groups[label], group_matches)
    return tables


def tally_results(teams: list[Team], matches: list[Match],
                  rules: PointsRules = PointsRules()) -> list[Team]:
    """Recompute points and goal counters from finished matches.

    Returns new Team objects in input order. Card counts are carried over
    unchanged; matches involving unknown team ids are ignored.
    """
    counters = {
        t.id: dict(points=0, played=0, won=0, drawn=0, lost=0,
                   goals_for=0, goals_against=0)
        for t in teams
    }

    for m in matches:
        if not m.is_finished:
            continue
        if m.home_id not in counters or m.away_id not in counters:
            logger.debug("Skipping match %s vs %s: unknown team",
                         m.home_id, m.away_id)
            continue

        for team_id in (m.home_id, m.away_id):
            c = counters[team_id]
            gf = m.goals_for(team_id)
            ga = m.goals_against(team_id)
            c["played"] += 1
            c["goals_for"] += gf
            c["goals_against"] += ga
            if gf > ga:
                c["won"] += 1
                c["points"] += rules.win
            elif gf == ga:
                c["drawn"] += 1
                c["points"] += rules.draw
            else:
                c["lost"] += 1
                c["points"] += rules.loss

    return [replace(t, **counters[t.id]) for t in teams]
