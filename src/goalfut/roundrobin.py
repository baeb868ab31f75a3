"""Round-robin pairing generation for group play."""

from typing import Optional

from goalfut.models import Pairing, Team


def generate_pairings(teams: list[Team], group: str = "") -> list[Pairing]:
    """Generate a full round-robin for one group using the circle method.

    The last position is the fixed anchor; every other position rotates.
    For an odd number of teams a bye placeholder takes the anchor spot and
    any pairing against it is dropped, so the output never references it.

    Output is round-major, then slot-major, and depends only on the order
    of ``teams``. Reordering the input gives a different (equally valid)
    schedule, so callers that want a reproducible calendar must pass a
    reproducible team order.
    """
    n = len(teams)
    if n < 2:
        return []

    slots: list[Optional[Team]] = list(teams)
    if n % 2 == 1:
        slots.append(None)

    m = len(slots)
    rotating = m - 1
    pairings = []
    for r in range(rotating):
        for s in range(m // 2):
            home = (r + s) % rotating
            if s == 0:
                away = m - 1
            else:
                away = (m - 1 - s + r) % rotating

            home_team = slots[home]
            away_team = slots[away]
            if home_team is None or away_team is None:
                continue
            pairings.append(Pairing(
                group=group,
                home=home_team,
                away=away_team,
                round_index=r,
            ))

    return pairings


def pairings_by_round(pairings: list[Pairing]) -> dict[int, list[Pairing]]:
    """Bucket pairings by round index, keeping their order."""
    rounds: dict[int, list[Pairing]] = {}
    for p in pairings:
        rounds.setdefault(p.round_index, []).append(p)
    return rounds


def verify_round_robin(pairings: list[Pairing], teams: list[Team]) -> dict:
    """Verify a round-robin is valid and complete.

    Returns dict with:
    - valid: bool
    - errors: list of error strings
    - matchup_counts: dict of (team_a, team_b) -> count
    - games_per_team: dict of team id -> game count
    """
    errors = []
    matchup_counts: dict[tuple[str, str], int] = {}
    games_per_team: dict[str, int] = {t.id: 0 for t in teams}

    for round_index, round_pairings in pairings_by_round(pairings).items():
        teams_in_round = set()
        for p in round_pairings:
            h, a = p.home.id, p.away.id
            if h == a:
                errors.append(f"Round {round_index}: {h} plays itself")
            for t in (h, a):
                if t in teams_in_round:
                    errors.append(f"Round {round_index}: {t} appears twice")
                teams_in_round.add(t)

            key = tuple(sorted([h, a]))
            matchup_counts[key] = matchup_counts.get(key, 0) + 1
            games_per_team[h] = games_per_team.get(h, 0) + 1
            games_per_team[a] = games_per_team.get(a, 0) + 1

    ids = [t.id for t in teams]
    for i, t1 in enumerate(ids):
        for t2 in ids[i + 1:]:
            key = tuple(sorted([t1, t2]))
            count = matchup_counts.get(key, 0)
            if count != 1:
                errors.append(f"{t1} vs {t2}: played {count} times (expected 1)")

    expected = len(ids) - 1
    for t in ids:
        if games_per_team[t] != expected and len(ids) >= 2:
            errors.append(
                f"{t}: {games_per_team[t]} games (expected {expected})"
            )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "matchup_counts": matchup_counts,
        "games_per_team": games_per_team,
    }
