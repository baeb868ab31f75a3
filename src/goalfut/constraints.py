"""Calendar validation for GoalFut.

Checks a generated list of matches against the group-stage invariants.
"""

from collections import defaultdict

from goalfut.models import Match, MatchStatus, Team


def validate_schedule(matches: list[Match],
                      groups: dict[str, list[Team]]) -> dict:
    """Validate a calendar against all constraints.

    Returns dict with:
    - valid: bool (True if no hard constraint violations)
    - errors: list of hard constraint violations
    - warnings: list of soft issues
    """
    errors = []
    warnings = []

    team_group = {t.id: label for label, members in groups.items() for t in members}

    games_per_team = defaultdict(int)
    matchup_counts = defaultdict(int)
    slot_usage = defaultdict(list)
    matchdays_per_group = defaultdict(set)

    for m in matches:
        h = m.home_id
        a = m.away_id
        label = f"{h} vs {a}"

        if not h or not a:
            errors.append(f"Match with a missing team: {label}")
            continue
        if h == a:
            errors.append(f"{h} plays itself on {m.date}")
            continue
        if h not in team_group:
            errors.append(f"Unknown home team: {h}")
            continue
        if a not in team_group:
            errors.append(f"Unknown away team: {a}")
            continue
        if team_group[h] != team_group[a]:
            errors.append(f"{label}: teams from groups {team_group[h]} and {team_group[a]}")
        elif m.group != team_group[h]:
            errors.append(f"{label}: labelled group {m.group}, teams are in {team_group[h]}")

        if m.status is not MatchStatus.SCHEDULED:
            errors.append(f"{label}: status {m.status.value}, expected programado")

        games_per_team[h] += 1
        games_per_team[a] += 1
        matchup_counts[tuple(sorted([h, a]))] += 1
        slot_usage[(m.date, m.time)].append(label)
        matchdays_per_group[m.group].add(m.matchday)

    for (d, t), labels in sorted(slot_usage.items()):
        if len(labels) > 1:
            errors.append(
                f"{d} {t.strftime('%H:%M')}: {len(labels)} matches share the slot "
                f"({', '.join(labels)})"
            )

    for glabel, members in groups.items():
        if len(members) < 2:
            warnings.append(f"Group {glabel} has {len(members)} team(s); no matches")
            continue
        ids = [t.id for t in members]
        for i, t1 in enumerate(ids):
            for t2 in ids[i + 1:]:
                count = matchup_counts.get(tuple(sorted([t1, t2])), 0)
                if count != 1:
                    errors.append(f"{t1} vs {t2}: played {count} times (expected 1)")
        expected = len(ids) - 1
        for t in ids:
            if games_per_team[t] != expected:
                errors.append(f"{t}: {games_per_team[t]} matches (expected {expected})")
        if len(matchdays_per_group[glabel]) > 1:
            warnings.append(
                f"Group {glabel} spans matchdays "
                f"{sorted(matchdays_per_group[glabel])}"
            )

    return {
        "valid": len(errors) == 0,
        "errors": errors,
        "warnings": warnings,
    }


def format_validation_report(result: dict) -> str:
    """Format validation results as text."""
    lines = []
    lines.append("=" * 60)
    lines.append("CALENDAR VALIDATION REPORT")
    lines.append("=" * 60)

    if result["valid"]:
        lines.append("\nRESULT: VALID (no hard constraint violations)")
    else:
        lines.append(f"\nRESULT: INVALID ({len(result['errors'])} violations)")

    if result["errors"]:
        lines.append(f"\n--- ERRORS ({len(result['errors'])}) ---")
        for e in result["errors"]:
            lines.append(f"  ERROR: {e}")

    if result["warnings"]:
        lines.append(f"\n--- WARNINGS ({len(result['warnings'])}) ---")
        for w in result["warnings"]:
            lines.append(f"  WARN: {w}")

    return "\n".join(lines)
