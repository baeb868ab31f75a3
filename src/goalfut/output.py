"""Output formatters for GoalFut."""

import csv
from datetime import date
from io import StringIO
from pathlib import Path

from goalfut.models import Match, Team
from goalfut.standings import fair_play_score


def group_matches_by_date(matches: list[Match]) -> dict[date, list[Match]]:
    """Bucket matches by date (ascending), each day sorted by time."""
    by_date: dict[date, list[Match]] = {}
    for m in matches:
        by_date.setdefault(m.date, []).append(m)
    return {d: sorted(by_date[d], key=lambda m: m.time) for d in sorted(by_date)}


def format_schedule(matches: list[Match], teams: dict[str, Team],
                    title: str = "") -> str:
    """Format the calendar as human-readable text, organized by date."""
    def _name(team_id: str) -> str:
        return teams[team_id].name if team_id in teams else team_id

    lines = []
    lines.append("=" * 72)
    lines.append((title or "TOURNAMENT CALENDAR").upper())
    lines.append("=" * 72)

    for d, day_matches in group_matches_by_date(matches).items():
        lines.append(f"\n  {d.strftime('%A')} {d.strftime('%Y-%m-%d')}")
        for m in day_matches:
            lines.append(
                f"    {m.time.strftime('%H:%M')}  [{m.group or '-'}] J{m.matchday:<2} "
                f"{_name(m.home_id):<20} vs {_name(m.away_id)}"
            )

    # Per-team schedule
    lines.append("\n" + "=" * 72)
    lines.append("PER-TEAM SCHEDULES")
    lines.append("=" * 72)

    by_team: dict[str, list[Match]] = {}
    for m in matches:
        by_team.setdefault(m.home_id, []).append(m)
        by_team.setdefault(m.away_id, []).append(m)

    for team_id in sorted(by_team, key=lambda t: _name(t).casefold()):
        lines.append(f"\n{_name(team_id)}:")
        team_matches = sorted(by_team[team_id], key=lambda m: (m.date, m.time))
        for i, m in enumerate(team_matches, 1):
            is_home = m.home_id == team_id
            opponent = m.away_id if is_home else m.home_id
            h_a = "L" if is_home else "V"
            lines.append(
                f"  {i:>2}. {m.date.strftime('%a %d/%m')} {m.time.strftime('%H:%M')} "
                f"{h_a} vs {_name(opponent)}"
            )

    return "\n".join(lines)


def format_standings(table: list[Team], title: str = "") -> str:
    """Format a ranked table. Order is taken as given."""
    lines = []
    if title:
        lines.append(f"--- {title} ---")
    lines.append(f"{'#':>2} {'Team':<20} {'PJ':>3} {'G':>3} {'E':>3} {'P':>3} "
                 f"{'GF':>3} {'GC':>3} {'DG':>4} {'FP':>3} {'Pts':>4}")
    lines.append("-" * 62)
    for pos, t in enumerate(table, 1):
        lines.append(
            f"{pos:>2} {t.name[:20]:<20} {t.played:>3} {t.won:>3} {t.drawn:>3} "
            f"{t.lost:>3} {t.goals_for:>3} {t.goals_against:>3} "
            f"{t.goal_difference:>+4} {fair_play_score(t):>3} {t.points:>4}"
        )
    return "\n".join(lines)


MATCH_CSV_COLUMNS = [
    "tournament_id", "home_id", "away_id", "group", "matchday",
    "date", "time", "status", "phase", "home_goals", "away_goals",
]


def format_matches_csv(matches: list[Match]) -> str:
    """Format matches as CSV rows ready for the persistence layer."""
    output = StringIO()
    writer = csv.writer(output)
    writer.writerow(MATCH_CSV_COLUMNS)

    for m in matches:
        writer.writerow([
            m.tournament_id, m.home_id, m.away_id, m.group, m.matchday,
            m.date.isoformat() if m.date else "",
            m.time.strftime("%H:%M"),
            m.status.value, m.phase,
            "" if m.home_goals is None else m.home_goals,
            "" if m.away_goals is None else m.away_goals,
        ])

    return output.getvalue()


def write_schedule(matches: list[Match], teams: dict[str, Team],
                   output_prefix: str = "output", title: str = ""):
    """Write all output files into {output_prefix}/ directory."""
    out_dir = Path(output_prefix)
    out_dir.mkdir(parents=True, exist_ok=True)

    schedule_path = out_dir / "schedule.txt"
    schedule_path.write_text(format_schedule(matches, teams, title=title))
    print(f"Written: {schedule_path}")

    csv_path = out_dir / "matches.csv"
    csv_path.write_text(format_matches_csv(matches))
    print(f"Written: {csv_path}")
