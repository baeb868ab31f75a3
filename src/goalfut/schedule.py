#!/usr/bin/env python3
"""GoalFut tournament calendar and standings tool.

Generate mode (default):
    goalfut [config.yaml] [--today YYYY-MM-DD] [-o DIR]

    Builds the group-stage calendar from the YAML config and writes:
      {DIR}/schedule.txt  - Human-readable calendar (by date + per team)
      {DIR}/matches.csv   - Match rows ready to load into the backend

Standings mode:
    goalfut [config.yaml] --standings <results.csv>

    Tallies finished matches from the results CSV and prints the ranked
    table of every group.

Examples:
    goalfut                                  # default config, starts today
    goalfut copa.yaml --today 2026-03-07 -o copa
    goalfut copa.yaml --standings copa/matches.csv
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

from goalfut.config import load_config, parse_date
from goalfut.constraints import format_validation_report, validate_schedule
from goalfut.errors import ConfigurationError
from goalfut.output import format_standings, write_schedule
from goalfut.results import parse_results_csv
from goalfut.scheduler import schedule_tournament
from goalfut.standings import standings_by_group, tally_results


def _generate(config: dict, today: date, output_prefix: str) -> int:
    tournament = config["tournament"]
    print(f"Generating calendar (from {today})...")
    matches = schedule_tournament(
        tournament["id"], config["groups"],
        config["game_days"], config["time_slots"], today,
    )

    if not matches:
        print("Error: no matches were scheduled!")
        return 1

    print("\nValidating...")
    result = validate_schedule(matches, config["groups"])
    print(format_validation_report(result))

    print("\nWriting output files...")
    write_schedule(matches, config["teams"], output_prefix=output_prefix,
                   title=tournament["name"])

    if result["valid"]:
        print(f"\nCalendar generated: {len(matches)} matches.")
        return 0
    print(f"\nCalendar has {len(result['errors'])} constraint violations.")
    return 1


def _standings(config: dict, results_path: str) -> int:
    print(f"Reading results from {results_path}...")
    matches = parse_results_csv(results_path, config["tournament"]["id"])
    finished = [m for m in matches if m.is_finished]
    print(f"Loaded {len(matches)} matches ({len(finished)} finished)")

    teams = tally_results(list(config["teams"].values()), matches,
                          config["points"])
    for label, table in standings_by_group(teams, finished).items():
        print()
        print(format_standings(table, title=f"Group {label}" if label else ""))
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="GoalFut tournament calendar and standings tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Output files (generate mode):
  {prefix}/schedule.txt   Human-readable calendar (by date + per team)
  {prefix}/matches.csv    Match rows for the backend

Exit codes:
  0  Success
  1  Configuration error, or constraint violations in the calendar
""",
    )
    parser.add_argument(
        "config", nargs="?", default="config.yaml",
        help="Path to tournament YAML file (default: config.yaml)"
    )
    parser.add_argument(
        "--today", default=None,
        help="Reference date YYYY-MM-DD; the first match falls on the first "
             "enabled game day on or after it (default: today)"
    )
    parser.add_argument(
        "--output-prefix", "-o", default="output",
        help="Output directory for generated files (default: output/)"
    )
    parser.add_argument(
        "--standings", metavar="CSV",
        help="Print standings from a results CSV instead of generating"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Log scheduling and ranking decisions"
    )
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format="%(levelname)s %(name)s: %(message)s")

    config_path = args.config
    if not Path(config_path).exists():
        print(f"Error: config file {config_path} not found")
        sys.exit(1)

    print(f"Loading config from {config_path}...")
    try:
        config = load_config(config_path)
        if args.standings:
            if not Path(args.standings).exists():
                print(f"Error: {args.standings} not found")
                sys.exit(1)
            sys.exit(_standings(config, args.standings))

        if args.today:
            today = parse_date(args.today)
        else:
            today = config["tournament"]["start_date"] or date.today()
        sys.exit(_generate(config, today, args.output_prefix))
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
