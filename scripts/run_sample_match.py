#!/usr/bin/env python3
"""Sample matching harness.

Seeds a throwaway SQLite directory from the sample supporter file, then runs
the sample client preferences against it and prints each ranking with its
score breakdown. Useful for eyeballing weight changes without pytest.

Usage:
    # Run every file in docs/sample_preferences/
    python scripts/run_sample_match.py

    # One preferences file, custom weights
    python scripts/run_sample_match.py --preferences docs/sample_preferences/stress.yaml --config config.yaml
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from peermatch.config.exceptions import ConfigurationError
from peermatch.config.loader import load_config
from peermatch.directory import (
    DirectoryError,
    SupporterDirectory,
    close_database,
    get_session,
    init_database,
    load_preferences_file,
)
from peermatch.logging.config import configure_logging
from peermatch.matching import SupporterMatcher
from peermatch.reporting import ReportRenderer
from tests.helpers.directory import seed_directory_from_file


def print_header(title: str):
    """Print a formatted section header."""
    width = 80
    print("\n" + "=" * width)
    print(f" {title}")
    print("=" * width + "\n")


def print_breakdown_table(results):
    """Print per-term points for each ranked supporter."""
    if not results:
        return

    columns = ("Supporter", "Spec", "Sess", "Time", "Appr", "Live", "Total")
    name_width = max(len(columns[0]), *(len(r.full_name) for r in results))

    print("┌" + "─" * (name_width + 2) + ("┬" + "─" * 7) * 6 + "┐")
    print(f"│ {columns[0]:<{name_width}} │" + "".join(f" {c:>5} │" for c in columns[1:]))
    print("├" + "─" * (name_width + 2) + ("┼" + "─" * 7) * 6 + "┤")

    for result in results:
        b = result.breakdown
        values = (b.specialty, b.session_type, b.availability, b.approach, b.live_availability)
        cells = "".join(f" {v:>5.1f} │" for v in values)
        print(f"│ {result.full_name:<{name_width}} │{cells} {result.compatibility_score:>5} │")

    print("└" + "─" * (name_width + 2) + ("┴" + "─" * 7) * 6 + "┘")


def main():
    """Main entry point for the sample matching harness."""
    parser = argparse.ArgumentParser(
        description="Run the sample client preferences against the sample supporters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--supporters",
        type=Path,
        default=Path("docs/sample_supporters.yaml"),
        help="Supporter rows to seed (default: docs/sample_supporters.yaml)",
    )
    parser.add_argument(
        "--preferences",
        type=Path,
        default=None,
        help="Single preferences file (default: every file in docs/sample_preferences/)",
    )
    parser.add_argument(
        "--database",
        type=Path,
        default=Path("data/sample_directory.db"),
        help="Path to SQLite database (default: data/sample_directory.db)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file with matching weights",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: WARNING)",
    )

    args = parser.parse_args()
    load_dotenv()

    if args.preferences:
        preference_files = [args.preferences]
    else:
        preference_files = sorted(Path("docs/sample_preferences").glob("*.yaml"))

    if not preference_files:
        print("❌ No preference files found")
        return 1

    try:
        app_config, _ = load_config(args.config)
        configure_logging(level=args.log_level, format_type=app_config.logging.format)

        if args.database.exists():
            args.database.unlink()
        database_url = f"sqlite:///{args.database.absolute()}"

        print_header("peermatch - Sample Matching Harness")
        print(f"Supporters: {args.supporters}")
        print(f"Database: {args.database}")

        init_database(database_url, create_tables=True)
        with get_session() as session:
            seeded = seed_directory_from_file(session, args.supporters)
            session.commit()
        print(f"✓ Seeded {seeded} supporter profiles")

        with get_session() as session:
            candidates = SupporterDirectory(session).list_candidates(
                onboarded_only=app_config.matching.require_onboarding
            )
        print(f"✓ {len(candidates)} supporters loaded from directory")

        matcher = SupporterMatcher(app_config.matching)
        renderer = ReportRenderer()

        for preference_file in preference_files:
            print_header(f"Preferences: {preference_file.name}")
            preferences = load_preferences_file(preference_file)
            results = matcher.match(candidates, preferences)
            print(renderer.render(results, preferences))
            print_breakdown_table(results)

        close_database()
        print(f"\nTo clean up: rm {args.database.absolute()}")
        return 0

    except (ConfigurationError, DirectoryError) as e:
        print(f"\n❌ Error: {e}")
        close_database()
        return 1


if __name__ == "__main__":
    sys.exit(main())
