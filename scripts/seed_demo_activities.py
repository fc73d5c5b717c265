#!/usr/bin/env python3
"""
Seed the activity store with a week of demo activities.

Replaces the whole activity log in the dashboard's SQLite store with
synthetic history for one patient, or clears it.

Usage:
    python scripts/seed_demo_activities.py
    python scripts/seed_demo_activities.py --patient-id patient_002
    python scripts/seed_demo_activities.py --clear
"""
import argparse
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Base directory (project root)
BASE_DIR = Path(__file__).parent.parent
SRC = BASE_DIR / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from activity_tracker import ActivityLog, SQLiteStorage, SummaryEngine, seed_demo_activities  # noqa: E402

# Load environment variables
load_dotenv()


def default_db_path() -> str:
    """Database file the dashboard API uses, from the same environment variables."""
    data_path = os.getenv("ACTIVITY_DATA_PATH", os.getenv("DATA_PATH", str(BASE_DIR)))
    return os.path.join(data_path, "activities.db")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Seed or clear the caregiver activity store",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Seed demo history for the default demo patient
  python scripts/seed_demo_activities.py

  # Seed a specific patient into a custom database file
  python scripts/seed_demo_activities.py --patient-id patient_002 --db-path /tmp/activities.db

  # Remove every stored activity
  python scripts/seed_demo_activities.py --clear
        """,
    )
    parser.add_argument(
        "--patient-id",
        default=os.getenv("ACTIVITY_DEMO_PATIENT_ID", "patient_001"),
        help="Patient to seed demo data for",
    )
    parser.add_argument(
        "--db-path",
        default=default_db_path(),
        help="SQLite database holding the activity log (default: ACTIVITY_DATA_PATH/activities.db)",
    )
    parser.add_argument(
        "--storage-key",
        default=os.getenv("ACTIVITY_STORAGE_KEY", "caregiver_activities"),
        help="Key the log is stored under",
    )
    parser.add_argument("--clear", action="store_true", help="Clear the log instead of seeding")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None) -> int:
    """Seed or clear the activity log."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    activity_log = ActivityLog(SQLiteStorage(args.db_path), storage_key=args.storage_key)

    if args.clear:
        activity_log.clear()
        print(f"Cleared activity log in {args.db_path}")
        return 0

    count = seed_demo_activities(activity_log, args.patient_id)
    weekly = SummaryEngine(activity_log).weekly_summary(args.patient_id)

    print("=" * 60)
    print(f"Seeded {count} demo activities for {args.patient_id}")
    print("=" * 60)
    for day, day_count in weekly.daily_breakdown.items():
        print(f"  {day}: {day_count} activities")
    print(f"\nMost active period: {weekly.most_active_period.value}")
    print(f"Database: {args.db_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
