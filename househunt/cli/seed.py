"""CLI entry point for seeding the demonstration dataset.

Creates the tables in the configured database (DATABASE_URL) and seeds the
demonstration data when the store is empty.

Usage:
    python -m househunt.cli.seed
    househunt-seed

Exit Codes:
    0 - Success: tables exist; data seeded or already present
    1 - Failure: error encountered; seeding rolled back
"""

import logging
import sys

from dotenv import load_dotenv

from househunt.services.logging import setup_server_logging

logger = logging.getLogger("househunt.seed")


def main() -> int:
    """
    Main entry point for the seeding CLI.

    Returns:
        Exit code: 0 for success, 1 for failure
    """
    load_dotenv()
    setup_server_logging()
    logger.info("Starting demonstration data seed...")

    try:
        from househunt.services import SessionLocal, init_database
        from househunt.services.seeding import seed_demo_data

        init_database(seed=False)

        db = SessionLocal()
        try:
            result = seed_demo_data(db, logger)
        finally:
            db.close()

        logger.info(str(result))
        return 0

    except KeyboardInterrupt:
        logger.warning("Seed interrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Seed failed: {e}", exc_info=True)
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
