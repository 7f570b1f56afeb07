"""
Create all catalog tables

    python -m scripts.init_db [--database-url URL]
"""

import argparse
import asyncio
import logging

from core.config import settings
from core.database import build_engine, create_tables
from core.logging import setup_logging

logger = logging.getLogger(__name__)


async def init_database(database_url: str):
    logger.info("Connecting to database...")
    engine = build_engine(database_url)

    try:
        await create_tables(engine)
        logger.info("Tables created successfully.")
    finally:
        await engine.dispose()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the reloading catalog tables")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    args = parser.parse_args(argv)

    setup_logging()
    asyncio.run(init_database(args.database_url))


if __name__ == "__main__":
    main()
