"""
Script to import a folder of GRT exports into the catalog

    python -m scripts.run_import /path/to/grt-export [--continue-on-error]
"""

import argparse
import asyncio
import logging
import sys

from core.config import settings
from core.database import build_engine, build_session_maker, create_tables
from core.logging import setup_logging
from importers.runner import ImportRunner

logger = logging.getLogger(__name__)


def print_progress(message: str):
    print(message, flush=True)


async def run_import(folder: str, database_url: str, continue_on_error: bool) -> int:
    """Run every import step; returns the process exit code"""
    engine = build_engine(database_url)
    session_maker = build_session_maker(engine)

    try:
        await create_tables(engine)

        async with session_maker() as session:
            runner = ImportRunner(session, continue_on_error=continue_on_error)
            results = await runner.run_all(folder, progress=print_progress)

        for result in results:
            print(
                f"{result['entity_type']:<14} {result['status']:<8} "
                f"processed={result['records_processed']} "
                f"created={result['records_created']} "
                f"merged={result['records_merged']}"
            )
            if "error" in result:
                print(f"    error: {result['error']}")

        if any(r["status"] == "failed" for r in results):
            return 1
        return 0

    except Exception as e:
        logger.error(f"Import failed: {str(e)}")
        return 1
    finally:
        await engine.dispose()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Import GRT JSON exports into the reloading catalog")
    parser.add_argument("folder", nargs="?", default=settings.IMPORT_FOLDER, help="Folder holding the export files")
    parser.add_argument("--database-url", default=settings.DATABASE_URL)
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        default=settings.IMPORT_CONTINUE_ON_ERROR,
        help="Keep importing the remaining files when one fails"
    )
    args = parser.parse_args(argv)

    setup_logging()
    sys.exit(asyncio.run(run_import(args.folder, args.database_url, args.continue_on_error)))


if __name__ == "__main__":
    main()
