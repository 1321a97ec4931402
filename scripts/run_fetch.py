"""
Script to fetch remote collections into the local database
"""

import argparse
import asyncio
import sys
import os
import logging

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.database import Database
from core.exceptions import ServiceError
from core.logging import setup_logging
from ingestion.extractors.api_extractor import RemoteFetcher
from ingestion.runner import FetchRunner
from models.base import Endpoint

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Fetch JSONPlaceholder collections into the database")
    parser.add_argument(
        "endpoints",
        nargs="*",
        default=Endpoint.values(),
        help="Endpoints to fetch (default: all six, parents first)"
    )
    parser.add_argument("--user-id", dest="userId")
    parser.add_argument("--post-id", dest="postId")
    parser.add_argument("--album-id", dest="albumId")
    return parser.parse_args(argv)


async def run_fetch(args) -> int:
    """Run the fetch pipeline for every requested endpoint"""
    database = Database(settings.database_url)
    fetcher = RemoteFetcher()
    filters = {"userId": args.userId, "postId": args.postId, "albumId": args.albumId}
    failures = 0

    try:
        await database.create_all()

        async with database.session_maker() as session:
            runner = FetchRunner(session, fetcher)

            for endpoint in args.endpoints:
                try:
                    result = await runner.run(endpoint, filters)
                    logger.info(
                        f"Fetched {endpoint}: items={result['items_stored']}, "
                        f"audit_id={result['saved_id']}"
                    )
                except ServiceError as e:
                    failures += 1
                    logger.error(f"Fetch failed for {endpoint}: {e.message}")
                    continue

        logger.info("All fetch jobs completed")
    finally:
        await database.dispose()

    return 1 if failures else 0


if __name__ == "__main__":
    setup_logging()
    sys.exit(asyncio.run(run_fetch(parse_args())))
