import asyncio
import logging
import sys
import os

# Add current directory to path to allow imports from core, models, etc.
sys.path.append(os.getcwd())

from core.config import settings
from core.database import Database

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def init_database():
    database = Database(settings.database_url, echo=True)
    logger.info(f"Creating tables at {database.url}")

    try:
        await database.create_all()
        logger.info("Tables created successfully.")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(init_database())
