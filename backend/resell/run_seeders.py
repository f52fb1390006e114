import asyncio
import logging

from resell.core.config import settings
from resell.db.database import check_connection, create_client
from resell.db.indexes import ensure_indexes
from resell.seeds.seed_demo_data import seed_demo_data

logger = logging.getLogger(__name__)


async def main():
    logger.info("Starting DB seeding...")

    client = create_client(settings)
    try:
        if not await check_connection(client, settings):
            raise SystemExit("MongoDB is not reachable; nothing seeded.")
        db = client[settings.DB_NAME]
        await ensure_indexes(db)
        await seed_demo_data(db)
    finally:
        client.close()

    logger.info("All seeders completed!")


def main_cli():
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    asyncio.run(main())


if __name__ == "__main__":
    main_cli()
