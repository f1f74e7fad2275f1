"""
Create all database tables.

Usage:
    python -m elham.scripts.create_tables

Dependencies: elham.boundary.db
System role: Schema bootstrap for a fresh database
"""

import asyncio
import logging

from elham.boundary.db import models  # noqa: F401  (registers tables)
from elham.boundary.db.base import Base
from elham.boundary.db.connection import get_async_engine
from elham.configs import get_settings
from elham.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_tables() -> None:
    engine = get_async_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})
    finally:
        await engine.dispose()


if __name__ == "__main__":
    configure_logging(get_settings().log_level)
    asyncio.run(create_tables())
