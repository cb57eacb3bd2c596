from ..database import DatabaseManager
from ..logger import get_logger
import asyncio

logger = get_logger()

async def startup_event():
    """Initialize the score store"""
    db = await DatabaseManager.get_instance()
    try:
        await db.initialize()
        logger.info("Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

async def shutdown_event():
    """Close database connections"""
    db = await DatabaseManager.get_instance()
    try:
        # Set a timeout for the shutdown process
        async with asyncio.timeout(5.0):
            await db.close()
            logger.info("Database connections closed")
    except asyncio.TimeoutError:
        logger.warning("Shutdown timed out, database connections may not be closed cleanly")
