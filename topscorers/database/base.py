import asyncio
from .connection import DatabaseConnection
from .memory import MemoryScoreStore
from .score_manager import ScoreManager
from ..config import app_config, database
from ..logger import get_logger

logger = get_logger()

class DatabaseManager:
    _instance = None
    _lock = asyncio.Lock()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DatabaseManager, cls).__new__(cls)
            cls._instance.db_connection = None
            cls._instance.store = None
            cls._instance._initialized = False
        return cls._instance

    @classmethod
    async def get_instance(cls):
        """Get the singleton instance of DatabaseManager"""
        if cls._instance is None:
            async with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self):
        """Build the configured score store"""
        if self._initialized:
            return

        if app_config.store == 'memory':
            self.store = MemoryScoreStore()
            logger.info("Using in-memory score store")
        else:
            self.db_connection = DatabaseConnection(auto_migrate=app_config.auto_migrate)
            try:
                await self.db_connection.initialize()
            except Exception as e:
                logger.error(f"Failed to initialize database manager: {e}")
                await self.close()
                raise
            self.store = ScoreManager(
                self.db_connection,
                max_retries=database.max_retries,
                retry_delay=database.retry_delay
            )
        self._initialized = True
        logger.info("Database manager initialized successfully")

    async def close(self):
        """Close all connections"""
        if self.db_connection:
            await self.db_connection.close()
        self.store = None
        self._initialized = False
        # Reset the singleton instance
        DatabaseManager._instance = None
