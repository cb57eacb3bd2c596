import asyncpg
import asyncio
from contextlib import asynccontextmanager
from ..config import database
from ..core.exceptions import StoreError
from ..logger import get_logger

logger = get_logger()

# Failures that mean the store could not be reached or refused the operation
STORE_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)

# Connection-level failures worth another attempt; constraint and data errors fail the same way every time
TRANSIENT_ERRORS = (asyncpg.PostgresConnectionError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)

class DatabaseConnection:
    def __init__(self, auto_migrate: bool = True):
        self.pool = None
        self.auto_migrate = auto_migrate
        self._connection_semaphore = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self):
        """Create the connection pool and, when enabled, the schema"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return

            try:
                self.pool = await asyncpg.create_pool(
                    host=database.host,
                    port=database.port,
                    database=database.db,
                    user=database.user,
                    password=database.password,
                    min_size=database.min_size,
                    max_size=database.max_size,
                    command_timeout=database.command_timeout,
                    max_inactive_connection_lifetime=300.0,
                    setup=self._setup_connection
                )

                self._connection_semaphore = asyncio.Semaphore(database.max_concurrent_operations)

                if self.auto_migrate:
                    await self.migrate()

                self._initialized = True
                logger.info("Database connection initialized successfully")
            except STORE_ERRORS as e:
                logger.error(f"Failed to initialize database connection: {e}")
                await self.close()
                raise StoreError(f"Failed to initialize database connection: {e}") from e

    async def migrate(self):
        """Create the scores table and its indexes if they don't exist"""
        async with self.pool.acquire() as conn:
            await conn.execute('''
                CREATE TABLE IF NOT EXISTS scores (
                    id SERIAL PRIMARY KEY,
                    first_name VARCHAR(100) NOT NULL,
                    second_name VARCHAR(200) NOT NULL,
                    score INTEGER NOT NULL
                )
            ''')
            await conn.execute('''
                CREATE INDEX IF NOT EXISTS idx_scores_score
                ON scores(score DESC)
            ''')
            await conn.execute('''
                CREATE INDEX IF NOT EXISTS idx_scores_name
                ON scores(lower(first_name), lower(second_name))
            ''')
        logger.info("Database migration completed successfully")

    async def _setup_connection(self, connection):
        """Setup connection with proper settings"""
        await connection.execute('SET statement_timeout = 30000')
        await connection.execute('SET idle_in_transaction_session_timeout = 30000')
        await connection.execute('SET lock_timeout = 10000')

    async def close(self):
        """Close database connections"""
        if self.pool:
            await self.pool.close()
            self.pool = None
        self._initialized = False

    @asynccontextmanager
    async def acquire(self, timeout=None):
        """Acquire a pooled connection, limited by the connection semaphore"""
        if not self._initialized:
            await self.initialize()
        async with self._connection_semaphore:
            async with self.pool.acquire(timeout=timeout) as conn:
                yield conn
