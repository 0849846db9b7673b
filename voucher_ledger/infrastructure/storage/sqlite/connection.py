"""
Async SQLite connections for the collection store.

The ledger has a single logical writer, so the default pool holds one
connection; a larger pool only helps concurrent readers.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import aiosqlite

from voucher_ledger.config import get_logger, get_settings
from voucher_ledger.config.settings import StorageSettings

logger = get_logger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS collections (
    name TEXT PRIMARY KEY,
    payload TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""

PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
)


class ConnectionPool:
    """Fixed-size queue of aiosqlite connections, created lazily."""

    def __init__(
        self,
        db_path: Path,
        pool_size: int = 1,
        busy_timeout: int = 30000,
    ):
        self.db_path = db_path
        self.pool_size = pool_size
        self.busy_timeout = busy_timeout

        self._pool: asyncio.Queue[aiosqlite.Connection] = asyncio.Queue(maxsize=pool_size)
        self._connections: list[aiosqlite.Connection] = []
        self._initialized = False
        self._lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, storage: StorageSettings) -> "ConnectionPool":
        return cls(
            db_path=storage.db_path,
            pool_size=storage.pool_size,
            busy_timeout=storage.busy_timeout,
        )

    async def initialize(self) -> None:
        """Open the connections and make sure the schema exists."""
        async with self._lock:
            if self._initialized:
                return

            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            for _ in range(self.pool_size):
                conn = await self._connect()
                self._connections.append(conn)
                await self._pool.put(conn)

            await self._apply_schema(self._connections[0])
            self._initialized = True
            logger.info(
                "connection_pool_initialized",
                db_path=str(self.db_path),
                pool_size=self.pool_size,
            )

    async def _connect(self) -> aiosqlite.Connection:
        conn = await aiosqlite.connect(self.db_path)
        for pragma in PRAGMAS:
            await conn.execute(pragma)
        await conn.execute(f"PRAGMA busy_timeout={self.busy_timeout}")
        conn.row_factory = aiosqlite.Row
        return conn

    @staticmethod
    async def _apply_schema(conn: aiosqlite.Connection) -> None:
        await conn.execute(SCHEMA)
        await conn.commit()

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[aiosqlite.Connection]:
        """
        Borrow a connection, initializing the pool on first use.

        Usage:
            async with pool.acquire() as conn:
                await conn.execute(...)
        """
        if not self._initialized:
            await self.initialize()

        conn = await self._pool.get()
        try:
            yield conn
        finally:
            await self._pool.put(conn)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """Borrow a connection; commit on success, roll back on any exception."""
        async with self.acquire() as conn:
            try:
                yield conn
                await conn.commit()
            except Exception:
                await conn.rollback()
                raise

    async def close(self) -> None:
        """Close every connection. The pool reopens on the next acquire."""
        async with self._lock:
            if not self._initialized:
                return
            for conn in self._connections:
                await conn.close()
            self._connections.clear()
            self._pool = asyncio.Queue(maxsize=self.pool_size)
            self._initialized = False
            logger.info("connection_pool_closed", db_path=str(self.db_path))


# Global connection pool
_pool: ConnectionPool | None = None


async def get_pool() -> ConnectionPool:
    """Get or create the global pool for the configured database."""
    global _pool
    if _pool is None:
        _pool = ConnectionPool.from_settings(get_settings().storage)
        await _pool.initialize()
    return _pool


async def close_pool() -> None:
    """Close and forget the global pool."""
    global _pool
    if _pool is not None:
        await _pool.close()
        _pool = None
