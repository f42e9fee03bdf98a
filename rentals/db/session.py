"""
db/session.py
-------------
Async SQLAlchemy engine and session factory.

Lifecycle:
  - The engine (and its connection pool) is created once per process.
  - check_connection() is called on startup when DB_CHECK_ON_STARTUP is set.
  - Every request gets its own AsyncSession through get_db(): committed on
    success, rolled back on error, always closed.
  - main.lifespan disposes the engine on shutdown, draining the pool.

Pool notes:
  - pool_pre_ping=True validates connections before checkout so stale
    connections after a DB restart are replaced transparently.
  - expire_on_commit=False keeps loaded attributes usable after commit;
    there is no implicit lazy load in async context.
"""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from rentals.core.config import settings

# ── Engine ────────────────────────────────────────────────────────────────────
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,          # Log SQL in development
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=True,
    pool_recycle=settings.DB_POOL_RECYCLE,
)

# ── Session Factory ───────────────────────────────────────────────────────────
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncSession:  # type: ignore[return]
    """
    FastAPI dependency that yields a database session.
    The session is automatically closed when the request finishes,
    and rolled back on exceptions.

    Usage:
        @router.get("/example")
        async def handler(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def check_connection() -> None:
    """Run a trivial query; raises if the database is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
