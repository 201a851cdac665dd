"""Engine and session factory for the profile store."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from core.config import settings


def build_engine(url: str = settings.async_database_url) -> AsyncEngine:
    """Create the pooled engine all units of work share."""
    return create_async_engine(url, echo=settings.debug, pool_pre_ping=True)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Flushes are explicit so the repositories can map unique violations.
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False, autoflush=False)


engine = build_engine()
async_session_factory = build_session_factory(engine)


async def ping(session_factory: async_sessionmaker[AsyncSession] = async_session_factory) -> str:
    """Round-trip to the store and report "healthy" or the failure."""
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
    except Exception as e:
        return f"unhealthy: {e}"
    return "healthy"
