"""
Database session management with SQLAlchemy async
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from core.config import settings
import logging

logger = logging.getLogger(__name__)


def build_engine(database_url: Optional[str] = None, echo: Optional[bool] = None) -> AsyncEngine:
    """Create an async engine; SQL echo is off unless DATABASE_ECHO or echo turns it on"""
    if echo is None:
        echo = settings.DATABASE_ECHO

    return create_async_engine(
        database_url or settings.DATABASE_URL,
        echo=echo,
        poolclass=NullPool,  # One import run, one connection at a time
        future=True
    )


def build_session_maker(bind: AsyncEngine) -> async_sessionmaker:
    """Session factory used by scripts and tests alike"""
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )


# Create async engine
engine = build_engine()

# Create session factory
async_session_maker = build_session_maker(engine)


async def create_tables(bind: AsyncEngine) -> None:
    """Create every catalog table that does not exist yet"""
    # Importing the package registers all models on Base.metadata
    from models import Base
    
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Catalog tables created")


@asynccontextmanager
async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Get database session"""
    async with async_session_maker() as session:
        yield session
