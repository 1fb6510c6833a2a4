from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from droppit.config import get_settings

settings = get_settings()

# Fall back to an in-memory database for dev/test when no URL is set
DB_URL = settings.database_url or "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(DB_URL, echo=False)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
