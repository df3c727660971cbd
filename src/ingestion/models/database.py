from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from ingestion.config import get_database_url

Base = declarative_base()
engine = create_async_engine(get_database_url(), future=True)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def create_all(bind: AsyncEngine) -> None:
    async with bind.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
