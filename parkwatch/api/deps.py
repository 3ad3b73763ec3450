"""FastAPI dependency injection."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from parkwatch.config import settings
from parkwatch.data.nfhl import NFHLClient
from parkwatch.data.resolver import FloodZoneResolver

engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session


def get_nfhl_client() -> NFHLClient:
    return NFHLClient()


def get_flood_zone_resolver(client: NFHLClient = Depends(get_nfhl_client)) -> FloodZoneResolver:
    return FloodZoneResolver(client)
