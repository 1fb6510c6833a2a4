from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from droppit.application.interfaces.key_value_store import KeyValueStore
from droppit.infrastructure.db.tables import local_store_entries


class KeyValueStoreSQL(KeyValueStore):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, key: str) -> str | None:
        stmt = (
            select(local_store_entries.c.value)
            .where(local_store_entries.c.store_key == key)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def put(self, key: str, value: str) -> None:
        stmt = (
            update(local_store_entries)
            .where(local_store_entries.c.store_key == key)
            .values(value=value)
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            await self._session.execute(
                insert(local_store_entries).values(store_key=key, value=value)
            )

    async def delete(self, key: str) -> None:
        await self._session.execute(
            delete(local_store_entries).where(local_store_entries.c.store_key == key)
        )
