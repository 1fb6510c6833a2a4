from droppit.application.interfaces.key_value_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._items.get(key)

    async def put(self, key: str, value: str) -> None:
        self._items[key] = value

    async def delete(self, key: str) -> None:
        self._items.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._items)
