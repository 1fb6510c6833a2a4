import json
import logging
from typing import Any

from droppit.application.interfaces.key_value_store import KeyValueStore
from droppit.domain.constants import (
    BOOKINGS_KEY,
    CHECKOUT_SUCCESS_KEY,
    LAST_PAID_ORDER_KEY,
    PENDING_BOOKING_KEY,
)

logger = logging.getLogger(__name__)

BookingRecord = dict[str, Any]


def _record_id(record: Any) -> str | None:
    if isinstance(record, dict) and isinstance(record.get("id"), str):
        return record["id"]
    return None


class BookingStore:
    """
    Booking collection and pending-booking slot on top of a KeyValueStore.

    Records are JSON objects unique by "id", kept newest first. Malformed
    stored JSON is read as absent and is overwritten by the next write.
    """

    def __init__(self, kv_store: KeyValueStore) -> None:
        self._kv = kv_store

    async def _read_json(self, key: str) -> Any:
        raw = await self._kv.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed JSON in local store", extra={"key": key})
            return None

    async def _write_json(self, key: str, value: Any) -> None:
        await self._kv.put(key, json.dumps(value, separators=(",", ":")))

    # Pending slot

    async def read_pending(self) -> BookingRecord | None:
        pending = await self._read_json(PENDING_BOOKING_KEY)
        if _record_id(pending) is None:
            return None
        return pending

    async def stage_pending(self, booking: BookingRecord) -> None:
        if _record_id(booking) is None:
            raise ValueError("Pending booking needs a string 'id'")
        await self._write_json(PENDING_BOOKING_KEY, booking)

    async def clear_pending(self) -> None:
        await self._kv.delete(PENDING_BOOKING_KEY)

    # Collection

    async def list_all(self) -> list[BookingRecord]:
        records = await self._read_json(BOOKINGS_KEY)
        if not isinstance(records, list):
            return []
        return [record for record in records if _record_id(record) is not None]

    async def get(self, booking_id: str) -> BookingRecord | None:
        for record in await self.list_all():
            if record["id"] == booking_id:
                return record
        return None

    async def put(self, booking: BookingRecord) -> bool:
        """Prepend a booking; returns False when its id is already stored."""
        booking_id = _record_id(booking)
        if booking_id is None:
            raise ValueError("Booking needs a string 'id'")
        records = await self.list_all()
        if any(record["id"] == booking_id for record in records):
            return False
        await self._write_json(BOOKINGS_KEY, [booking, *records])
        return True

    async def mark_paid(self, order_id: str) -> None:
        await self._kv.put(LAST_PAID_ORDER_KEY, order_id)
        await self._kv.put(CHECKOUT_SUCCESS_KEY, "1")
