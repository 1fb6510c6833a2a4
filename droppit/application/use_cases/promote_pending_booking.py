import logging

from droppit.application.booking_store import BookingStore
from droppit.application.interfaces.transaction_manager import TransactionManager


class PromotePendingBookingUseCase:
    """
    Moves the pending booking into the booking collection once its order is paid.

    Safe to run more than once for the same order: a booking whose id is
    already stored is left alone, and a pending booking for another order is
    never touched.
    """

    def __init__(
        self,
        booking_store: BookingStore,
        transaction_manager: TransactionManager,
    ) -> None:
        self._booking_store = booking_store
        self._transaction_manager = transaction_manager
        self._logger = logging.getLogger(__name__)

    async def execute(self, order_id: str) -> bool:
        async with self._transaction_manager.start():
            pending = await self._booking_store.read_pending()
            if pending is None:
                return False

            if pending["id"] != order_id:
                self._logger.info(
                    "Pending booking belongs to another order, skipping promotion",
                    extra={"order_id": order_id, "pending_id": pending["id"]},
                )
                return False

            if await self._booking_store.get(order_id) is not None:
                await self._booking_store.clear_pending()
                return False

            await self._booking_store.put(pending)
            await self._booking_store.clear_pending()
            await self._booking_store.mark_paid(order_id)

        self._logger.info("Pending booking promoted", extra={"order_id": order_id})
        return True
