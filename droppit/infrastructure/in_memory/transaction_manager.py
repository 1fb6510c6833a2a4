from contextlib import asynccontextmanager

from droppit.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    @asynccontextmanager
    async def start(self):
        yield
