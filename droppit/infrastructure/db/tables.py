from sqlalchemy import Column, DateTime, MetaData, String, Table, Text, func

metadata = MetaData()

local_store_entries = Table(
    "local_store_entries",
    metadata,
    Column("store_key", String(191), primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated_at", DateTime, nullable=False, server_default=func.now(), onupdate=func.now()),
)
