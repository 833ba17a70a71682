"""
Event logs — one row per log emitted by a transaction.
"""

from colschema.datasets import REGISTRY
from colschema.types import ColumnType

REGISTRY.define("logs",
    [
        ("block_number", ColumnType.UINT32),
        ("block_hash", ColumnType.BINARY),
        ("transaction_index", ColumnType.UINT32),
        ("log_index", ColumnType.UINT32),
        ("transaction_hash", ColumnType.BINARY),
        ("address", ColumnType.BINARY),
        ("topic0", ColumnType.BINARY),
        ("topic1", ColumnType.BINARY),
        ("topic2", ColumnType.BINARY),
        ("topic3", ColumnType.BINARY),
        ("data", ColumnType.BINARY),
        ("n_data_bytes", ColumnType.UINT32),
        ("chain_id", ColumnType.UINT64),
    ],
    description="Event logs emitted by transactions",
    default_columns=[
        "block_number",
        "transaction_index",
        "log_index",
        "transaction_hash",
        "address",
        "topic0",
        "topic1",
        "topic2",
        "topic3",
        "data",
        "chain_id",
    ],
    default_sort=["block_number", "log_index"],
)
