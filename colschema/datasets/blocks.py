"""
Block headers — one row per block.
"""

from colschema.datasets import REGISTRY
from colschema.types import ColumnType

REGISTRY.define("blocks",
    [
        ("hash", ColumnType.BINARY),
        ("parent_hash", ColumnType.BINARY),
        ("author", ColumnType.BINARY),
        ("state_root", ColumnType.BINARY),
        ("transactions_root", ColumnType.BINARY),
        ("receipts_root", ColumnType.BINARY),
        ("number", ColumnType.UINT32),
        ("gas_used", ColumnType.UINT32),
        ("extra_data", ColumnType.BINARY),
        ("logs_bloom", ColumnType.BINARY),
        ("timestamp", ColumnType.UINT32),
        ("total_difficulty", ColumnType.BINARY),
        ("size", ColumnType.UINT32),
        ("base_fee_per_gas", ColumnType.UINT64),
        ("chain_id", ColumnType.UINT64),
    ],
    description="Block headers",
    default_columns=[
        "number",
        "hash",
        "timestamp",
        "author",
        "gas_used",
        "extra_data",
        "base_fee_per_gas",
    ],
    default_sort=["number"],
)
