"""
Transactions — one row per transaction, with receipt gas usage.
"""

from colschema.datasets import REGISTRY
from colschema.types import ColumnType

REGISTRY.define("transactions",
    [
        ("block_number", ColumnType.UINT32),
        ("transaction_index", ColumnType.UINT64),
        ("transaction_hash", ColumnType.BINARY),
        ("nonce", ColumnType.UINT64),
        ("from_address", ColumnType.BINARY),
        ("to_address", ColumnType.BINARY),
        ("value", ColumnType.DECIMAL128),
        ("value_string", ColumnType.STRING),
        ("value_f64", ColumnType.FLOAT64),
        ("input", ColumnType.BINARY),
        ("gas_limit", ColumnType.UINT32),
        ("gas_used", ColumnType.UINT32),
        ("gas_price", ColumnType.UINT64),
        ("transaction_type", ColumnType.UINT32),
        ("max_priority_fee_per_gas", ColumnType.UINT64),
        ("max_fee_per_gas", ColumnType.UINT64),
        ("success", ColumnType.UINT32),
        ("chain_id", ColumnType.UINT64),
    ],
    description="Transactions and their receipt gas usage",
    default_columns=[
        "block_number",
        "transaction_index",
        "transaction_hash",
        "nonce",
        "from_address",
        "to_address",
        "value",
        "input",
        "gas_limit",
        "gas_used",
        "gas_price",
        "transaction_type",
        "max_priority_fee_per_gas",
        "max_fee_per_gas",
        "success",
        "chain_id",
    ],
    default_sort=["block_number", "transaction_index"],
)
