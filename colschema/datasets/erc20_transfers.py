"""
ERC20 transfers — Transfer(address,address,uint256) events, decoded.

Amounts are uint256 on chain; they are exposed both losslessly (binary,
string) and approximately (float64).
"""

from colschema.datasets import REGISTRY
from colschema.types import ColumnType

REGISTRY.define("erc20_transfers",
    [
        ("block_number", ColumnType.UINT32),
        ("block_hash", ColumnType.BINARY),
        ("transaction_index", ColumnType.UINT32),
        ("log_index", ColumnType.UINT32),
        ("transaction_hash", ColumnType.BINARY),
        ("erc20", ColumnType.BINARY),
        ("from_address", ColumnType.BINARY),
        ("to_address", ColumnType.BINARY),
        ("value_binary", ColumnType.BINARY),
        ("value_string", ColumnType.STRING),
        ("value_f64", ColumnType.FLOAT64),
        ("chain_id", ColumnType.UINT64),
    ],
    description="Decoded ERC20 Transfer events",
    default_columns=[
        "block_number",
        "transaction_index",
        "log_index",
        "transaction_hash",
        "erc20",
        "from_address",
        "to_address",
        "value_binary",
        "value_string",
        "value_f64",
        "chain_id",
    ],
    default_sort=["block_number", "log_index"],
)
