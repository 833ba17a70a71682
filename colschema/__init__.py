"""
Column schema resolution for extracted datasets.

Decides which columns a requested datatype outputs, in what order, and
with what storage type.
"""

from colschema.types import ColumnEncoding, ColumnType, InvalidColumn, SchemaError
from colschema.registry import DatasetDef, DatasetRegistry, RegistryError
from colschema.selection import ALL_COLUMNS, compute_used_columns
from colschema.table import Table
from colschema.builder import resolve_schema, resolve_schemas

__all__ = [
    "ALL_COLUMNS",
    "ColumnEncoding",
    "ColumnType",
    "DatasetDef",
    "DatasetRegistry",
    "InvalidColumn",
    "RegistryError",
    "SchemaError",
    "Table",
    "compute_used_columns",
    "resolve_schema",
    "resolve_schemas",
]
