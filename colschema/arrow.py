"""
Type mapping between resolved Tables and Apache Arrow schemas.

Provides:
- arrow_type(column_type) → pyarrow DataType
- to_arrow_schema(table) → pyarrow.Schema in table column order
"""

import pyarrow as pa

from colschema.table import Table
from colschema.types import ColumnType, SchemaError


def _arrow_types() -> dict:
    # uint256-range values are stored in decimal128 as whole numbers
    return {
        ColumnType.UINT32: pa.uint32(),
        ColumnType.UINT64: pa.uint64(),
        ColumnType.INT32: pa.int32(),
        ColumnType.INT64: pa.int64(),
        ColumnType.FLOAT64: pa.float64(),
        ColumnType.DECIMAL128: pa.decimal128(38, 0),
        ColumnType.STRING: pa.string(),
        ColumnType.BINARY: pa.binary(),
        ColumnType.HEX: pa.string(),
    }


_ARROW_TYPES = _arrow_types()


def arrow_type(column_type: ColumnType) -> pa.DataType:
    """Map a ColumnType to its Arrow storage type.

    Raises SchemaError for a ColumnType with no Arrow mapping.
    """
    try:
        return _ARROW_TYPES[column_type]
    except KeyError:
        raise SchemaError(f"No Arrow type for column type {column_type!r}") from None


def to_arrow_schema(table: Table) -> pa.Schema:
    """Build an Arrow schema with one field per table column, in order.

    The datatype and sort columns are attached as schema metadata.
    """
    fields = [pa.field(name, arrow_type(ctype)) for name, ctype in table]
    metadata = {"datatype": table.datatype}
    if table.sort_columns is not None:
        metadata["sort_columns"] = ",".join(table.sort_columns)
    return pa.schema(fields, metadata=metadata)
