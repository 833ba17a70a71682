"""
Column storage types, encoding preference, and resolution errors.

ColumnType values are the canonical lowercase names used for any textual
form of a schema. HEX is an encoding variant of BINARY and never appears
as a native type in the registry.
"""

from enum import Enum
from typing import Optional


class ColumnType(str, Enum):
    """Storage representation of a column."""
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT64 = "float64"
    DECIMAL128 = "decimal128"
    STRING = "string"
    BINARY = "binary"
    HEX = "hex"

    def canonical_name(self) -> str:
        """Stable lowercase identifier, e.g. 'uint32'."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "ColumnType":
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unknown column type '{name}'") from None

    def __str__(self) -> str:
        return self.value


class ColumnEncoding(str, Enum):
    """How binary columns are emitted: raw bytes or hex strings."""
    BINARY = "binary"
    HEX = "hex"

    @classmethod
    def parse(cls, value) -> "ColumnEncoding":
        """Accept a ColumnEncoding or a case-insensitive 'binary'/'hex'."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown column encoding {value!r} (expected 'binary' or 'hex')"
            ) from None


class SchemaError(Exception):
    """Base error for schema resolution."""


class InvalidColumn(SchemaError):
    """Raised when a selected column is not defined for the datatype."""

    def __init__(self, column: str, datatype: Optional[str] = None):
        self.column = column
        self.datatype = datatype
        if datatype is None:
            msg = f"Invalid column '{column}'"
        else:
            msg = f"Invalid column '{column}' for datatype '{datatype}'"
        super().__init__(msg)
