"""
Table — a resolved, immutable output schema for one datatype.

Column order is output order: the order columns were resolved in,
not alphabetical. sort_columns is carried as given and not checked
against the output columns.
"""

import dataclasses
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from colschema.types import ColumnType


@dataclasses.dataclass(frozen=True)
class Table:
    """Schema for a particular datatype.

    Build one with colschema.resolve_schema(); to change a schema,
    resolve a new one.
    """

    datatype: str
    _columns: Mapping[str, ColumnType] = dataclasses.field(repr=False)
    sort_columns: Optional[tuple] = None

    def __post_init__(self):
        # Snapshot into a read-only view so the caller's dict can't mutate us
        object.__setattr__(self, "_columns", MappingProxyType(dict(self._columns)))
        if self.sort_columns is not None:
            object.__setattr__(self, "sort_columns", tuple(self.sort_columns))

    def __eq__(self, other):
        if not isinstance(other, Table):
            return NotImplemented
        return (
            self.datatype == other.datatype
            and list(self._columns.items()) == list(other._columns.items())
            and self.sort_columns == other.sort_columns
        )

    def __hash__(self):
        return hash((self.datatype, tuple(self._columns.items()), self.sort_columns))

    def __repr__(self):
        cols = ", ".join(f"{name}:{ctype.value}" for name, ctype in self._columns.items())
        return f"Table({self.datatype!r}, [{cols}], sort_columns={self.sort_columns!r})"

    # ── Column access ─────────────────────────────────────────────

    def has_column(self, column: str) -> bool:
        return column in self._columns

    def column_type(self, column: str) -> Optional[ColumnType]:
        """Return the ColumnType of a column, or None if absent."""
        return self._columns.get(column)

    def columns(self) -> list[str]:
        """Return the column names in output order (a new list)."""
        return list(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[tuple[str, ColumnType]]:
        return iter(self._columns.items())

    # ── Textual form ──────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Serialize using canonical type names; column order is kept."""
        return {
            "datatype": self.datatype,
            "columns": {
                name: ctype.canonical_name() for name, ctype in self._columns.items()
            },
            "sort_columns": None if self.sort_columns is None else list(self.sort_columns),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Table":
        """Rebuild a Table from to_dict() output.

        Raises ValueError for an unknown type name.
        """
        columns = {
            name: ColumnType.from_name(type_name)
            for name, type_name in data["columns"].items()
        }
        return cls(
            datatype=data["datatype"],
            _columns=columns,
            sort_columns=data.get("sort_columns"),
        )
