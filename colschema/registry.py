"""
Dataset Registry — enforced catalog of extractable datatypes.

Every datatype must be defined here before a schema can be resolved for it.
Definitions are validated at define() time so that resolution only ever
reads a consistent catalog.

DatasetDef captures:
  A. Identity (name, description)
  B. Columns (ordered name → native ColumnType)
  C. Defaults (default column subset, default sort order)
"""

import dataclasses
import logging
from typing import Optional

from colschema.types import ColumnType

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Raised when a dataset definition or lookup fails."""


@dataclasses.dataclass(frozen=True)
class DatasetDef:
    """Canonical definition of a single datatype in the catalog."""

    # ── A. Identity ───────────────────────────────────────────────
    name: str
    description: str

    # ── B. Columns (insertion order is the canonical order) ──────
    columns: dict

    # ── C. Defaults ───────────────────────────────────────────────
    default_columns: tuple = ()
    default_sort: Optional[tuple] = None

    def column_types(self) -> dict[str, ColumnType]:
        """Return a copy of the column → native type mapping."""
        return dict(self.columns)

    def defaults(self) -> list[str]:
        """Return the default columns in order."""
        return list(self.default_columns)


class DatasetRegistry:
    """
    Enforced catalog of datatypes and their columns.

    Column order within a dataset is the order columns were given to
    define(); it is the order used whenever "all" columns are requested.
    """

    def __init__(self):
        self._datasets: dict[str, DatasetDef] = {}

    # ── Define datasets ───────────────────────────────────────────

    def define(self, name: str, columns, *, default_columns,
               description: str = "", default_sort=None) -> DatasetDef:
        """Register a new datatype in the catalog.

        columns is a mapping or a sequence of (name, ColumnType) pairs.

        Raises RegistryError if:
        - Datatype name already defined
        - description is missing
        - no columns are given, or a column is declared twice
        - a column type is not a native ColumnType (HEX is not native)
        - a default column or default sort column is not a declared column
        """
        if name in self._datasets:
            raise RegistryError(f"Datatype '{name}' is already defined")
        if not description:
            raise RegistryError(f"Datatype '{name}': 'description' is required")

        pairs = list(columns.items()) if hasattr(columns, "items") else list(columns)
        if not pairs:
            raise RegistryError(f"Datatype '{name}': at least one column is required")

        column_types: dict[str, ColumnType] = {}
        for col_name, ctype in pairs:
            if col_name in column_types:
                raise RegistryError(
                    f"Datatype '{name}': column '{col_name}' is declared twice"
                )
            if not isinstance(ctype, ColumnType):
                raise RegistryError(
                    f"Datatype '{name}': column '{col_name}' has type {ctype!r}, "
                    f"expected a ColumnType"
                )
            if ctype is ColumnType.HEX:
                raise RegistryError(
                    f"Datatype '{name}': column '{col_name}' cannot be declared "
                    f"as hex (declare it binary; hex is an output encoding)"
                )
            column_types[col_name] = ctype

        for col_name in default_columns:
            if col_name not in column_types:
                raise RegistryError(
                    f"Datatype '{name}': default column '{col_name}' "
                    f"is not a declared column"
                )
        if default_sort is not None:
            for col_name in default_sort:
                if col_name not in column_types:
                    raise RegistryError(
                        f"Datatype '{name}': sort column '{col_name}' "
                        f"is not a declared column"
                    )
            default_sort = tuple(default_sort)

        dataset = DatasetDef(
            name=name,
            description=description,
            columns=column_types,
            default_columns=tuple(dict.fromkeys(default_columns)),
            default_sort=default_sort,
        )
        self._datasets[name] = dataset
        logger.debug("Defined datatype %s with %d columns", name, len(column_types))
        return dataset

    # ── Lookup ────────────────────────────────────────────────────

    def get(self, name: str) -> DatasetDef:
        """Get a dataset definition by exact name.

        Raises RegistryError if not found.
        """
        if name not in self._datasets:
            raise RegistryError(f"Datatype '{name}' is not defined in registry")
        return self._datasets[name]

    def has(self, name: str) -> bool:
        """Check if a datatype is defined."""
        return name in self._datasets

    def column_types(self, name: str) -> dict[str, ColumnType]:
        return self.get(name).column_types()

    def default_columns(self, name: str) -> list[str]:
        return self.get(name).defaults()

    def default_sort(self, name: str) -> Optional[list[str]]:
        sort = self.get(name).default_sort
        return None if sort is None else list(sort)

    # ── Introspection ─────────────────────────────────────────────

    def datatypes(self) -> list[str]:
        """Return all defined datatype names in definition order."""
        return list(self._datasets)

    def datasets_with(self, column_name: str) -> list[str]:
        """Return all datatypes that declare a given column name."""
        return [
            name for name, dataset in self._datasets.items()
            if column_name in dataset.columns
        ]
