"""
Schema builder — resolve a datatype and user column options into a Table.

    table = resolve_schema("blocks", ColumnEncoding.HEX,
                           include=["chain_id"], exclude=["extra_data"])
    table.columns()   # ['number', 'hash', 'timestamp', ..., 'chain_id']
"""

import logging
from typing import Iterable, Optional, Sequence, Union

from colschema.registry import DatasetRegistry
from colschema.selection import compute_used_columns
from colschema.table import Table
from colschema.types import ColumnEncoding, ColumnType, InvalidColumn

logger = logging.getLogger(__name__)


def _default_registry() -> DatasetRegistry:
    from colschema.datasets import REGISTRY
    return REGISTRY


def resolve_schema(
    datatype: str,
    encoding: Union[ColumnEncoding, str] = ColumnEncoding.BINARY,
    *,
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
    columns: Optional[Sequence[str]] = None,
    sort: Optional[Sequence[str]] = None,
    registry: Optional[DatasetRegistry] = None,
) -> Table:
    """Resolve the output schema of a datatype.

    Column selection follows compute_used_columns(). Each selected column
    is then typed from the registry; binary columns become hex columns
    when encoding is HEX. sort is stored on the Table as given.

    Raises InvalidColumn if a selected column is not defined for the
    datatype (only reachable through an explicit column list).
    Raises RegistryError if the datatype itself is unknown.
    """
    registry = registry or _default_registry()
    encoding = ColumnEncoding.parse(encoding)

    dataset = registry.get(datatype)
    column_types = dataset.column_types()
    used_columns = compute_used_columns(
        column_types.keys(),
        dataset.defaults(),
        include=include,
        exclude=exclude,
        columns=columns,
    )

    resolved: dict[str, ColumnType] = {}
    for name in used_columns:
        ctype = column_types.get(name)
        if ctype is None:
            raise InvalidColumn(name, datatype)
        if encoding is ColumnEncoding.HEX and ctype is ColumnType.BINARY:
            ctype = ColumnType.HEX
        resolved[name] = ctype

    logger.debug(
        "Resolved %s schema: %d of %d columns (%s)",
        datatype, len(resolved), len(column_types), encoding.value,
    )
    return Table(
        datatype=datatype,
        _columns=resolved,
        sort_columns=None if sort is None else list(sort),
    )


def resolve_schemas(
    datatypes: Iterable[str],
    encoding: Union[ColumnEncoding, str] = ColumnEncoding.BINARY,
    *,
    include: Optional[Sequence[str]] = None,
    exclude: Optional[Sequence[str]] = None,
    columns: Optional[Sequence[str]] = None,
    sort: Optional[Sequence[str]] = None,
    registry: Optional[DatasetRegistry] = None,
) -> dict[str, Table]:
    """Resolve several datatypes with shared column options.

    A shared include list may name columns of any of the datatypes; each
    datatype keeps only the ones it defines. When sort is None, each
    datatype's registered default sort is used.
    """
    registry = registry or _default_registry()
    tables = {}
    for datatype in datatypes:
        tables[datatype] = resolve_schema(
            datatype,
            encoding,
            include=include,
            exclude=exclude,
            columns=columns,
            sort=registry.default_sort(datatype) if sort is None else sort,
            registry=registry,
        )
    return tables
