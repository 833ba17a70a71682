"""
Tests for the Dataset Registry — enforced datatype catalog.

Covers:
- Dataset definition and retrieval
- Enforcement rules (description, columns, native types, defaults, sort)
- Introspection (datatypes, datasets_with)
- The built-in catalog
"""

import pytest

from colschema.registry import DatasetRegistry, DatasetDef, RegistryError
from colschema.types import ColumnType


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def reg():
    """Fresh registry for each test."""
    return DatasetRegistry()


@pytest.fixture
def chain_reg():
    """Registry pre-loaded with two small datasets sharing columns."""
    r = DatasetRegistry()
    r.define("blocks",
        [("number", ColumnType.UINT32), ("hash", ColumnType.BINARY),
         ("chain_id", ColumnType.UINT64)],
        description="Blocks",
        default_columns=["number", "hash"],
        default_sort=["number"],
    )
    r.define("logs",
        [("block_number", ColumnType.UINT32), ("data", ColumnType.BINARY),
         ("chain_id", ColumnType.UINT64)],
        description="Logs",
        default_columns=["block_number"],
    )
    return r


# ===========================================================================
# A. Dataset Definition
# ===========================================================================

class TestDefine:

    def test_define_basic(self, reg):
        ds = reg.define("blocks", [("number", ColumnType.UINT32)],
            description="Blocks", default_columns=["number"])
        assert isinstance(ds, DatasetDef)
        assert ds.name == "blocks"
        assert ds.column_types() == {"number": ColumnType.UINT32}
        assert ds.defaults() == ["number"]
        assert ds.default_sort is None

    def test_define_from_mapping(self, reg):
        ds = reg.define("t", {"b": ColumnType.STRING, "a": ColumnType.INT64},
            description="T", default_columns=[])
        assert list(ds.column_types()) == ["b", "a"]

    def test_define_duplicate_raises(self, reg):
        reg.define("x", [("a", ColumnType.STRING)], description="X", default_columns=[])
        with pytest.raises(RegistryError, match="already defined"):
            reg.define("x", [("a", ColumnType.STRING)], description="X", default_columns=[])

    def test_define_requires_description(self, reg):
        with pytest.raises(RegistryError, match="description.*required"):
            reg.define("x", [("a", ColumnType.STRING)], default_columns=[])

    def test_define_requires_columns(self, reg):
        with pytest.raises(RegistryError, match="at least one column"):
            reg.define("x", [], description="X", default_columns=[])

    def test_duplicate_column_raises(self, reg):
        with pytest.raises(RegistryError, match="declared twice"):
            reg.define("x", [("a", ColumnType.STRING), ("a", ColumnType.INT32)],
                description="X", default_columns=[])

    def test_hex_is_not_native(self, reg):
        with pytest.raises(RegistryError, match="cannot be declared as hex"):
            reg.define("x", [("a", ColumnType.HEX)], description="X", default_columns=[])

    def test_non_column_type_raises(self, reg):
        with pytest.raises(RegistryError, match="expected a ColumnType"):
            reg.define("x", [("a", str)], description="X", default_columns=[])

    def test_unknown_default_column_raises(self, reg):
        with pytest.raises(RegistryError, match="default column 'b'"):
            reg.define("x", [("a", ColumnType.STRING)],
                description="X", default_columns=["b"])

    def test_unknown_sort_column_raises(self, reg):
        with pytest.raises(RegistryError, match="sort column 'b'"):
            reg.define("x", [("a", ColumnType.STRING)],
                description="X", default_columns=["a"], default_sort=["b"])

    def test_column_types_is_a_copy(self, chain_reg):
        types = chain_reg.column_types("blocks")
        types["bogus"] = ColumnType.STRING
        assert "bogus" not in chain_reg.column_types("blocks")


# ===========================================================================
# B. Lookup
# ===========================================================================

class TestLookup:

    def test_get_existing(self, chain_reg):
        assert chain_reg.get("blocks").name == "blocks"

    def test_get_missing_raises(self, chain_reg):
        with pytest.raises(RegistryError, match="not defined"):
            chain_reg.get("traces")

    def test_has(self, chain_reg):
        assert chain_reg.has("logs")
        assert not chain_reg.has("traces")

    def test_default_columns(self, chain_reg):
        assert chain_reg.default_columns("blocks") == ["number", "hash"]

    def test_default_sort(self, chain_reg):
        assert chain_reg.default_sort("blocks") == ["number"]
        assert chain_reg.default_sort("logs") is None


# ===========================================================================
# C. Introspection
# ===========================================================================

class TestIntrospection:

    def test_datatypes_in_definition_order(self, chain_reg):
        assert chain_reg.datatypes() == ["blocks", "logs"]

    def test_datasets_with(self, chain_reg):
        assert chain_reg.datasets_with("chain_id") == ["blocks", "logs"]
        assert chain_reg.datasets_with("hash") == ["blocks"]
        assert chain_reg.datasets_with("nope") == []


# ===========================================================================
# D. Built-in catalog
# ===========================================================================

class TestCatalog:

    def test_builtin_datatypes(self):
        from colschema.datasets import REGISTRY
        assert REGISTRY.datatypes() == [
            "blocks", "transactions", "logs", "erc20_transfers",
        ]

    def test_blocks_shape(self):
        from colschema.datasets import REGISTRY
        assert len(REGISTRY.column_types("blocks")) == 15
        assert len(REGISTRY.default_columns("blocks")) == 7
        assert REGISTRY.default_sort("blocks") == ["number"]

    def test_no_native_hex_columns(self):
        from colschema.datasets import REGISTRY
        for name in REGISTRY.datatypes():
            assert ColumnType.HEX not in REGISTRY.column_types(name).values()
