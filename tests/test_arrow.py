"""
Tests for the Arrow schema export.
"""

import pyarrow as pa
import pytest

from colschema import ColumnEncoding, ColumnType, resolve_schema
from colschema.arrow import arrow_type, to_arrow_schema


class TestArrowType:

    def test_every_column_type_mapped(self):
        for ctype in ColumnType:
            assert isinstance(arrow_type(ctype), pa.DataType)

    def test_binary_and_hex(self):
        assert arrow_type(ColumnType.BINARY) == pa.binary()
        assert arrow_type(ColumnType.HEX) == pa.string()

    def test_numeric(self):
        assert arrow_type(ColumnType.UINT32) == pa.uint32()
        assert arrow_type(ColumnType.INT64) == pa.int64()
        assert arrow_type(ColumnType.FLOAT64) == pa.float64()
        assert arrow_type(ColumnType.DECIMAL128) == pa.decimal128(38, 0)


class TestArrowSchema:

    def test_field_order_matches_table(self):
        table = resolve_schema("blocks", include=["chain_id"])
        schema = to_arrow_schema(table)
        assert schema.names == table.columns()

    def test_hex_encoding_gives_strings(self):
        schema = to_arrow_schema(resolve_schema("blocks", ColumnEncoding.HEX))
        assert schema.field("hash").type == pa.string()
        assert schema.field("number").type == pa.uint32()

    def test_binary_encoding_gives_binary(self):
        schema = to_arrow_schema(resolve_schema("blocks"))
        assert schema.field("hash").type == pa.binary()

    def test_metadata(self):
        schema = to_arrow_schema(resolve_schema("blocks", sort=["number", "hash"]))
        assert schema.metadata[b"datatype"] == b"blocks"
        assert schema.metadata[b"sort_columns"] == b"number,hash"

    def test_no_sort_metadata_without_sort(self):
        schema = to_arrow_schema(resolve_schema("logs"))
        assert b"sort_columns" not in schema.metadata

    @pytest.mark.parametrize("datatype", ["blocks", "transactions", "logs", "erc20_transfers"])
    def test_all_columns_convert(self, datatype):
        table = resolve_schema(datatype, columns=["all"])
        assert len(to_arrow_schema(table)) == len(table)
