import pytest

from filter_commons.constants.column_type import ColumnType
from filter_commons.repositories.column_metadata_repository import (
    ColumnMetadataRepository,
    ColumnNotFoundError,
)


def test_get_column_type(metadata):
    assert metadata.get_column_type("order_date") is ColumnType.DATE
    assert metadata.get_column_type("name") is ColumnType.STRING


def test_accepts_enum_members():
    repo = ColumnMetadataRepository({"price": ColumnType.FLOAT})
    assert repo.get_column_type("price") is ColumnType.FLOAT


def test_unknown_column(metadata):
    with pytest.raises(ColumnNotFoundError) as excinfo:
        metadata.get_column_type("unknown")
    assert excinfo.value.column == "unknown"
    assert "column not found" in str(excinfo.value)


def test_unknown_column_is_key_error(metadata):
    with pytest.raises(KeyError):
        metadata.get_column_type("unknown")


def test_unsupported_type():
    with pytest.raises(ValueError) as excinfo:
        ColumnMetadataRepository({"location": "geo_point"})
    assert "unsupported column type for column 'location'" in str(excinfo.value)

