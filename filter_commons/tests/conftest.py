from zoneinfo import ZoneInfo

import pytest

from filter_commons.model.filter_model import Filter
from filter_commons.model.scalar_model import FilterTerm, Scalar
from filter_commons.repositories.column_metadata_repository import ColumnMetadataRepository
from filter_commons.services.filter_controller_service import FilterControllerService
from filter_commons.utils.value_codec import ValueCodec


@pytest.fixture
def schema():
    return {
        'name': 'string',
        'quantity': 'integer',
        'price': 'float',
        'in_stock': 'boolean',
        'order_date': 'date',
        'shipped_at': 'datetime',
    }


@pytest.fixture
def metadata(schema):
    return ColumnMetadataRepository(schema)


@pytest.fixture
def codec():
    return ValueCodec(tz=ZoneInfo("Asia/Kolkata"))


@pytest.fixture
def controller(metadata, codec):
    return FilterControllerService(metadata=metadata, codec=codec)


@pytest.fixture
def filters():
    return (
        Filter(column="name", term=FilterTerm.of_scalar(Scalar.of_string("Books"))),
        Filter(column="quantity", term=FilterTerm.of_scalar(Scalar.of_float(5.0))),
        Filter(column="order_date", term=FilterTerm.of_scalar(Scalar.of_datetime(1705257000000))),
    )
