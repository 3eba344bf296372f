import os
from datetime import tzinfo
from typing import Optional
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from filter_commons.constants.app_constants import AppConstants
from filter_commons.repositories.column_metadata_repository import ColumnMetadataRepository
from filter_commons.services.filter_controller_service import FilterControllerService
from filter_commons.utils.value_codec import ValueCodec

load_dotenv()

__value_codec = None


def get_local_timezone() -> Optional[tzinfo]:
    """
    Zone used as local time for date filters.
    FILTER_LOCAL_TIMEZONE holds an IANA name (e.g. "Asia/Kolkata"); unset means the system zone.
    """
    name = os.getenv(AppConstants.LOCAL_TIMEZONE_ENV)
    if not name:
        return None
    return ZoneInfo(name)


def get_value_codec() -> ValueCodec:
    """Dependency provider for ValueCodec (singleton)"""
    global __value_codec

    if __value_codec is None:
        __value_codec = ValueCodec(tz=get_local_timezone())

    return __value_codec


def get_filter_controller(metadata: ColumnMetadataRepository) -> FilterControllerService:
    """One controller per dataset; the codec is shared."""
    return FilterControllerService(metadata=metadata, codec=get_value_codec())
