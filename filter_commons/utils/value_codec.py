import logging
import math
from datetime import datetime, tzinfo
from typing import Optional

from filter_commons.constants.app_constants import AppConstants
from filter_commons.constants.column_type import ColumnType
from filter_commons.constants.filter_op import FilterOp
from filter_commons.model.scalar_model import FilterTerm, Scalar, ScalarKind
from filter_commons.utils.datetime_utils import local_midnight_millis, millis_to_local_date

logger = logging.getLogger(__name__)

"""
================================================================================
Value Codec – Usage Guide
================================================================================
Turns the text a user typed into a typed FilterTerm and back.

    codec = ValueCodec(tz=ZoneInfo("Asia/Kolkata"))

    codec.parse("1,2, 3 ", FilterOp.IN, ColumnType.STRING)
    # FilterTerm(array=(String "1", String "2", String "3"))

    codec.parse("3.7", FilterOp.EQ, ColumnType.INTEGER)   # Float 3.0
    codec.parse("", FilterOp.EQ, ColumnType.INTEGER)      # Null
    codec.parse("-", FilterOp.EQ, ColumnType.INTEGER)     # None -> keep previous term
    codec.parse("2024-01-15", FilterOp.EQ, ColumnType.DATE)
    # DateTime 1705257000000 (local midnight)

    codec.format(FilterTerm.of_scalar(Scalar.of_datetime(1705257000000)), ColumnType.DATE)
    # "2024-01-15"

Parse outcomes:
    - FilterTerm -> replace the term
    - None       -> input cannot be used yet (e.g. "-" while typing a number); keep the term
================================================================================
"""


class ValueCodec:
    """
    Parse raw editor text into filter terms and format terms back into editor text.
    """

    def __init__(self, tz: Optional[tzinfo] = None):
        """
        :param tz: zone used as "local time" for dates; None means the system local zone
        """
        self.tz = tz

    # -------------------------
    # parse
    # -------------------------
    def parse(self, raw: str, op: FilterOp, column_type: ColumnType) -> Optional[FilterTerm]:
        """
        Parse `raw` for a filter with operator `op` on a column of `column_type`.
        Returns None when the previous term should be kept.
        """
        if op == FilterOp.IN:
            return self._parse_in_list(raw)

        match column_type:
            case ColumnType.STRING:
                return FilterTerm.of_scalar(Scalar.of_string(raw))
            case ColumnType.INTEGER:
                return self._parse_number(raw, floor=True)
            case ColumnType.FLOAT:
                return self._parse_number(raw, floor=False)
            case ColumnType.DATE:
                return FilterTerm.of_scalar(self._parse_date(raw))

        logger.debug(f"No text parsing for column type {column_type}; keeping term")
        return None

    @staticmethod
    def _parse_in_list(raw: str) -> FilterTerm:
        # empty pieces are kept, e.g. "a," -> ["a", ""]
        pieces = [piece.strip() for piece in raw.split(AppConstants.IN_SEPARATOR)]
        return FilterTerm.of_array([Scalar.of_string(piece) for piece in pieces])

    @staticmethod
    def _parse_number(raw: str, floor: bool) -> Optional[FilterTerm]:
        if raw == "":
            return FilterTerm.of_scalar(Scalar.null())

        number = ValueCodec._to_float(raw)
        if number is None:
            logger.debug(f"Ignoring unparseable numeric input {raw!r}")
            return None

        if floor:
            number = float(math.floor(number))
        return FilterTerm.of_scalar(Scalar.of_float(number))

    @staticmethod
    def _to_float(raw: str) -> Optional[float]:
        # float() alone also accepts padding, digit separators ("1_000") and non-ASCII digits
        if not raw.isascii() or raw != raw.strip() or "_" in raw:
            return None
        try:
            number = float(raw)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return number

    def _parse_date(self, raw: str) -> Scalar:
        try:
            day = datetime.strptime(raw, AppConstants.DATE_FORMAT).date()
            millis = local_midnight_millis(day, self.tz)
        except (ValueError, OverflowError, OSError):
            logger.debug(f"Unparseable date input {raw!r}; clearing term")
            return Scalar.null()

        # before the epoch; a DateTime is never negative
        if millis < 0:
            return Scalar.null()
        return Scalar.of_datetime(millis)

    # -------------------------
    # format
    # -------------------------
    def format(self, term: FilterTerm, column_type: ColumnType) -> Optional[str]:
        """
        Editable text for `term`.
        Returns None when the field should be left as it is (unset or out of range date).
        """
        scalar = term.scalar
        if scalar is not None and scalar.kind is ScalarKind.DATETIME:
            return self._format_date(scalar.value)
        return term.text()

    def _format_date(self, millis: int) -> Optional[str]:
        if millis <= 0:
            return None
        try:
            return millis_to_local_date(millis, self.tz).strftime(AppConstants.DATE_FORMAT)
        except (ValueError, OverflowError, OSError):
            logger.debug(f"Cannot render {millis} as a local date")
            return None
