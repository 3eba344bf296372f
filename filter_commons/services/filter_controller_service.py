import logging
from typing import Optional, Sequence, Tuple

from filter_commons.constants.app_message import AppMessage
from filter_commons.constants.column_type import ColumnType
from filter_commons.constants.filter_op import FilterOp
from filter_commons.model.filter_model import Filter, ViewConfigUpdate
from filter_commons.repositories.column_metadata_repository import (
    ColumnMetadataRepository,
    ColumnNotFoundError,
)
from filter_commons.utils.operator_catalog import OperatorCatalog
from filter_commons.utils.value_codec import ValueCodec

logger = logging.getLogger(__name__)


class FilterControllerService:
    """
    Turns operator selections and keystrokes on one filter of a view into view config patches.

    Holds no per-filter state: every call takes the caller's current filter list and returns
    a new patch (or None when nothing changed). Applying the patch is up to the caller.
    """

    def __init__(self, metadata: ColumnMetadataRepository, codec: ValueCodec):
        self.metadata = metadata
        self.codec = codec
        logger.info("Initialized FilterControllerService")

    def get_column_type(self, filter_item: Filter) -> ColumnType:
        try:
            return self.metadata.get_column_type(filter_item.column)
        except ColumnNotFoundError as e:
            logger.error(f"Filter on unknown column: {str(e)}", exc_info=True)
            raise

    def legal_operators(self, filter_item: Filter) -> Tuple[FilterOp, ...]:
        return OperatorCatalog.legal_operators(self.get_column_type(filter_item))

    def is_suggestable(self, filter_item: Filter) -> bool:
        """Should the autocomplete collaborator look up value suggestions for this filter?"""
        return OperatorCatalog.is_suggestable(filter_item.op, self.get_column_type(filter_item))

    def set_operator(self, filters: Sequence[Filter], idx: int, op: FilterOp) -> ViewConfigUpdate:
        """
        Replace the operator of the filter at `idx`.
        The term is left as it is, even when it no longer fits the operator; the next
        value edit replaces it.
        """
        op = FilterOp(op)
        filter_item = self._get_filter(filters, idx)
        column_type = self.get_column_type(filter_item)
        if not OperatorCatalog.is_legal(op, column_type):
            logger.warning(f"Operator '{op.value}' is not offered for {column_type.value} column '{filter_item.column}'")

        updated = filter_item.with_op(op)
        if not updated.is_consistent:
            logger.debug(f"Filter {idx} on '{updated.column}' keeps a {'array' if updated.term.is_array else 'scalar'} term until the next edit")

        return self._replace(filters, idx, updated)

    def set_value(self, filters: Sequence[Filter], idx: int, raw: str) -> Optional[ViewConfigUpdate]:
        """
        Parse `raw` as the new term of the filter at `idx`, keeping its operator.
        Returns None when the input leaves the term unchanged (e.g. a lone "-" in a number field).
        """
        filter_item = self._get_filter(filters, idx)
        column_type = self.get_column_type(filter_item)

        term = self.codec.parse(raw, filter_item.op, column_type)
        if term is None:
            return None

        return self._replace(filters, idx, filter_item.with_term(term))

    def editable_text(self, filter_item: Filter, current: str = "") -> str:
        """
        Text the value field should show for `filter_item`.
        `current` is what the field shows now; it is kept when the term has no text form
        (an unset date).
        """
        text = self.codec.format(filter_item.term, self.get_column_type(filter_item))
        return current if text is None else text

    @staticmethod
    def _get_filter(filters: Sequence[Filter], idx: int) -> Filter:
        # no wrap-around: -1 is not the last filter
        if not 0 <= idx < len(filters):
            raise IndexError(f"{AppMessage.FILTER_NOT_FOUND}: index {idx} of {len(filters)} filters")
        return filters[idx]

    @staticmethod
    def _replace(filters: Sequence[Filter], idx: int, filter_item: Filter) -> ViewConfigUpdate:
        updated = list(filters)
        updated[idx] = filter_item
        return ViewConfigUpdate(filter=tuple(updated))
