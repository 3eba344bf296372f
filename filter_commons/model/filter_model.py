from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from filter_commons.constants.app_constants import AppConstants
from filter_commons.constants.filter_op import FilterOp
from filter_commons.model.scalar_model import FilterTerm, Scalar


class Filter(BaseModel):
    """One condition: column, operator and the term compared against the column."""
    model_config = ConfigDict(frozen=True)

    column: str
    op: FilterOp = FilterOp.EQ
    term: FilterTerm = FilterTerm.of_scalar(Scalar.null())

    @property
    def is_consistent(self) -> bool:
        """
        True when the term shape matches the operator (array terms only for `in`).
        A mismatch is expected right after an operator switch and is resolved by the next value edit.
        """
        return self.term.is_array == (self.op is FilterOp.IN)

    def with_op(self, op: FilterOp) -> 'Filter':
        return self.model_copy(update={"op": op})

    def with_term(self, term: FilterTerm) -> 'Filter':
        return self.model_copy(update={"term": term})

    def to_config_item(self) -> List[Any]:
        """Convert to the `[column, op, value]` form used by view configs."""
        return [self.column, self.op.value, self.term.to_config_value()]


class ViewConfigUpdate(BaseModel):
    """
    A patch for the view configuration.
    Keys left as None are not part of the update.
    """
    model_config = ConfigDict(frozen=True)

    filter: Optional[Tuple[Filter, ...]] = None

    def to_config(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {}
        if self.filter is not None:
            config[AppConstants.FILTER] = [f.to_config_item() for f in self.filter]
        return config


class ViewConfig(BaseModel):
    """The caller-owned view configuration; only the filter list is modelled here."""
    model_config = ConfigDict(frozen=True)

    filter: Tuple[Filter, ...] = ()

    def apply(self, update: ViewConfigUpdate) -> 'ViewConfig':
        """Return a new config with every key set on the update replaced."""
        if update.filter is None:
            return self
        return self.model_copy(update={AppConstants.FILTER: update.filter})
