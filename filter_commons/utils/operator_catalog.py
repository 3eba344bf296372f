from typing import Dict, Tuple

from filter_commons.constants.column_type import ColumnType
from filter_commons.constants.filter_op import FilterOp

"""
================================================================================
Operators by Column Type
================================================================================
| Column type                              | Legal operators (display order)                          |
|------------------------------------------|----------------------------------------------------------|
| string                                   | ==, !=, >, >=, <, <=, begins with, contains, ends with,  |
|                                          | in, is not null, is null                                 |
| integer, float, boolean, date, datetime  | ==, !=, >, >=, <, <=, is not null, is null               |

The order is the order an operator picker shows them in.
Only `==` on a string column gets value suggestions (autocomplete).
================================================================================
"""

_COMPARISON_OPS: Tuple[FilterOp, ...] = (
    FilterOp.EQ,
    FilterOp.NE,
    FilterOp.GT,
    FilterOp.GTE,
    FilterOp.LT,
    FilterOp.LTE,
)

_NULL_OPS: Tuple[FilterOp, ...] = (
    FilterOp.IS_NOT_NULL,
    FilterOp.IS_NULL,
)


class OperatorCatalog:
    """
    Legal filter operators per column type.
    """

    STRING_OPERATORS: Tuple[FilterOp, ...] = _COMPARISON_OPS + (
        FilterOp.BEGINS_WITH,
        FilterOp.CONTAINS,
        FilterOp.ENDS_WITH,
        FilterOp.IN,
    ) + _NULL_OPS

    DEFAULT_OPERATORS: Tuple[FilterOp, ...] = _COMPARISON_OPS + _NULL_OPS

    OPERATORS_BY_TYPE: Dict[ColumnType, Tuple[FilterOp, ...]] = {
        ColumnType.STRING: STRING_OPERATORS,
        ColumnType.INTEGER: DEFAULT_OPERATORS,
        ColumnType.FLOAT: DEFAULT_OPERATORS,
        ColumnType.BOOLEAN: DEFAULT_OPERATORS,
        ColumnType.DATE: DEFAULT_OPERATORS,
        ColumnType.DATETIME: DEFAULT_OPERATORS,
    }

    @classmethod
    def legal_operators(cls, column_type: ColumnType) -> Tuple[FilterOp, ...]:
        return cls.OPERATORS_BY_TYPE[column_type]

    @classmethod
    def is_legal(cls, op: FilterOp, column_type: ColumnType) -> bool:
        return op in cls.OPERATORS_BY_TYPE[column_type]

    @staticmethod
    def is_suggestable(op: FilterOp, column_type: ColumnType) -> bool:
        """Does a filter with this operator and column type get value suggestions?"""
        return op == FilterOp.EQ and column_type == ColumnType.STRING
