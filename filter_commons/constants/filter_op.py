from enum import Enum


class FilterOp(str, Enum):
    EQ = "=="
    NE = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    BEGINS_WITH = "begins with"
    CONTAINS = "contains"
    ENDS_WITH = "ends with"
    IN = "in"
    IS_NULL = "is null"
    IS_NOT_NULL = "is not null"
