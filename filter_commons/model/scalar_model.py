import math
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

from filter_commons.constants.app_constants import AppConstants
from filter_commons.constants.app_message import AppMessage


class ScalarKind(str, Enum):
    """Tags of the scalar union"""
    STRING = "string"
    FLOAT = "float"
    DATETIME = "datetime"
    NULL = "null"


class Scalar(BaseModel):
    """
    A single typed filter value.

    - STRING   -> value is the raw text
    - FLOAT    -> value is a float (integer columns hold floored floats)
    - DATETIME -> value is a non-negative count of milliseconds since the epoch (UTC)
    - NULL     -> value is None
    """
    model_config = ConfigDict(frozen=True)

    kind: ScalarKind
    value: Union[str, float, int, None] = None

    @model_validator(mode="before")
    @classmethod
    def check_value_for_kind(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        kind = ScalarKind(data.get("kind"))
        value = data.get("value")

        if kind is ScalarKind.NULL:
            if value is not None:
                raise ValueError(f"{AppMessage.INVALID_SCALAR}: null scalar carries {value!r}")
        elif kind is ScalarKind.STRING:
            if not isinstance(value, str):
                raise ValueError(f"{AppMessage.INVALID_SCALAR}: {value!r} is not a string")
        elif kind is ScalarKind.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{AppMessage.INVALID_SCALAR}: {value!r} is not a number")
            value = float(value)
        elif kind is ScalarKind.DATETIME:
            # accept integral floats, e.g. from JSON round trips
            if isinstance(value, float) and value.is_integer():
                value = int(value)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"{AppMessage.INVALID_SCALAR}: {value!r} is not a non-negative millisecond count"
                )

        return {"kind": kind, "value": value}

    # -------------------------
    # constructors
    # -------------------------
    @classmethod
    def of_string(cls, text: str) -> 'Scalar':
        return cls(kind=ScalarKind.STRING, value=text)

    @classmethod
    def of_float(cls, number: float) -> 'Scalar':
        return cls(kind=ScalarKind.FLOAT, value=number)

    @classmethod
    def of_datetime(cls, millis: int) -> 'Scalar':
        return cls(kind=ScalarKind.DATETIME, value=millis)

    @classmethod
    def null(cls) -> 'Scalar':
        return cls(kind=ScalarKind.NULL)

    def text(self) -> str:
        """
        Canonical text form of the scalar.
        Integral floats drop the fractional part ("3", not "3.0") and null renders empty.
        """
        if self.kind is ScalarKind.NULL:
            return ""
        if self.kind is ScalarKind.FLOAT:
            if math.isfinite(self.value) and self.value.is_integer():
                return str(int(self.value))
            return repr(self.value)
        return str(self.value)

    def to_config_value(self) -> Union[str, float, int, None]:
        """Plain JSON-able value used in view config patches."""
        return self.value


class FilterTerm(BaseModel):
    """
    The value(s) compared against a column: either one scalar or an ordered array of scalars.
    The array form belongs to the `in` operator.
    """
    model_config = ConfigDict(frozen=True)

    scalar: Optional[Scalar] = None
    array: Optional[Tuple[Scalar, ...]] = None

    @model_validator(mode="after")
    def check_exactly_one(self) -> 'FilterTerm':
        if (self.scalar is None) == (self.array is None):
            raise ValueError(AppMessage.INVALID_TERM)
        return self

    @classmethod
    def of_scalar(cls, scalar: Scalar) -> 'FilterTerm':
        return cls(scalar=scalar)

    @classmethod
    def of_array(cls, scalars: List[Scalar]) -> 'FilterTerm':
        return cls(array=tuple(scalars))

    @property
    def is_array(self) -> bool:
        return self.array is not None

    def text(self) -> str:
        if self.array is not None:
            return AppConstants.IN_SEPARATOR.join(s.text() for s in self.array)
        return self.scalar.text()

    def to_config_value(self) -> Any:
        if self.array is not None:
            return [s.to_config_value() for s in self.array]
        return self.scalar.to_config_value()
