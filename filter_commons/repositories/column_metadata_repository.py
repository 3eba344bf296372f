import logging
from typing import Dict, Union

from filter_commons.constants.app_message import AppMessage
from filter_commons.constants.column_type import ColumnType

logger = logging.getLogger(__name__)


class ColumnNotFoundError(KeyError):
    """Raised when a column is not in the dataset metadata. Callers must not recover from it."""

    def __init__(self, column: str):
        super().__init__(column)
        self.column = column

    def __str__(self) -> str:
        return f"{AppMessage.COLUMN_NOT_FOUND}: '{self.column}'"


class ColumnMetadataRepository:
    """
    Declared column types of one dataset, keyed by column name.
    The types come from the dataset's own metadata; nothing here infers them.
    """

    def __init__(self, schema: Dict[str, Union[ColumnType, str]]):
        """
        :param schema: mapping column name -> column type (a ColumnType or its value, e.g. 'date')
        """
        self.schema: Dict[str, ColumnType] = {}
        for column, column_type in schema.items():
            try:
                self.schema[column] = ColumnType(column_type)
            except ValueError:
                raise ValueError(
                    f"{AppMessage.UNSUPPORTED_COLUMN_TYPE} for column '{column}': {column_type}"
                ) from None

        logger.info(f"Initialized ColumnMetadataRepository with {len(self.schema)} columns")

    def get_column_type(self, column: str) -> ColumnType:
        """
        Declared type of `column`.

        Raises:
            ColumnNotFoundError: the column is not part of the dataset
        """
        try:
            return self.schema[column]
        except KeyError:
            raise ColumnNotFoundError(column) from None
