class AppMessage:
    COLUMN_NOT_FOUND = 'column not found'
    FILTER_NOT_FOUND = 'filter not found'
    UNSUPPORTED_COLUMN_TYPE = 'unsupported column type'
    INVALID_SCALAR = 'invalid scalar value'
    INVALID_TERM = "filter term must set exactly one of 'scalar' or 'array'"
