class AppConstants:
    # view config keys
    FILTER = 'filter'

    # date editing
    DATE_FORMAT = '%Y-%m-%d'
    IN_SEPARATOR = ','

    # environment
    LOCAL_TIMEZONE_ENV = 'FILTER_LOCAL_TIMEZONE'
