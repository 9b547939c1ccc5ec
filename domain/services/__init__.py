"""
Domain services for exercise logs.

Pure functions with no infrastructure dependencies:
- dates: tagged date parsing and display formatting
- log_query: normalize-on-write and the filter/limit/format read pipeline
"""

from domain.services.dates import (
    INVALID_DATE,
    ParsedDate,
    UnparsableDate,
    ValidDate,
    format_calendar_date,
    format_log_date,
    parse_log_date,
    from_epoch_millis,
    to_storage_timestamp,
)
from domain.services.log_query import (
    apply_limit,
    coerce_duration,
    filter_by_range,
    format_exercise,
    normalize_exercise,
    query_log,
)

__all__ = [
    # Dates
    "INVALID_DATE",
    "ParsedDate",
    "ValidDate",
    "UnparsableDate",
    "parse_log_date",
    "format_calendar_date",
    "format_log_date",
    "from_epoch_millis",
    "to_storage_timestamp",
    # Log query
    "normalize_exercise",
    "coerce_duration",
    "filter_by_range",
    "apply_limit",
    "format_exercise",
    "query_log",
]
