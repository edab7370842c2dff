from .config_logging import LOGGING, logging_config
from .converters_scalar import (
    HB_MAX_DATE,
    HB_MIN_DATE,
    add_months,
    date_to_julian,
    first_of_month,
    first_of_months,
    julian_to_date,
    parse_amount,
    parse_char,
    parse_float,
    parse_int,
    parse_julian,
    parse_key,
)
from .core_util import (
    compile_regex,
    exact_name_regex,
    open_for_read,
    resolve_path,
)

__all__ = [
    "LOGGING",
    "logging_config",
    "HB_MIN_DATE",
    "HB_MAX_DATE",
    "add_months",
    "date_to_julian",
    "first_of_month",
    "first_of_months",
    "julian_to_date",
    "parse_amount",
    "parse_char",
    "parse_float",
    "parse_int",
    "parse_julian",
    "parse_key",
    "compile_regex",
    "exact_name_regex",
    "open_for_read",
    "resolve_path",
]
