from .paths import ROOT_PATH, normalize_list_path
from .time import (
    SERVICE_TIME_FORMAT,
    normalize_dt,
    parse_optional_timestamp,
    parse_timestamp,
    to_service_time,
)

__all__ = [
    "ROOT_PATH",
    "normalize_list_path",
    "SERVICE_TIME_FORMAT",
    "parse_timestamp",
    "parse_optional_timestamp",
    "to_service_time",
    "normalize_dt",
]
