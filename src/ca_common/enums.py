"""Global enums."""

from enum import Enum


class FieldType(str, Enum):
    """Primitive column types the row codec knows how to render."""
    INTEGER = "INTEGER"
    STRING = "STRING"
    DECIMAL = "DECIMAL"
    DATE = "DATE"
    DATETIME = "DATETIME"


class LookupStatus(str, Enum):
    """Which path a read-through lookup took."""
    HIT = "HIT"
    MISS = "MISS"
    NOT_FOUND = "NOT_FOUND"
