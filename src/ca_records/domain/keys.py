"""Cache key mapping: "<namespace>:<id>".

The namespace may not contain the separator and ids are rendered as
canonical decimal text, so the mapping is bijective within a namespace.
"""

from src.ca_common.errors import InvalidIdError
from src.ca_records.domain.schema import KEY_SEPARATOR


def to_cache_key(namespace: str, record_id: int) -> str:
    """Build the cache key for one record. Pure; raises InvalidIdError."""
    if not namespace:
        raise InvalidIdError("namespace must not be empty")
    if KEY_SEPARATOR in namespace:
        raise InvalidIdError(f"namespace must not contain {KEY_SEPARATOR!r}: {namespace}")
    # bool is an int subclass; True must not silently become "1"
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise InvalidIdError(f"id must be an integer, got {type(record_id).__name__}")
    if record_id < 0:
        raise InvalidIdError(f"id must be >= 0, got {record_id}")
    return f"{namespace}{KEY_SEPARATOR}{record_id}"


def parse_cache_key(key: str) -> tuple[str, int]:
    """Inverse of to_cache_key: "emp:1" -> ("emp", 1)."""
    namespace, sep, raw_id = key.rpartition(KEY_SEPARATOR)
    if not sep or not namespace or KEY_SEPARATOR in namespace:
        raise InvalidIdError(f"malformed cache key: {key!r}")
    # Reject "+1", "01", " 1": they would map back to a different key
    if not raw_id.isdigit() or not raw_id.isascii() or (len(raw_id) > 1 and raw_id[0] == "0"):
        raise InvalidIdError(f"malformed cache key: {key!r}")
    return namespace, int(raw_id)
