"""Pydantic schemas for ca_records API responses."""

from pydantic import BaseModel

from src.ca_common.enums import LookupStatus
from src.ca_records.application.resolver import Lookup


class RecordOut(BaseModel):
    key: str
    cache_status: LookupStatus
    fields: dict[str, str]

    @classmethod
    def from_lookup(cls, lookup: Lookup) -> "RecordOut":
        return cls(key=lookup.key, cache_status=lookup.status, fields=lookup.fields or {})
