"""Declared record shapes: pure dataclasses, validated on construction.

A RecordSchema tells the codec which fields make up a complete cache entry
and tells the SQL source which table/columns to read. Names end up inside
generated SQL, so they are restricted to plain identifiers.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from src.ca_common.enums import FieldType
from src.ca_common.errors import UnknownNamespaceError

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
KEY_SEPARATOR = ":"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: FieldType
    scale: int = 2  # DECIMAL only

    def __post_init__(self) -> None:
        if not _IDENTIFIER.match(self.name):
            raise ValueError(f"Field name is not an identifier: {self.name!r}")
        if self.scale < 0:
            raise ValueError(f"Scale must be >= 0, got {self.scale}")


@dataclass(frozen=True)
class RecordSchema:
    namespace: str
    table: str
    primary_key: str
    fields: tuple[FieldSpec, ...]

    def __post_init__(self) -> None:
        if not self.namespace or KEY_SEPARATOR in self.namespace:
            raise ValueError(f"Invalid namespace: {self.namespace!r}")
        # Schema-qualified tables (hr.emp) are allowed
        if not all(_IDENTIFIER.match(part) for part in self.table.split(".")):
            raise ValueError(f"Table name is not an identifier: {self.table!r}")
        names = [f.name for f in self.fields]
        if len(set(names)) != len(names):
            raise ValueError(f"Duplicate field names in schema {self.namespace}")
        pk = self.field(self.primary_key)
        if pk is None:
            raise ValueError(f"Primary key {self.primary_key!r} is not a declared field")
        if pk.type is not FieldType.INTEGER:
            raise ValueError(f"Primary key {self.primary_key!r} must be INTEGER")

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def field(self, name: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


class SchemaRegistry:
    """Namespace → schema lookup used by the resolver."""

    def __init__(self, schemas: Iterable[RecordSchema] = ()) -> None:
        self._schemas: dict[str, RecordSchema] = {}
        for schema in schemas:
            self.register(schema)

    def register(self, schema: RecordSchema) -> None:
        if schema.namespace in self._schemas:
            raise ValueError(f"Namespace already registered: {schema.namespace}")
        self._schemas[schema.namespace] = schema

    def get(self, namespace: str) -> RecordSchema:
        try:
            return self._schemas[namespace]
        except KeyError:
            raise UnknownNamespaceError(namespace) from None

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._schemas

    @property
    def namespaces(self) -> list[str]:
        return sorted(self._schemas)


# ---------------------------------------------------------------------------
# Built-in schemas
# ---------------------------------------------------------------------------

EMP_SCHEMA = RecordSchema(
    namespace="emp",
    table="emp",
    primary_key="empno",
    fields=(
        FieldSpec("empno", FieldType.INTEGER),
        FieldSpec("fname", FieldType.STRING),
        FieldSpec("lname", FieldType.STRING),
        FieldSpec("job", FieldType.STRING),
        FieldSpec("mgr", FieldType.INTEGER),
        FieldSpec("hiredate", FieldType.DATE),
        FieldSpec("sal", FieldType.DECIMAL, scale=2),
        FieldSpec("comm", FieldType.DECIMAL, scale=2),
        FieldSpec("dept", FieldType.INTEGER),
    ),
)


def default_registry() -> SchemaRegistry:
    return SchemaRegistry([EMP_SCHEMA])
