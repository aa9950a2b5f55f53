"""Row codec: relational row <-> flat string hash.

Rendering rules per FieldType:
  INTEGER   decimal text               19          -> "19"
  STRING    str()                      "Virag"     -> "Virag"
  DECIMAL   fixed point, field scale   90101.34    -> "90101.34"
  DATE      ISO date                   2018-08-05  -> "2018-08-05"
  DATETIME  ISO date-time              ...04:07:50 -> "2018-08-05T04:07:50"
  NULL      empty string (any type)    None        -> ""

Floats are converted through their repr so 90101.34 does not pick up binary
noise. decode() rehydrates native values; "" becomes None except for STRING.
"""

from collections.abc import Callable, Mapping
from datetime import date, datetime
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Any

from src.ca_common.enums import FieldType
from src.ca_common.errors import CorruptEntryError, MissingFieldError
from src.ca_records.domain.schema import FieldSpec, RecordSchema

NULL_TEXT = ""


# ---------------------------------------------------------------------------
# Value -> text
# ---------------------------------------------------------------------------

def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(str(value).strip())


def _render_integer(value: Any, spec: FieldSpec) -> str:
    if isinstance(value, bool):
        raise TypeError("bool is not an integer column value")
    number = _to_decimal(value)
    if number != number.to_integral_value():
        raise ValueError(f"{value!r} is not integral")
    return str(int(number))


def _render_string(value: Any, spec: FieldSpec) -> str:
    return str(value)


def _render_decimal(value: Any, spec: FieldSpec) -> str:
    quantum = Decimal(1).scaleb(-spec.scale)
    return format(_to_decimal(value).quantize(quantum, rounding=ROUND_HALF_EVEN), "f")


def _render_date(value: Any, spec: FieldSpec) -> str:
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return datetime.fromisoformat(str(value).strip()).date().isoformat()


def _render_datetime(value: Any, spec: FieldSpec) -> str:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).isoformat()
    return datetime.fromisoformat(str(value).strip()).isoformat()


_RENDERERS: dict[FieldType, Callable[[Any, FieldSpec], str]] = {
    FieldType.INTEGER: _render_integer,
    FieldType.STRING: _render_string,
    FieldType.DECIMAL: _render_decimal,
    FieldType.DATE: _render_date,
    FieldType.DATETIME: _render_datetime,
}


# ---------------------------------------------------------------------------
# Text -> value
# ---------------------------------------------------------------------------

_PARSERS: dict[FieldType, Callable[[str], Any]] = {
    FieldType.INTEGER: int,
    FieldType.STRING: str,
    FieldType.DECIMAL: Decimal,
    FieldType.DATE: date.fromisoformat,
    FieldType.DATETIME: datetime.fromisoformat,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def encode(row: Mapping[str, Any], schema: RecordSchema) -> dict[str, str]:
    """Project a full row onto the schema as a string hash.

    Raises MissingFieldError if any declared field is absent or its value
    cannot be rendered for the declared type. Undeclared columns are ignored.
    """
    missing = [name for name in schema.field_names if name not in row]
    if missing:
        raise MissingFieldError(missing)

    fields: dict[str, str] = {}
    for spec in schema.fields:
        value = row[spec.name]
        if value is None:
            fields[spec.name] = NULL_TEXT
            continue
        try:
            fields[spec.name] = _RENDERERS[spec.type](value, spec)
        except (TypeError, ValueError, ArithmeticError) as exc:
            raise MissingFieldError(
                [spec.name], f"cannot render {value!r} as {spec.type.value}: {exc}"
            ) from exc
    return fields


def decode(entry: Mapping[str, str], schema: RecordSchema, key: str = "") -> dict[str, Any]:
    """Rehydrate a cache entry into native values.

    Raises CorruptEntryError if a declared key is absent or unparseable.
    """
    key = key or schema.namespace
    missing = [name for name in schema.field_names if name not in entry]
    if missing:
        raise CorruptEntryError(key, f"missing fields {', '.join(missing)}")

    record: dict[str, Any] = {}
    for spec in schema.fields:
        text = entry[spec.name]
        if text == NULL_TEXT and spec.type is not FieldType.STRING:
            record[spec.name] = None
            continue
        try:
            record[spec.name] = _PARSERS[spec.type](text)
        except (ValueError, InvalidOperation) as exc:
            raise CorruptEntryError(
                key, f"field {spec.name} is not a valid {spec.type.value}: {text!r}"
            ) from exc
    return record
