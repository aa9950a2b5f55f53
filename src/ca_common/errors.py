"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Caller input (rejected before any I/O)
  2xxx: Record lookup
  3xxx: Encoding / schema mismatch between source and cache
  9xxx: Backend / system
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Caller input ---

class InvalidIdError(AppError):
    def __init__(self, detail: str) -> None:
        super().__init__(1001, f"Invalid record id: {detail}", 422)


class UnknownNamespaceError(AppError):
    def __init__(self, namespace: str) -> None:
        super().__init__(1002, f"Unknown namespace: {namespace}", 404)


# --- 2xxx: Lookup ---

class RecordNotFoundError(AppError):
    def __init__(self, namespace: str, record_id: int) -> None:
        super().__init__(2001, f"Record not found: {namespace}:{record_id}", 404)


# --- 3xxx: Codec ---

class MissingFieldError(AppError):
    def __init__(self, fields: list[str], detail: str | None = None) -> None:
        self.fields = fields
        message = f"Row is missing declared fields: {', '.join(fields)}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(3001, message, 500)


class CorruptEntryError(AppError):
    def __init__(self, key: str, detail: str) -> None:
        self.key = key
        super().__init__(3002, f"Corrupt cache entry {key}: {detail}", 500)


# --- 9xxx: Backend ---

class BackendUnavailableError(AppError):
    def __init__(self, backend: str, detail: str = "unreachable") -> None:
        self.backend = backend
        super().__init__(9001, f"{backend} unavailable: {detail}", 503)
