import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

_SCHEMA_CACHE: dict[str, dict[str, Any]] = {}


def format_schema_error(error: Any) -> str:
    path = ".".join([str(part) for part in error.path])
    return f"{error.message} at {path}" if path else str(error.message)


class ConfigSchemaRepository:
    def __init__(self, schema_path: Path | None = None) -> None:
        self.schema_path = schema_path or (
            Path(__file__).resolve().parent / "schema.json"
        )

    def load_schema(self) -> dict[str, Any]:
        key = str(self.schema_path.resolve())
        cached = _SCHEMA_CACHE.get(key)
        if cached is not None:
            return cached
        schema = json.loads(self.schema_path.read_text(encoding="utf-8"))
        _SCHEMA_CACHE[key] = schema
        return schema

    def validator(self) -> Draft202012Validator:
        return Draft202012Validator(self.load_schema())

    def first_error(self, payload: Any) -> str | None:
        error = next(iter(self.validator().iter_errors(payload)), None)
        if error is None:
            return None
        return format_schema_error(error)
