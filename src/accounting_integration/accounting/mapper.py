"""Declarative JSON <-> record mapping.

A mapper is a pydantic model whose fields carry the provider's JSON name as
their alias. Decoding accepts provider names, constructors accept local names,
and encoding always emits provider names with absent values left out.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from accounting_integration.errors import DecodingError

# pydantic error type -> JSON type the mapping expected
_EXPECTED_TYPES = {
    "string_type": "string",
    "string_unicode": "string",
    "float_type": "float",
    "float_parsing": "float",
    "finite_number": "float",
    "int_type": "integer",
    "int_parsing": "integer",
    "int_from_float": "integer",
    "bool_type": "boolean",
    "bool_parsing": "boolean",
    "date_type": "date",
    "date_parsing": "date",
    "date_from_datetime_parsing": "date",
    "date_from_datetime_inexact": "date",
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "list_type": "list",
}


def decoding_error_from(exc: PydanticValidationError) -> DecodingError:
    """Translate the first pydantic error into a DecodingError."""

    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ())) or exc.title
    kind = error.get("type", "")
    return DecodingError(field, _EXPECTED_TYPES.get(kind, kind), error.get("msg"))


class FieldMapper(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    def __setattr__(self, name: str, value: Any) -> None:
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as exc:
            raise decoding_error_from(exc) from exc

    @classmethod
    def from_dict(cls, payload: Any):
        if not isinstance(payload, dict):
            raise DecodingError(cls.__name__, "object")
        try:
            return cls.model_validate(payload)
        except PydanticValidationError as exc:
            raise decoding_error_from(exc) from exc

    @classmethod
    def from_json(cls, raw: str | bytes | None):
        """Decode a JSON document; an empty body decodes to an empty record."""

        if raw is None or not raw.strip():
            return cls.from_dict({})
        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise DecodingError(cls.__name__, "JSON document", str(exc)) from exc
        return cls.from_dict(payload)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(cls.model_fields)

    @classmethod
    def remote_name(cls, field: str) -> str:
        info = cls.model_fields[field]
        return info.alias or field

    def __getitem__(self, key: str) -> Any:
        if key in type(self).model_fields:
            return getattr(self, key)
        return None

    def __setitem__(self, key: str, value: Any) -> None:
        if key in type(self).model_fields:
            setattr(self, key, value)
