"""Provider-neutral accounting entity.

Subclasses describe one remote resource type. They declare its fields (see
`FieldMapper`) and implement `fetch_by_id`, `fetch_all` and `push_to_source`
against their provider's connection. Everything else, the validate/save/update
lifecycle and the soft `create`, lives here.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import PrivateAttr
from pydantic import ValidationError as PydanticValidationError

from accounting_integration.accounting.mapper import FieldMapper, decoding_error_from
from accounting_integration.errors import UnimplementedOperationError, ValidationError

logger = logging.getLogger(__name__)


class BaseAccountingModel(FieldMapper):
    # Fields owned by the remote side; never copied by attribute-sync defaults.
    readonly_fields: ClassVar[frozenset[str]] = frozenset()

    _connection: Any = PrivateAttr(default=None)
    _persisted: bool = PrivateAttr(default=False)
    _errors: list[str] = PrivateAttr(default_factory=list)

    def __init__(self, connection: Any = None, persisted: bool = False, **attributes: Any) -> None:
        try:
            super().__init__(**attributes)
        except PydanticValidationError as exc:
            raise decoding_error_from(exc) from exc
        self._connection = connection
        self._persisted = persisted

    # ------------------------------------------------------------------
    # Remote operations (provider specific)
    # ------------------------------------------------------------------
    @classmethod
    def fetch_by_id(cls, id: Any, connection: Any):
        raise UnimplementedOperationError("fetch_by_id", cls.__name__)

    @classmethod
    def fetch_all(cls, connection: Any) -> list:
        raise UnimplementedOperationError("fetch_all", cls.__name__)

    def push_to_source(self) -> bool:
        raise UnimplementedOperationError("push_to_source", type(self).__name__)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @classmethod
    def create(cls, attributes: dict[str, Any] | None = None, *, connection: Any = None):
        """Build a record and try to save it.

        The record is returned whether or not it was valid or saved; callers
        check `persisted` / `is_valid()` themselves.
        """

        attributes = dict(attributes or {})
        connection = attributes.pop("connection", connection)
        model = cls(connection=connection, **attributes)
        if model.is_valid():
            model.save()
        return model

    def save(self) -> bool:
        if not self.is_valid():
            logger.debug("Not saving %s: %s", type(self).__name__, "; ".join(self._errors))
            return False
        return bool(self.push_to_source())

    def update(self, attributes: dict[str, Any] | None = None, **changes: Any) -> bool:
        self.assign_attributes({**(attributes or {}), **changes})
        return self.save()

    def assign_attributes(self, attributes: dict[str, Any]) -> None:
        fields = type(self).model_fields
        for key, value in attributes.items():
            if key in fields:
                setattr(self, key, value)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validation_errors(self) -> list[str]:
        errors = []
        if self._connection is None:
            errors.append("connection is required")
        return errors

    def run_validations(self) -> None:
        self._errors = self.validation_errors()
        if self._errors:
            raise ValidationError(self._errors)

    def is_valid(self) -> bool:
        try:
            self.run_validations()
        except ValidationError:
            return False
        return True

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def persisted(self) -> bool:
        return self._persisted

    @property
    def external_id(self) -> Any:
        return getattr(self, "id", None)

    def attach(self, connection: Any, *, persisted: bool = True) -> None:
        self._connection = connection
        self._persisted = persisted

    @classmethod
    def syncable_field_names(cls) -> tuple[str, ...]:
        return tuple(name for name in cls.model_fields if name not in cls.readonly_fields)
