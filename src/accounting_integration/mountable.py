"""Mount remote accounting entities onto host records.

    class Client(Mountable):
        def __init__(self):
            self.display_name = None
            self.quickbooks_customer_id = None
            self.quickbooks_customer_connection = None

        def save(self): ...

    Client.mounts_accounting_model(
        "quickbooks_customer",
        model_class=Customer,
        external_id_attribute="quickbooks_customer_id",
    )

This generates on `Client`:
- `quickbooks_customer` property: fetches the Customer by the stored id,
  assigning a Customer stores its id
- `sync_to_quickbooks_customer()`: copy host values onto the Customer and save it
- `sync_from_quickbooks_customer()`: copy Customer values onto the host and save it
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar

logger = logging.getLogger(__name__)

Mapper = Callable[[Any, Any], dict[str, Any]]


@dataclass(frozen=True, slots=True)
class MountedAccountingModel:
    name: str
    model_class: type | str
    external_id_attribute: str
    connection_method: str
    mapper: Mapper | None = None
    mapper_to: Mapper | None = None
    mapper_from: Mapper | None = None

    def resolve_model_class(self) -> type:
        if not isinstance(self.model_class, str):
            return self.model_class
        module_name, _, attr = self.model_class.rpartition(".")
        if not module_name:
            raise ImportError(f"model_class must be a dotted path, got {self.model_class!r}")
        return getattr(importlib.import_module(module_name), attr)

    def to_mapper(self) -> Mapper | None:
        return self.mapper_to or self.mapper

    def from_mapper(self) -> Mapper | None:
        return self.mapper_from or self.mapper


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return not value
    return False


def _schema_fields(entity: Any) -> set[str]:
    field_names = getattr(type(entity), "field_names", None)
    return set(field_names()) if callable(field_names) else set()


def _syncable_fields(entity: Any) -> set[str]:
    syncable = getattr(type(entity), "syncable_field_names", None)
    return set(syncable()) if callable(syncable) else _schema_fields(entity)


class Mountable:
    # Optional explicit list of host attributes the default mapping may touch.
    mountable_attributes: ClassVar[tuple[str, ...] | None] = None

    _mounted_accounting_models: ClassVar[dict[str, MountedAccountingModel]] = {}

    @classmethod
    def mounts_accounting_model(
        cls,
        name: str,
        *,
        model_class: type | str,
        external_id_attribute: str,
        connection_method: str | None = None,
        mapper: Mapper | None = None,
        mapper_to: Mapper | None = None,
        mapper_from: Mapper | None = None,
    ) -> MountedAccountingModel:
        mount = MountedAccountingModel(
            name=name,
            model_class=model_class,
            external_id_attribute=external_id_attribute,
            connection_method=connection_method or f"{name}_connection",
            mapper=mapper,
            mapper_to=mapper_to,
            mapper_from=mapper_from,
        )
        # Copy so subclasses never write into a parent's registry.
        cls._mounted_accounting_models = {**cls._mounted_accounting_models, name: mount}

        setattr(cls, name, property(_getter(name), _setter(name)))
        setattr(cls, f"sync_to_{name}", _sync_to(name))
        setattr(cls, f"sync_from_{name}", _sync_from(name))
        logger.debug("Mounted %s on %s as %r", mount.model_class, cls.__name__, name)
        return mount

    @classmethod
    def mounted_accounting_model(cls, name: str) -> MountedAccountingModel | None:
        return cls._mounted_accounting_models.get(name)

    def _mount_connection(self, mount: MountedAccountingModel) -> Any:
        target = getattr(self, mount.connection_method, None)
        return target() if callable(target) else target

    def _host_attribute_names(self) -> set[str]:
        declared = type(self).mountable_attributes
        if declared is not None:
            return set(declared)
        return {key for key in getattr(self, "__dict__", {}) if not key.startswith("_")}

    def _default_map_to(self, entity: Any, exclude: str | None = None) -> dict[str, Any]:
        attributes = {}
        for key in _syncable_fields(entity) & self._host_attribute_names():
            if key == exclude:
                continue
            value = getattr(self, key, None)
            if not _is_blank(value):
                attributes[key] = value
        return attributes

    def _default_map_from(self, entity: Any, exclude: str | None = None) -> dict[str, Any]:
        attributes = {}
        for key in _syncable_fields(entity) & self._host_attribute_names():
            if key == exclude:
                continue
            value = getattr(entity, key, None)
            if not _is_blank(value):
                attributes[key] = value
        return attributes


def _getter(name: str) -> Callable[[Mountable], Any]:
    def get(self: Mountable) -> Any:
        mount = type(self).mounted_accounting_model(name)
        if mount is None:
            return None

        external_id = getattr(self, mount.external_id_attribute, None)
        if external_id is None or external_id == "":
            return None

        connection = self._mount_connection(mount)
        if connection is None:
            return None

        return mount.resolve_model_class().fetch_by_id(external_id, connection)

    get.__name__ = name
    return get


def _setter(name: str) -> Callable[[Mountable, Any], None]:
    def set_(self: Mountable, entity: Any) -> None:
        if entity is None:
            return
        mount = type(self).mounted_accounting_model(name)
        if mount is None:
            return

        external_id = getattr(entity, "external_id", None)
        if external_id is not None and external_id != "":
            setattr(self, mount.external_id_attribute, external_id)

    set_.__name__ = name
    return set_


def _sync_to(name: str) -> Callable[[Mountable], Any]:
    def sync_to(self: Mountable) -> Any:
        mount = type(self).mounted_accounting_model(name)
        if mount is None:
            return None

        entity = getattr(self, name)
        if entity is None:
            return None

        mapper = mount.to_mapper()
        if mapper is not None:
            attributes = mapper(self, entity) or {}
        else:
            attributes = self._default_map_to(entity, exclude=mount.external_id_attribute)

        declared = _schema_fields(entity)
        for key, value in attributes.items():
            if key in declared:
                setattr(entity, key, value)

        save = getattr(entity, "save", None)
        if callable(save):
            save()
        return entity

    sync_to.__name__ = f"sync_to_{name}"
    return sync_to


def _sync_from(name: str) -> Callable[[Mountable], Any]:
    def sync_from(self: Mountable) -> Any:
        mount = type(self).mounted_accounting_model(name)
        if mount is None:
            return None

        entity = getattr(self, name)
        if entity is None:
            return None

        mapper = mount.from_mapper()
        if mapper is not None:
            attributes = mapper(self, entity) or {}
        else:
            attributes = self._default_map_from(entity, exclude=mount.external_id_attribute)

        assign = getattr(self, "assign_attributes", None)
        if callable(assign):
            assign(attributes)
        else:
            for key, value in attributes.items():
                setattr(self, key, value)

        save = getattr(self, "save", None)
        if callable(save):
            save()
        return self

    sync_from.__name__ = f"sync_from_{name}"
    return sync_from
