"""Behaviour shared by QuickBooks entities (Customer, Invoice, Payment).

Endpoints (per realm):
- GET  /v3/company/<realmId>/<resource>/<id>
- GET  /v3/company/<realmId>/query?query=select * from <Resource>
- POST /v3/company/<realmId>/<resource>/     (create, or update when Id/SyncToken are sent)
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar
from urllib.parse import quote

from pydantic import Field, StrictStr

from accounting_integration.accounting.base_model import BaseAccountingModel
from accounting_integration.accounting.quickbooks.components import MetaData
from accounting_integration.accounting.quickbooks.connection import QuickBooksConnection
from accounting_integration.errors import DecodingError

logger = logging.getLogger(__name__)


class QuickBooksModel(BaseAccountingModel):
    # Remote resource name as used in envelopes and queries, e.g. "Invoice".
    resource_name: ClassVar[str] = ""
    readonly_fields: ClassVar[frozenset[str]] = frozenset({"id", "sync_token", "meta_data", "domain"})

    id: StrictStr | None = Field(default=None, alias="Id")
    # QuickBooks sends SyncToken as a numeric string.
    sync_token: int | None = Field(default=None, alias="SyncToken")
    meta_data: MetaData | None = Field(default=None, alias="MetaData")

    @classmethod
    def url_builder(cls, connection: QuickBooksConnection, query: str | None = None) -> str:
        url = f"/v3/company/{connection.realm_id}"
        if query:
            return f"{url}/query?query={quote(query)}"
        return f"{url}/{cls.resource_name.lower()}/"

    @classmethod
    def fetch_by_id(cls, id: Any, connection: Any):
        if id is None or id == "" or not isinstance(connection, QuickBooksConnection):
            return None

        from accounting_integration.accounting.quickbooks.response import Response

        response = connection.request("GET", f"{cls.url_builder(connection)}{id}")
        if not response.ok:
            logger.debug(
                "%s %s not found in realm %s (HTTP %s)",
                cls.resource_name,
                id,
                connection.realm_id,
                response.status_code,
            )
            return None

        record = Response.from_json(response.text).entity(cls.resource_name)
        if record is None:
            logger.debug("%s %s not found in realm %s", cls.resource_name, id, connection.realm_id)
            return None

        record.attach(connection)
        return record

    @classmethod
    def fetch_all(cls, connection: Any) -> list:
        if not isinstance(connection, QuickBooksConnection):
            return []

        from accounting_integration.accounting.quickbooks.response import Response

        path = cls.url_builder(connection, query=f"select * from {cls.resource_name}")
        response = connection.request("GET", path)
        if not response.ok:
            logger.warning(
                "QuickBooks %s query failed (HTTP %s): %s",
                cls.resource_name,
                response.status_code,
                response.text,
            )
            return []

        records = Response.from_json(response.text).collection(cls.resource_name)
        for record in records:
            record.attach(connection)
        return records

    def push_to_source(self) -> bool:
        connection = self._connection
        response = connection.request("POST", self.url_builder(connection), body=self.to_json())
        if not response.ok:
            logger.warning(
                "QuickBooks rejected %s push (HTTP %s): %s",
                self.resource_name,
                response.status_code,
                response.text,
            )
            return False

        try:
            saved = self._read_push_response(response)
        except DecodingError as exc:
            logger.warning("QuickBooks %s push returned an unreadable record: %s", self.resource_name, exc)
            return False

        if saved is not None:
            if saved.sync_token is not None:
                self.sync_token = saved.sync_token
            if self.id is None and saved.id is not None:
                self.id = saved.id
        self._persisted = True
        return True

    def _read_push_response(self, response: Any):
        """Decode the identity fields echoed back by a successful push."""

        try:
            payload = response.json()
        except ValueError:
            logger.warning("QuickBooks %s push returned a non-JSON body", self.resource_name)
            return None

        saved = payload.get(self.resource_name) if isinstance(payload, dict) else None
        if not isinstance(saved, dict):
            return None
        identity = {key: saved[key] for key in ("Id", "SyncToken") if saved.get(key) is not None}
        if "Id" in identity:
            identity["Id"] = str(identity["Id"])
        return type(self).from_dict(identity)
