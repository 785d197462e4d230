"""Top-level QuickBooks response envelopes.

Single reads come back as `{"Customer": {...}, "time": "..."}`; queries as
`{"QueryResponse": {"Customer": [...], "startPosition": 1, "maxResults": 2}}`.
Faults (`{"Fault": {...}}`) carry neither and decode to an empty envelope.
"""

from __future__ import annotations

from pydantic import Field, StrictInt, StrictStr

from accounting_integration.accounting.mapper import FieldMapper
from accounting_integration.accounting.quickbooks.customer import Customer
from accounting_integration.accounting.quickbooks.invoice import Invoice
from accounting_integration.accounting.quickbooks.payment import Payment

_SINGLE = {"Customer": "customer", "Invoice": "invoice", "Payment": "payment"}
_COLLECTION = {"Customer": "customers", "Invoice": "invoices", "Payment": "payments"}


class QueryResponse(FieldMapper):
    customers: list[Customer] | None = Field(default=None, alias="Customer")
    invoices: list[Invoice] | None = Field(default=None, alias="Invoice")
    payments: list[Payment] | None = Field(default=None, alias="Payment")
    start_position: StrictInt | None = Field(default=None, alias="startPosition")
    max_results: StrictInt | None = Field(default=None, alias="maxResults")
    total_count: StrictInt | None = Field(default=None, alias="totalCount")

    def records(self, resource_name: str) -> list:
        attr = _COLLECTION.get(resource_name)
        if attr is None:
            return []
        return list(getattr(self, attr) or [])


class Response(FieldMapper):
    query_response: QueryResponse | None = Field(default=None, alias="QueryResponse")
    customer: Customer | None = Field(default=None, alias="Customer")
    invoice: Invoice | None = Field(default=None, alias="Invoice")
    payment: Payment | None = Field(default=None, alias="Payment")
    time: StrictStr | None = Field(default=None, alias="time")

    def entity(self, resource_name: str):
        attr = _SINGLE.get(resource_name)
        return getattr(self, attr) if attr else None

    def collection(self, resource_name: str) -> list:
        if self.query_response is None:
            return []
        return self.query_response.records(resource_name)
