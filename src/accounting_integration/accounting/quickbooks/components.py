"""QuickBooks value objects nested inside entities."""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from accounting_integration.accounting.mapper import FieldMapper


class BaseReference(FieldMapper):
    value: StrictStr | None = Field(default=None, alias="value")
    name: StrictStr | None = Field(default=None, alias="name")


class EmailAddress(FieldMapper):
    address: StrictStr | None = Field(default=None, alias="Address")


class TelephoneNumber(FieldMapper):
    free_form_number: StrictStr | None = Field(default=None, alias="FreeFormNumber")


class WebSiteAddress(FieldMapper):
    uri: StrictStr | None = Field(default=None, alias="URI")


class MetaData(FieldMapper):
    create_time: StrictStr | None = Field(default=None, alias="CreateTime")
    last_updated_time: StrictStr | None = Field(default=None, alias="LastUpdatedTime")


class PhysicalAddress(FieldMapper):
    id: StrictStr | None = Field(default=None, alias="Id")
    line1: StrictStr | None = Field(default=None, alias="Line1")
    line2: StrictStr | None = Field(default=None, alias="Line2")
    line3: StrictStr | None = Field(default=None, alias="Line3")
    line4: StrictStr | None = Field(default=None, alias="Line4")
    line5: StrictStr | None = Field(default=None, alias="Line5")
    city: StrictStr | None = Field(default=None, alias="City")
    country: StrictStr | None = Field(default=None, alias="Country")
    country_sub_division_code: StrictStr | None = Field(default=None, alias="CountrySubDivisionCode")
    postal_code: StrictStr | None = Field(default=None, alias="PostalCode")
    lat: StrictStr | None = Field(default=None, alias="Lat")
    long: StrictStr | None = Field(default=None, alias="Long")

    def formatted(self) -> str:
        """Single-line postal form, e.g. "1 Main St, Springfield, CA, 94000"."""

        parts = [
            self.line1,
            self.line2,
            self.line3,
            self.line4,
            self.line5,
            self.city,
            self.country_sub_division_code,
            self.postal_code,
            self.country,
        ]
        return ", ".join(p.strip() for p in parts if p and p.strip())


class CustomField(FieldMapper):
    definition_id: StrictStr | None = Field(default=None, alias="DefinitionId")
    name: StrictStr | None = Field(default=None, alias="Name")
    type: StrictStr | None = Field(default=None, alias="Type")
    string_value: StrictStr | None = Field(default=None, alias="StringValue")


class DeliveryInfo(FieldMapper):
    delivery_type: StrictStr | None = Field(default=None, alias="DeliveryType")
    delivery_time: StrictStr | None = Field(default=None, alias="DeliveryTime")


class LinkedTransaction(FieldMapper):
    txn_id: StrictStr | None = Field(default=None, alias="TxnId")
    txn_type: StrictStr | None = Field(default=None, alias="TxnType")
    txn_line_id: StrictStr | None = Field(default=None, alias="TxnLineId")


class LineItem(FieldMapper):
    """Invoice line. The detail blocks vary by `detail_type` and stay raw."""

    id: StrictStr | None = Field(default=None, alias="Id")
    line_num: StrictInt | None = Field(default=None, alias="LineNum")
    description: StrictStr | None = Field(default=None, alias="Description")
    amount: StrictFloat | None = Field(default=None, alias="Amount")
    detail_type: StrictStr | None = Field(default=None, alias="DetailType")
    sales_item_line_detail: dict[str, Any] | None = Field(default=None, alias="SalesItemLineDetail")
    discount_line_detail: dict[str, Any] | None = Field(default=None, alias="DiscountLineDetail")


class Line(FieldMapper):
    """Payment line, linking the amount to the transactions it settles."""

    id: StrictStr | None = Field(default=None, alias="Id")
    line_num: StrictInt | None = Field(default=None, alias="LineNum")
    description: StrictStr | None = Field(default=None, alias="Description")
    amount: StrictFloat | None = Field(default=None, alias="Amount")
    linked_txn: list[LinkedTransaction] | None = Field(default=None, alias="LinkedTxn")


class TxnTaxDetail(FieldMapper):
    txn_tax_code_ref: BaseReference | None = Field(default=None, alias="TxnTaxCodeRef")
    total_tax: StrictFloat | None = Field(default=None, alias="TotalTax")
    tax_line: Any = Field(default=None, alias="TaxLine")


class CreditCardPayment(FieldMapper):
    credit_charge_info: dict[str, Any] | None = Field(default=None, alias="CreditChargeInfo")
    credit_charge_response: dict[str, Any] | None = Field(default=None, alias="CreditChargeResponse")
