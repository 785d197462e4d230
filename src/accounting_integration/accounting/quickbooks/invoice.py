from __future__ import annotations

import datetime
from typing import ClassVar

from pydantic import Field, StrictBool, StrictFloat, StrictStr

from accounting_integration.accounting.quickbooks.components import (
    BaseReference,
    CustomField,
    DeliveryInfo,
    EmailAddress,
    LineItem,
    LinkedTransaction,
    PhysicalAddress,
    TxnTaxDetail,
)
from accounting_integration.accounting.quickbooks.model import QuickBooksModel


class Invoice(QuickBooksModel):
    resource_name: ClassVar[str] = "Invoice"

    allow_ipn_payment: StrictBool | None = Field(default=None, alias="AllowIPNPayment")
    allow_online_ach_payment: StrictBool | None = Field(default=None, alias="AllowOnlineACHPayment")
    allow_online_credit_card_payment: StrictBool | None = Field(default=None, alias="AllowOnlineCreditCardPayment")
    allow_online_payment: StrictBool | None = Field(default=None, alias="AllowOnlinePayment")
    ar_account_ref: BaseReference | None = Field(default=None, alias="ARAccountRef")
    apply_tax_after_discount: StrictBool | None = Field(default=None, alias="ApplyTaxAfterDiscount")
    auto_doc_number: StrictBool | None = Field(default=None, alias="AutoDocNumber")
    balance: StrictFloat | None = Field(default=None, alias="Balance")
    bill_email: EmailAddress | None = Field(default=None, alias="BillEmail")
    bill_email_cc: EmailAddress | None = Field(default=None, alias="BillEmailCc")
    billing_address: PhysicalAddress | None = Field(default=None, alias="BillAddr")
    class_ref: BaseReference | None = Field(default=None, alias="ClassRef")
    custom_fields: list[CustomField] | None = Field(default=None, alias="CustomField")
    currency_ref: BaseReference | None = Field(default=None, alias="CurrencyRef")
    customer_memo: StrictStr | None = Field(default=None, alias="CustomerMemo")
    customer_ref: BaseReference | None = Field(default=None, alias="CustomerRef")
    department_ref: BaseReference | None = Field(default=None, alias="DepartmentRef")
    deposit: StrictFloat | None = Field(default=None, alias="Deposit")
    deposit_to_account_ref: BaseReference | None = Field(default=None, alias="DepositToAccountRef")
    delivery_info: DeliveryInfo | None = Field(default=None, alias="DeliveryInfo")
    doc_number: StrictStr | None = Field(default=None, alias="DocNumber")
    due_date: datetime.date | None = Field(default=None, alias="DueDate")
    domain: StrictStr | None = Field(default=None, alias="domain")
    email_status: StrictStr | None = Field(default=None, alias="EmailStatus")
    exchange_rate: StrictFloat | None = Field(default=None, alias="ExchangeRate")
    home_balance: StrictFloat | None = Field(default=None, alias="HomeBalance")
    home_total: StrictFloat | None = Field(default=None, alias="HomeTotalAmt")
    invoice_link: StrictStr | None = Field(default=None, alias="InvoiceLink")
    line_items: list[LineItem] | None = Field(default=None, alias="Line")
    linked_transactions: list[LinkedTransaction] | None = Field(default=None, alias="LinkedTxn")
    private_note: StrictStr | None = Field(default=None, alias="PrivateNote")
    print_status: StrictStr | None = Field(default=None, alias="PrintStatus")
    sales_term_ref: BaseReference | None = Field(default=None, alias="SalesTermRef")
    ship_date: datetime.date | None = Field(default=None, alias="ShipDate")
    ship_from_address: PhysicalAddress | None = Field(default=None, alias="ShipFromAddr")
    ship_method_ref: BaseReference | None = Field(default=None, alias="ShipMethodRef")
    shipping_address: PhysicalAddress | None = Field(default=None, alias="ShipAddr")
    total: StrictFloat | None = Field(default=None, alias="TotalAmt")
    tracking_num: StrictStr | None = Field(default=None, alias="TrackingNum")
    txn_date: datetime.date | None = Field(default=None, alias="TxnDate")
    txn_tax_detail: TxnTaxDetail | None = Field(default=None, alias="TxnTaxDetail")

    def validation_errors(self) -> list[str]:
        errors = super().validation_errors()
        if self.customer_ref is None or not self.customer_ref.value:
            errors.append("customer_ref is required")
        if not self.line_items:
            errors.append("at least one line item is required")
        return errors
