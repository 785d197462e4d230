from __future__ import annotations

import datetime
from typing import ClassVar

from pydantic import Field, StrictBool, StrictFloat, StrictStr

from accounting_integration.accounting.quickbooks.components import (
    BaseReference,
    CreditCardPayment,
    Line,
)
from accounting_integration.accounting.quickbooks.model import QuickBooksModel


class Payment(QuickBooksModel):
    resource_name: ClassVar[str] = "Payment"

    ar_account_ref: BaseReference | None = Field(default=None, alias="ARAccountRef")
    credit_card_payment: CreditCardPayment | None = Field(default=None, alias="CreditCardPayment")
    currency_ref: BaseReference | None = Field(default=None, alias="CurrencyRef")
    customer_ref: BaseReference | None = Field(default=None, alias="CustomerRef")
    deposit_to_account_ref: BaseReference | None = Field(default=None, alias="DepositToAccountRef")
    exchange_rate: StrictFloat | None = Field(default=None, alias="ExchangeRate")
    line_items: list[Line] | None = Field(default=None, alias="Line")
    payment_method_ref: BaseReference | None = Field(default=None, alias="PaymentMethodRef")
    payment_ref_number: StrictStr | None = Field(default=None, alias="PaymentRefNum")
    private_note: StrictStr | None = Field(default=None, alias="PrivateNote")
    process_payment: StrictBool | None = Field(default=None, alias="ProcessPayment")
    total: StrictFloat | None = Field(default=None, alias="TotalAmt")
    txn_date: datetime.date | None = Field(default=None, alias="TxnDate")
    txn_status: StrictStr | None = Field(default=None, alias="TxnStatus")
    unapplied_amount: StrictFloat | None = Field(default=None, alias="UnappliedAmt")

    def validation_errors(self) -> list[str]:
        errors = super().validation_errors()
        if self.customer_ref is None or not self.customer_ref.value:
            errors.append("customer_ref is required")
        if self.total is None:
            errors.append("total is required")
        return errors
