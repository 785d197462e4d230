from __future__ import annotations

import datetime
from typing import Any, ClassVar

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr

from accounting_integration.accounting.quickbooks.components import (
    BaseReference,
    EmailAddress,
    PhysicalAddress,
    TelephoneNumber,
    WebSiteAddress,
)
from accounting_integration.accounting.quickbooks.model import QuickBooksModel


class Customer(QuickBooksModel):
    resource_name: ClassVar[str] = "Customer"

    display_name: StrictStr | None = Field(default=None, alias="DisplayName")
    title: StrictStr | None = Field(default=None, alias="Title")
    given_name: StrictStr | None = Field(default=None, alias="GivenName")
    middle_name: StrictStr | None = Field(default=None, alias="MiddleName")
    family_name: StrictStr | None = Field(default=None, alias="FamilyName")
    suffix: StrictStr | None = Field(default=None, alias="Suffix")
    fully_qualified_name: StrictStr | None = Field(default=None, alias="FullyQualifiedName")
    company_name: StrictStr | None = Field(default=None, alias="CompanyName")
    print_on_check_name: StrictStr | None = Field(default=None, alias="PrintOnCheckName")
    active: StrictBool | None = Field(default=None, alias="Active")
    primary_email_address: EmailAddress | None = Field(default=None, alias="PrimaryEmailAddr")
    primary_phone: TelephoneNumber | None = Field(default=None, alias="PrimaryPhone")
    mobile: TelephoneNumber | None = Field(default=None, alias="Mobile")
    fax: TelephoneNumber | None = Field(default=None, alias="Fax")
    alternate_phone: TelephoneNumber | None = Field(default=None, alias="AlternatePhone")
    web_address: WebSiteAddress | None = Field(default=None, alias="WebAddr")
    billing_address: PhysicalAddress | None = Field(default=None, alias="BillAddr")
    shipping_address: PhysicalAddress | None = Field(default=None, alias="ShipAddr")
    notes: StrictStr | None = Field(default=None, alias="Notes")
    job: StrictBool | None = Field(default=None, alias="Job")
    bill_with_parent: StrictBool | None = Field(default=None, alias="BillWithParent")
    parent_ref: BaseReference | None = Field(default=None, alias="ParentRef")
    level: StrictInt | None = Field(default=None, alias="Level")
    taxable: StrictBool | None = Field(default=None, alias="Taxable")
    balance: StrictFloat | None = Field(default=None, alias="Balance")
    balance_with_jobs: StrictFloat | None = Field(default=None, alias="BalanceWithJobs")
    open_balance_date: datetime.date | None = Field(default=None, alias="OpenBalanceDate")
    currency_ref: BaseReference | None = Field(default=None, alias="CurrencyRef")
    preferred_delivery_method: StrictStr | None = Field(default=None, alias="PreferredDeliveryMethod")
    resale_num: StrictStr | None = Field(default=None, alias="ResaleNum")
    sales_term_ref: BaseReference | None = Field(default=None, alias="SalesTermRef")
    payment_method_ref: BaseReference | None = Field(default=None, alias="PaymentMethodRef")
    customer_type_ref: BaseReference | None = Field(default=None, alias="CustomerTypeRef")
    domain: StrictStr | None = Field(default=None, alias="domain")

    def validation_errors(self) -> list[str]:
        errors = super().validation_errors()
        names = (
            self.display_name,
            self.given_name,
            self.family_name,
            self.company_name,
        )
        if not any(n and n.strip() for n in names):
            errors.append("display_name or a name part is required")
        return errors

    def contact_summary(self) -> dict[str, Any]:
        def _address(address: PhysicalAddress | None) -> str | None:
            return address.formatted() or None if address else None

        return {
            "id": self.id,
            "name": self.display_name,
            "email": self.primary_email_address.address if self.primary_email_address else None,
            "phone": self.primary_phone.free_form_number if self.primary_phone else None,
            "address": _address(self.billing_address),
            "billing_address": _address(self.billing_address),
            "shipping_address": _address(self.shipping_address),
        }
