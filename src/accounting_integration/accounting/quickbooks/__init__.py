from accounting_integration.accounting.quickbooks.components import (
    BaseReference,
    CreditCardPayment,
    CustomField,
    DeliveryInfo,
    EmailAddress,
    Line,
    LineItem,
    LinkedTransaction,
    MetaData,
    PhysicalAddress,
    TelephoneNumber,
    TxnTaxDetail,
    WebSiteAddress,
)
from accounting_integration.accounting.quickbooks.connection import QuickBooksConnection, TokenPair
from accounting_integration.accounting.quickbooks.customer import Customer
from accounting_integration.accounting.quickbooks.invoice import Invoice
from accounting_integration.accounting.quickbooks.payment import Payment
from accounting_integration.accounting.quickbooks.response import QueryResponse, Response

__all__ = [
    "BaseReference",
    "CreditCardPayment",
    "CustomField",
    "Customer",
    "DeliveryInfo",
    "EmailAddress",
    "Invoice",
    "Line",
    "LineItem",
    "LinkedTransaction",
    "MetaData",
    "Payment",
    "PhysicalAddress",
    "QueryResponse",
    "QuickBooksConnection",
    "Response",
    "TelephoneNumber",
    "TokenPair",
    "TxnTaxDetail",
    "WebSiteAddress",
]
