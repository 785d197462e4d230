from accounting_integration.accounting.base_model import BaseAccountingModel
from accounting_integration.accounting.connection import Provider, new_connection, new_test_connection
from accounting_integration.accounting.mapper import FieldMapper

__all__ = [
    "BaseAccountingModel",
    "FieldMapper",
    "Provider",
    "new_connection",
    "new_test_connection",
]
