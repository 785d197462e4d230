"""Sync application records with QuickBooks Online.

Keep the pieces small and testable:
- `accounting` holds connections and the remote entity models
- `mountable` links host records to remote entities
- `config` / `errors` are shared by both
"""

from accounting_integration.config import Configuration, configure, get_configuration
from accounting_integration.errors import (
    AccountingIntegrationError,
    AuthError,
    DecodingError,
    TransportError,
    UnimplementedOperationError,
    UnsupportedIntegrationError,
    ValidationError,
)
from accounting_integration.mountable import Mountable, MountedAccountingModel

__version__ = "0.3.0"

__all__ = [
    "AccountingIntegrationError",
    "AuthError",
    "Configuration",
    "DecodingError",
    "Mountable",
    "MountedAccountingModel",
    "TransportError",
    "UnimplementedOperationError",
    "UnsupportedIntegrationError",
    "ValidationError",
    "configure",
    "get_configuration",
]
