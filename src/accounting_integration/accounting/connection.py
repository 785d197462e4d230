"""Provider registry: build the connection class for an accounting provider."""

from __future__ import annotations

from enum import Enum
from typing import Any

from accounting_integration.accounting.quickbooks.connection import QuickBooksConnection
from accounting_integration.config import Configuration, get_configuration
from accounting_integration.errors import UnsupportedIntegrationError

TEST_REDIRECT_URI = "http://localhost:3000"


class Provider(str, Enum):
    QUICKBOOKS = "quickbooks"
    # Extend as needed


_CONNECTION_CLASSES = {
    Provider.QUICKBOOKS: QuickBooksConnection,
}


def _resolve_provider(provider: Provider | str | None) -> Provider:
    if isinstance(provider, Provider):
        return provider
    try:
        return Provider(provider)
    except ValueError:
        raise UnsupportedIntegrationError(provider) from None


def new_connection(provider: Provider | str | None, *args: Any, **kwargs: Any):
    """Instantiate the connection for `provider`, passing arguments through."""

    return _CONNECTION_CLASSES[_resolve_provider(provider)](*args, **kwargs)


def new_test_connection(
    provider: Provider | str = Provider.QUICKBOOKS,
    config: Configuration | None = None,
):
    """A localhost-redirect connection, available only in sandbox mode."""

    config = config or get_configuration()
    if not config.sandbox_mode:
        return None
    return new_connection(provider, TEST_REDIRECT_URI, config=config)
