"""Exception types raised by the library."""

from __future__ import annotations

from typing import Iterable


class AccountingIntegrationError(Exception):
    pass


class DecodingError(AccountingIntegrationError):
    """A payload field did not have the JSON shape its mapping declares."""

    def __init__(self, field: str, expected: str, detail: str | None = None) -> None:
        self.field = field
        self.expected = expected
        message = f"Cannot decode field {field!r}: expected {expected}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class AuthError(AccountingIntegrationError):
    pass


class TransportError(AccountingIntegrationError):
    pass


class ValidationError(AccountingIntegrationError):
    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Validation failed")


class UnsupportedIntegrationError(AccountingIntegrationError, ValueError):
    def __init__(self, integration: object) -> None:
        self.integration = integration
        shown = "" if integration is None else getattr(integration, "value", integration)
        super().__init__(f"Unsupported integration: {shown}")


class UnimplementedOperationError(AccountingIntegrationError, NotImplementedError):
    def __init__(self, method_name: str, owner: str | None = None) -> None:
        self.method_name = method_name
        owner = owner or type(self).__name__
        super().__init__(f"Method {method_name} is not implemented in {owner}")
