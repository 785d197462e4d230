"""Library configuration.

Credentials and the sandbox switch are read from the environment (a `.env` file
is honoured) the first time they are needed. Connections take a `Configuration`
explicitly; when they don't, they share the process default returned by
`get_configuration()`, which `configure()` updates in place.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


@dataclass(slots=True)
class Configuration:
    client_id: str | None = None
    client_secret: str | None = None
    sandbox_mode: bool = False
    redirect_uri: str | None = None
    minor_version: str | None = None
    timeout_seconds: int = 30

    @classmethod
    def from_env(cls) -> "Configuration":
        load_dotenv(override=False)
        return cls(
            client_id=os.environ.get("QUICKBOOKS_CLIENT_ID") or None,
            client_secret=os.environ.get("QUICKBOOKS_CLIENT_SECRET") or None,
            sandbox_mode=_env_flag("QUICKBOOKS_SANDBOX_MODE"),
            redirect_uri=os.environ.get("QUICKBOOKS_REDIRECT_URI") or None,
            minor_version=os.environ.get("QUICKBOOKS_MINORVERSION") or None,
            timeout_seconds=int(os.environ.get("QUICKBOOKS_HTTP_TIMEOUT_SECONDS", "30")),
        )

    def update(self, **overrides) -> "Configuration":
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise TypeError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
        for key, value in overrides.items():
            setattr(self, key, value)
        return self

    @property
    def environment(self) -> str:
        """Intuit environment name used by the OAuth client."""
        return "sandbox" if self.sandbox_mode else "production"


_default: Configuration | None = None


def get_configuration() -> Configuration:
    global _default
    if _default is None:
        _default = Configuration.from_env()
    return _default


def configure(**overrides) -> Configuration:
    """Override settings on the shared default configuration.

    Example:
        configure(client_id="abc", client_secret="xyz", sandbox_mode=True)
    """

    return get_configuration().update(**overrides)


def reset_configuration() -> None:
    global _default
    _default = None
