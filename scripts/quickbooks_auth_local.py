"""Minimal local OAuth2 (3-legged) flow for QuickBooks Online.

What this does:
- Starts a tiny local HTTP server on your redirect URI
- Opens the Intuit consent page in your browser
- Hands the callback URL to `QuickBooksConnection.parse_callback_url`
- Saves the realm id and token pair to `.env_quickbooks_tokens.json`

Prereqs (env vars):
- QUICKBOOKS_CLIENT_ID
- QUICKBOOKS_CLIENT_SECRET
- QUICKBOOKS_REDIRECT_URI        (must exactly match what's configured in Intuit Developer)
- QUICKBOOKS_SANDBOX_MODE        (true | false)  [default: false]

Optional:
- QUICKBOOKS_LOCAL_REDIRECT_URI  Local listener URI for the callback server.
    Use this if QUICKBOOKS_REDIRECT_URI is a public HTTPS URL (e.g., via ngrok)
    but you still want this script to listen on localhost.

Run:
  python scripts/quickbooks_auth_local.py
"""

from __future__ import annotations

import json
import logging
import os
import threading
import time
import webbrowser
from http.server import BaseHTTPRequestHandler, HTTPServer
from urllib.parse import urlparse

from accounting_integration import AccountingIntegrationError, get_configuration
from accounting_integration.accounting import Provider, new_connection

logger = logging.getLogger("quickbooks_auth_local")

TOKENS_PATH = os.environ.get("QUICKBOOKS_TOKENS_PATH", os.path.abspath(".env_quickbooks_tokens.json"))


class _CallbackState:
    def __init__(self) -> None:
        self.path: str | None = None


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = get_configuration()
    if not config.client_id or not config.client_secret:
        raise SystemExit("Missing QUICKBOOKS_CLIENT_ID / QUICKBOOKS_CLIENT_SECRET. Put them in your .env.")
    if not config.redirect_uri:
        raise SystemExit("Missing QUICKBOOKS_REDIRECT_URI. Put it in your .env.")

    redirect_uri = config.redirect_uri
    local_redirect_uri = os.environ.get("QUICKBOOKS_LOCAL_REDIRECT_URI") or redirect_uri
    local_parsed = urlparse(local_redirect_uri)
    if local_parsed.scheme not in {"http", "https"}:
        raise SystemExit("Redirect URI must start with http:// or https://")
    if not local_parsed.hostname or not local_parsed.port:
        raise SystemExit("Local redirect URI must include hostname and port, e.g. http://localhost:8040/callback")

    state = _CallbackState()

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self):  # noqa: N802
            if urlparse(self.path).path != local_parsed.path:
                self.send_response(404)
                self.end_headers()
                self.wfile.write(b"Not found")
                return

            state.path = self.path
            self.send_response(200)
            self.send_header("Content-Type", "text/html")
            self.end_headers()
            self.wfile.write(
                b"<html><body><h3>QuickBooks connected.</h3><p>You can close this tab and return to the terminal.</p></body></html>"
            )

        def log_message(self, *_args, **_kwargs):
            return

    server = HTTPServer((local_parsed.hostname, local_parsed.port), Handler)
    thread = threading.Thread(target=lambda: server.serve_forever(poll_interval=0.1), daemon=True)
    thread.start()

    connection = new_connection(Provider.QUICKBOOKS, redirect_uri, config=config)
    auth_url = connection.build_authorization_url()

    print("\n1) Opening Intuit consent page in your browser...")
    print("   If it doesn't open, copy/paste this URL:")
    print(auth_url)
    webbrowser.open(auth_url)

    print("\n2) Waiting for the callback on:")
    print(f"   {local_redirect_uri}")

    timeout_s = int(os.environ.get("QUICKBOOKS_AUTH_TIMEOUT_SECONDS", "180"))
    start = time.time()
    while state.path is None and time.time() - start < timeout_s:
        time.sleep(0.1)
    server.shutdown()

    if state.path is None:
        raise SystemExit("Timed out waiting for OAuth callback. Check the Redirect URI in the Intuit Developer Portal.")

    print("\n3) Exchanging auth code for tokens...")
    try:
        tokens = connection.parse_callback_url(state.path)
    except AccountingIntegrationError as exc:
        raise SystemExit(f"OAuth failed: {exc}") from exc

    payload = {"realm_id": connection.realm_id, "environment": config.environment, **tokens.to_dict()}
    with open(TOKENS_PATH, "w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)

    print("\nSuccess. Tokens saved to:")
    print(f"   {TOKENS_PATH}")
    print("\nNext: run the smoke test:")
    print("  python scripts/quickbooks_smoke_test.py")


if __name__ == "__main__":
    main()
