"""
Helpers shared by the test modules.
"""

import json

import httpx

TEST_URL = "https://relays.test/app/v1/relays"


def json_transport(payload, status_code: int = 200) -> httpx.MockTransport:
    """Transport answering every request with ``payload``."""
    def handler(request: httpx.Request) -> httpx.Response:
        if isinstance(payload, (bytes, str)):
            return httpx.Response(status_code, content=payload)
        return httpx.Response(status_code, content=json.dumps(payload).encode())
    return httpx.MockTransport(handler)


def refusing_transport() -> httpx.MockTransport:
    """Transport that fails every request like a closed port."""
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("[Errno 111] Connection refused", request=request)
    return httpx.MockTransport(handler)
