"""Test helpers."""
import httpx


def json_transport(payload, status_code=200):
    """MockTransport answering every request with a JSON body."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)
    return httpx.MockTransport(handler)
