"""Pytest configuration and fixtures."""

import json
import os
from typing import Callable

import httpx
import pytest

# Set test environment
os.environ["ONEINCH_API_TOKEN"] = "test-token"
os.environ["ONEINCH_NETWORK"] = "ethereum"

from oneinch_swap.client import OneInchClient

SRC_TOKEN = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"  # WETH
DST_TOKEN = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"  # USDC
WALLET = "0xDCc3100ba3768D277cABffe2f117887A661ee5A4"

TX_PAYLOAD = {
    "from": "0xabc",
    "to": "0xdef",
    "data": "0x",
    "value": "0",
    "gasPrice": "1",
    "gas": 21000,
}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


def json_response(status_code: int, payload) -> Callable[[httpx.Request], httpx.Response]:
    """Handler returning a fixed JSON payload."""
    body = json.dumps(payload)

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body, headers={"Content-Type": "application/json"})

    return handler


def text_response(status_code: int, body: str) -> Callable[[httpx.Request], httpx.Response]:
    """Handler returning a fixed raw body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=body)

    return handler


@pytest.fixture
def make_client():
    """Build a client whose HTTP traffic goes to a handler.

    Returns (client, transport); transport.requests holds the sent requests.
    """

    def factory(handler):
        transport = RecordingTransport(handler)
        http_client = httpx.AsyncClient(transport=transport)
        client = OneInchClient(token="test-token", network_id=1, http_client=http_client)
        return client, transport

    return factory
