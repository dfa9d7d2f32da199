"""Async client for the 1inch swap API.

API docs: https://portal.1inch.dev/documentation/apis/swap/introduction

Every request method returns a Result: ``Ok`` with the decoded response,
or ``Err`` with a SwapError subclass. Nothing is retried.
"""

import logging
from typing import Optional, Union

import httpx

from oneinch_swap.chains import (
    BASIC_URL,
    SWAP_API_VERSION,
    SWAP_V6_API_VERSION,
    Network,
    get_network,
    swap_endpoint,
)
from oneinch_swap.config import Settings, get_settings
from oneinch_swap.errors import NetworkError, OtherError, ServerStatusError
from oneinch_swap.result import Err, Ok, Result
from oneinch_swap.swap.classifier import classify_response, decode_json_body, decode_v6_body
from oneinch_swap.swap.details import QuoteDetails, SwapDetails, SwapDetailsV6
from oneinch_swap.swap.params import Params
from oneinch_swap.swap.responses import QuoteResponse, RouterAddress, SwapResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class OneInchClient:
    """Client bound to one API token and one network.

    The token, network and base URL are read-only; calls share no other
    state and can run concurrently.
    """

    def __init__(
        self,
        token: str,
        network_id: Union[Network, int, str],
        base_url: str = BASIC_URL,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """Initialize client.

        Args:
            token: API token, sent verbatim in the Authorization header
            network_id: Network (or its name / chain ID) for swap and quote calls
            base_url: API base URL
            http_client: Shared httpx client; one is created per call if omitted
            timeout: Timeout for per-call clients, in seconds
        """
        self._token = token
        self.network_id = get_network(network_id)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client

    def __repr__(self) -> str:
        return f"OneInchClient(network={self.network_id.name}, base_url={self.base_url!r})"

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "OneInchClient":
        """Create a client from application settings."""
        settings = settings or get_settings()
        if not settings.has_token:
            logger.warning("ONEINCH_API_TOKEN not set - requests will be rejected")

        return cls(
            token=settings.oneinch_api_token,
            network_id=settings.network,
            base_url=settings.oneinch_base_url,
            http_client=http_client,
            timeout=settings.http_timeout,
        )

    # ======================
    # Transport
    # ======================

    def _headers(self) -> dict:
        return {"Authorization": self._token}

    async def _get(self, endpoint: str, params: Optional[Params] = None) -> Result:
        """Send a GET request.

        Returns:
            Ok(httpx.Response) for any received response, Err(NetworkError)
            if none was received, Err(OtherError) if the token
            cannot be sent as a header value
        """
        url = httpx.URL(endpoint, params=params or [])
        logger.debug(f"GET {endpoint} params={[name for name, _ in params or []]}")

        try:
            if self._http_client is not None:
                response = await self._http_client.get(url, headers=self._headers())
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url, headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning(f"1inch request to {endpoint} failed: {type(e).__name__}: {e}")
            return Err(NetworkError(e))
        except UnicodeEncodeError:
            logger.warning(f"1inch request to {endpoint} not sent: Authorization token is not ASCII")
            return Err(OtherError("Authorization token contains non-ASCII characters"))

        logger.debug(f"GET {endpoint} -> {response.status_code}")
        return Ok(response)

    def _endpoint(self, version: str, method: str, chain: Optional[int] = None) -> str:
        return swap_endpoint(self.base_url, version, chain or self.network_id, method)

    # ======================
    # Swap API
    # ======================

    async def swap(self, details: SwapDetails) -> Result:
        """Perform a legacy swap request.

        Returns:
            Ok(SwapResponse) or Err(SwapError)
        """
        logger.info(
            f"1inch swap: {details.amount} {details.src} -> {details.dst} "
            f"(slippage: {details.slippage}%)"
        )
        sent = await self._get(self._endpoint(SWAP_API_VERSION, "swap/"), details.to_params())
        if sent.is_err():
            return sent

        classified = classify_response(sent.value)
        if classified.is_err():
            return classified

        return decode_json_body(classified.value, SwapResponse)

    async def swap_v6(self, details: SwapDetailsV6) -> Result:
        """Perform a v6 swap request.

        The body is read as text before decoding.

        Returns:
            Ok(SwapV6Response) or Err(SwapError)
        """
        logger.info(
            f"1inch swap v6: {details.amount} {details.src} -> {details.dst} "
            f"(slippage: {details.slippage}%, origin: {details.origin})"
        )
        sent = await self._get(self._endpoint(SWAP_V6_API_VERSION, "swap/"), details.to_params())
        if sent.is_err():
            return sent

        classified = classify_response(sent.value)
        if classified.is_err():
            return classified

        return decode_v6_body(classified.value.text)

    async def quote(self, details: QuoteDetails) -> Result:
        """Get a quote without building a transaction.

        Returns:
            Ok(QuoteResponse) or Err(SwapError)
        """
        logger.info(f"1inch quote: {details.amount} {details.src} -> {details.dst}")
        sent = await self._get(self._endpoint(SWAP_API_VERSION, "quote/"), details.to_params())
        if sent.is_err():
            return sent

        classified = classify_response(sent.value)
        if classified.is_err():
            return classified

        return decode_json_body(classified.value, QuoteResponse)

    # ======================
    # Approve API
    # ======================

    async def get_router_address(self, chain: Optional[Union[Network, int, str]] = None) -> Result:
        """Get the router contract address for a network.

        Args:
            chain: Network to query; defaults to the client's network

        Returns:
            Ok(RouterAddress) or Err(SwapError)
        """
        network = get_network(chain) if chain is not None else self.network_id
        sent = await self._get(self._endpoint(SWAP_API_VERSION, "approve/spender", network))
        if sent.is_err():
            return sent

        response = sent.value
        if not response.is_success:
            logger.warning(f"1inch spender lookup failed: {response.status_code}")
            return Err(ServerStatusError(response.status_code))

        return decode_json_body(response, RouterAddress)


def new_with_default_http(
    token: str,
    network: Union[Network, int, str],
    timeout: float = DEFAULT_TIMEOUT,
) -> OneInchClient:
    """Create a client that opens a default httpx client per call."""
    return OneInchClient(token=token, network_id=network, timeout=timeout)
