"""Async client for the 1inch DEX aggregator swap API.

Provides:
- Builders for legacy (v5.2) and v6 swap details, and quote details
- OneInchClient: request sending, response classification and decoding
- Typed errors returned inside Ok/Err results
"""

from oneinch_swap.chains import BASIC_URL, SWAP_API_VERSION, SWAP_V6_API_VERSION, Network, get_network
from oneinch_swap.client import OneInchClient, new_with_default_http
from oneinch_swap.errors import (
    DetailsBuilderError,
    InvalidFeeError,
    InvalidSlippageError,
    JsonParseError,
    MissingFieldError,
    NetworkError,
    OneInchError,
    OtherError,
    ServerStatusError,
    SwapError,
    SwapRequestError,
)
from oneinch_swap.result import Err, Ok, Result
from oneinch_swap.swap import (
    QuoteDetails,
    QuoteDetailsBuilder,
    QuoteResponse,
    RouterAddress,
    SwapDetails,
    SwapDetailsBuilder,
    SwapDetailsV6,
    SwapDetailsV6Builder,
    SwapResponse,
    SwapV6Response,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "OneInchClient",
    "new_with_default_http",
    # Networks
    "BASIC_URL",
    "SWAP_API_VERSION",
    "SWAP_V6_API_VERSION",
    "Network",
    "get_network",
    # Results
    "Ok",
    "Err",
    "Result",
    # Details
    "QuoteDetails",
    "QuoteDetailsBuilder",
    "SwapDetails",
    "SwapDetailsBuilder",
    "SwapDetailsV6",
    "SwapDetailsV6Builder",
    # Responses
    "QuoteResponse",
    "RouterAddress",
    "SwapResponse",
    "SwapV6Response",
    # Errors
    "OneInchError",
    "DetailsBuilderError",
    "MissingFieldError",
    "InvalidSlippageError",
    "InvalidFeeError",
    "SwapError",
    "NetworkError",
    "JsonParseError",
    "SwapRequestError",
    "OtherError",
    "ServerStatusError",
]
