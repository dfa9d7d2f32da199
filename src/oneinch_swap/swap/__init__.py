"""Swap and quote request details, response contracts and classification."""

from oneinch_swap.swap.classifier import classify_response, decode_json_body, decode_v6_body
from oneinch_swap.swap.details import (
    QuoteDetails,
    QuoteDetailsBuilder,
    SwapDetails,
    SwapDetailsBuilder,
    SwapDetailsV6,
    SwapDetailsV6Builder,
)
from oneinch_swap.swap.params import assemble_params, insert_optional_param
from oneinch_swap.swap.responses import (
    HttpExceptionMeta,
    QuoteResponse,
    RouterAddress,
    SelectedProtocol,
    SwapRequestErrorBody,
    SwapResponse,
    SwapTransactionData,
    SwapV6Response,
    TokenInfo,
)

__all__ = [
    # Details
    "QuoteDetails",
    "QuoteDetailsBuilder",
    "SwapDetails",
    "SwapDetailsBuilder",
    "SwapDetailsV6",
    "SwapDetailsV6Builder",
    # Params
    "assemble_params",
    "insert_optional_param",
    # Responses
    "HttpExceptionMeta",
    "QuoteResponse",
    "RouterAddress",
    "SelectedProtocol",
    "SwapRequestErrorBody",
    "SwapResponse",
    "SwapTransactionData",
    "SwapV6Response",
    "TokenInfo",
    # Classification
    "classify_response",
    "decode_json_body",
    "decode_v6_body",
]
