"""Classification and decoding of swap API responses.

Status handling, evaluated in order:
1. 400: the body is the structured API error. Decoded into SwapRequestError,
   or OtherError (with the parse failure and raw body) when it is not.
2. Any other 4xx/5xx: ServerStatusError with the status code. Body ignored.
3. Anything else goes to the decoder of the requested API version.
"""

import json
import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from oneinch_swap.errors import JsonParseError, OtherError, ServerStatusError, SwapRequestError
from oneinch_swap.result import Err, Ok, Result
from oneinch_swap.swap.responses import SwapRequestErrorBody, SwapV6Response

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

STRUCTURED_ERROR_STATUS = 400


def parse_request_error(body: str) -> Result:
    """Decode a 400 body into SwapRequestError, or OtherError if malformed."""
    try:
        payload = SwapRequestErrorBody.model_validate_json(body)
    except ValidationError as e:
        return Err(OtherError(f"Error parsing error response: {e}; body: {body!r}"))

    return Err(
        SwapRequestError(
            description=payload.description,
            error=payload.error,
            status_code=payload.status_code,
            request_id=payload.request_id,
            meta=payload.meta,
        )
    )


def classify_response(response: httpx.Response) -> Result:
    """Route a raw response to an error or to decoding.

    Returns:
        Ok(response) when the body should be decoded, Err otherwise
    """
    status = response.status_code

    if status == STRUCTURED_ERROR_STATUS:
        logger.warning(f"1inch API rejected request ({status})")
        return parse_request_error(response.text)

    if response.is_client_error or response.is_server_error:
        logger.warning(f"1inch API error: {status}")
        return Err(ServerStatusError(status))

    return Ok(response)


def decode_json_body(response: httpx.Response, model: type[M]) -> Result:
    """Decode a success body straight from the response JSON (legacy API)."""
    try:
        return Ok(model.model_validate(response.json()))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.warning(f"Failed to decode {model.__name__}: {e}")
        return Err(JsonParseError(e, response.text))


def decode_v6_body(text: str) -> Result:
    """Decode an already read v6 swap body."""
    logger.debug(f"v6 swap response: {text}")
    try:
        return Ok(SwapV6Response.model_validate_json(text))
    except ValidationError as e:
        logger.warning(f"Failed to decode SwapV6Response: {e}")
        return Err(JsonParseError(e, text))
