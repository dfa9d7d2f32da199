"""Error types for details builders and swap/quote requests.

Errors are exception classes so that ``Err.unwrap()`` can raise them,
but the builders and client return them inside ``Err`` instead of raising.
"""

from typing import Optional


class OneInchError(Exception):
    """Base class for all errors of this package."""

    pass


# ======================
# Construction errors
# ======================


class DetailsBuilderError(OneInchError):
    """Raised when request details cannot be constructed."""

    pass


class MissingFieldError(DetailsBuilderError):
    """A required field is missing its value."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing {field}")

    def __eq__(self, other) -> bool:
        return isinstance(other, MissingFieldError) and other.field == self.field

    def __hash__(self) -> int:
        return hash((type(self), self.field))


class InvalidSlippageError(DetailsBuilderError):
    """The provided slippage is outside the allowable range."""

    def __init__(self, value: Optional[int] = None):
        self.value = value
        super().__init__("Invalid slippage value. It should be between 0 and 50.")


class InvalidFeeError(DetailsBuilderError):
    """The provided fee is outside the allowable range."""

    def __init__(self, value: Optional[int] = None):
        self.value = value
        super().__init__("Invalid fee value. It should be between 0 and 3.")


# ======================
# Request errors
# ======================


class SwapError(OneInchError):
    """Errors that can occur during swap, quote or spender requests."""

    pass


class NetworkError(SwapError):
    """Transport failure: DNS, refused connection, timeout, TLS."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Network error: {type(cause).__name__}: {cause}")


class JsonParseError(SwapError):
    """A success response body could not be decoded into the expected shape."""

    def __init__(self, cause: BaseException, body: Optional[str] = None):
        self.cause = cause
        self.body = body
        super().__init__(f"JSON parsing error: {cause}")


class SwapRequestError(SwapError):
    """Structured error returned by the API with status 400."""

    def __init__(
        self,
        description: str,
        error: str,
        status_code: int,
        request_id: str,
        meta: Optional[list] = None,
    ):
        self.description = description
        self.error = error
        self.status_code = status_code
        self.request_id = request_id
        self.meta = meta or []
        super().__init__(f"Swap request error: {description}")


class OtherError(SwapError):
    """Errors that do not fit the categories above."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Other error: {message}")


class ServerStatusError(OtherError):
    """The server responded with a client or server error other than 400."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Server responded with error: {status_code}")
