"""Response contracts for the 1inch swap API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Immutable API payload; accepts both wire names and field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class TokenInfo(ApiModel):
    """Token metadata returned when includeTokensInfo is set."""

    address: str = Field(..., description="Token contract address")
    symbol: str = Field(..., description="Token symbol")
    name: str = Field(..., description="Token name")
    decimals: int = Field(..., description="Token decimals")
    logo_uri: Optional[str] = Field(None, alias="logoURI", description="Token logo URL")
    tags: list[str] = Field(default_factory=list)


class SelectedProtocol(ApiModel):
    """One liquidity source and the fraction of a route part it handles."""

    name: str
    part: float
    from_token_address: str = Field(..., alias="fromTokenAddress")
    to_token_address: str = Field(..., alias="toTokenAddress")


# route parts -> candidate splits -> protocol entries
Protocols = list[list[list[SelectedProtocol]]]


class SwapTransactionData(ApiModel):
    """Transaction to sign and broadcast to perform the swap."""

    from_address: str = Field(..., alias="from")
    to: str
    data: str
    value: str
    gas_price: str = Field(..., alias="gasPrice")
    gas: int


class QuoteResponse(ApiModel):
    """Response of a legacy /quote request."""

    from_token: Optional[TokenInfo] = Field(None, alias="fromToken")
    to_token: Optional[TokenInfo] = Field(None, alias="toToken")
    to_amount: str = Field(..., alias="toAmount")
    protocols: Optional[Protocols] = None


class SwapResponse(ApiModel):
    """Response of a legacy (v5.2) /swap request."""

    from_token: Optional[TokenInfo] = Field(None, alias="fromToken")
    to_token: Optional[TokenInfo] = Field(None, alias="toToken")
    to_amount: str = Field(..., alias="toAmount")
    protocols: Optional[Protocols] = None
    transaction: SwapTransactionData = Field(..., alias="tx")


class SwapV6Response(ApiModel):
    """Response of a v6 /swap request."""

    from_token: Optional[TokenInfo] = Field(None, alias="fromToken")
    to_token: Optional[TokenInfo] = Field(None, alias="toToken")
    dst_amount: str = Field(..., alias="dstAmount")
    protocols: Optional[Protocols] = None
    transaction: SwapTransactionData = Field(..., alias="tx")


class HttpExceptionMeta(ApiModel):
    """Metadata entry of an API error (e.g. the offending parameter)."""

    type: str
    value: str


class SwapRequestErrorBody(ApiModel):
    """Error payload returned by the swap/quote API with status 400."""

    error: str
    description: str
    status_code: int = Field(..., alias="statusCode")
    request_id: str = Field(..., alias="requestId")
    meta: Optional[list[HttpExceptionMeta]] = None


class RouterAddress(ApiModel):
    """Router contract that must be approved to spend the user's tokens."""

    address: str
