"""Request details for quote and swap calls, and their builders.

Builders accumulate fields one setter at a time. Range-checked setters
(``fee``, ``slippage``) return a Result and leave the builder untouched on
failure; ``build()`` checks required fields in a fixed order and reports
the first one that is missing.

Example:
    details = (
        SwapDetailsBuilder()
        .src(WETH)
        .dst(USDC)
        .amount("1000000000000000000")
        .from_addr(wallet)
        .slippage(1).unwrap()
        .build()
        .unwrap()
    )
"""

from dataclasses import dataclass, fields
from typing import Optional, Union

from oneinch_swap.errors import InvalidFeeError, InvalidSlippageError, MissingFieldError
from oneinch_swap.result import Err, Ok, Result
from oneinch_swap.swap.params import Params, assemble_params

MAX_SLIPPAGE = 50
MAX_FEE = 3


@dataclass(frozen=True, kw_only=True)
class QuoteDetails:
    """Details needed to perform a /quote request."""

    src: str  # Source token address
    dst: str  # Destination token address
    amount: str  # Amount in minimal units, decimal string

    # Optional fields
    fee: Optional[int] = None
    protocols: Optional[str] = None
    gas_price: Optional[str] = None
    complexity_level: Optional[int] = None
    parts: Optional[int] = None
    main_route_parts: Optional[int] = None
    gas_limit: Optional[int] = None
    include_tokens_info: Optional[bool] = None
    include_protocols: Optional[bool] = None
    include_gas: Optional[bool] = None
    connector_tokens: Optional[str] = None

    def to_params(self) -> Params:
        return assemble_params(
            self,
            [("src", self.src), ("dst", self.dst), ("amount", self.amount)],
        )


@dataclass(frozen=True, kw_only=True)
class SwapDetails(QuoteDetails):
    """Details needed to perform a legacy (v5.2) /swap request."""

    from_addr: str  # Address of the user initiating the swap
    slippage: int  # Permitted slippage percentage

    permit: Optional[str] = None
    receiver: Optional[str] = None
    referrer: Optional[str] = None
    disable_estimate: Optional[bool] = None
    allow_partial_fill: Optional[bool] = None

    def _required_params(self) -> Params:
        return [
            ("from", self.from_addr),
            ("slippage", self.slippage),
            ("src", self.src),
            ("dst", self.dst),
            ("amount", self.amount),
        ]

    def to_params(self) -> Params:
        return assemble_params(self, self._required_params())


@dataclass(frozen=True, kw_only=True)
class SwapDetailsV6(SwapDetails):
    """Details needed to perform a v6 /swap request."""

    origin: str  # EOA address that initiates the transaction

    use_permit2: Optional[bool] = None

    def to_params(self) -> Params:
        return assemble_params(
            self,
            self._required_params() + [("origin", self.origin)],
            extra=(("usePermit2", "use_permit2"),),
        )


class QuoteDetailsBuilder:
    """Builder for QuoteDetails."""

    details_class = QuoteDetails
    required_fields: tuple[str, ...] = ("src", "dst", "amount")

    def __init__(self):
        self._values: dict = {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values!r})"

    def _set(self, name: str, value):
        self._values[name] = value
        return self

    def get(self, name: str):
        """Current value of a field (None if unset)."""
        return self._values.get(name)

    def src(self, src: str):
        return self._set("src", src)

    def dst(self, dst: str):
        return self._set("dst", dst)

    def amount(self, amount: Union[str, int]):
        # Kept as a decimal string, amounts routinely exceed 64 bits
        return self._set("amount", None if amount is None else str(amount))

    def protocols(self, protocols: str):
        return self._set("protocols", protocols)

    def gas_price(self, gas_price: Union[str, int]):
        return self._set("gas_price", None if gas_price is None else str(gas_price))

    def complexity_level(self, complexity_level: int):
        return self._set("complexity_level", complexity_level)

    def parts(self, parts: int):
        return self._set("parts", parts)

    def main_route_parts(self, main_route_parts: int):
        return self._set("main_route_parts", main_route_parts)

    def gas_limit(self, gas_limit: int):
        return self._set("gas_limit", gas_limit)

    def include_tokens_info(self, include_tokens_info: bool):
        return self._set("include_tokens_info", include_tokens_info)

    def include_protocols(self, include_protocols: bool):
        return self._set("include_protocols", include_protocols)

    def include_gas(self, include_gas: bool):
        return self._set("include_gas", include_gas)

    def connector_tokens(self, connector_tokens: str):
        return self._set("connector_tokens", connector_tokens)

    def fee(self, fee: int) -> Result:
        """Set the fee, ensuring it lies within 0..3."""
        if fee < 0 or fee > MAX_FEE:
            return Err(InvalidFeeError(fee))
        return Ok(self._set("fee", fee))

    def build(self) -> Result:
        """Construct the details, or fail on the first missing required field."""
        for name in self.required_fields:
            if self._values.get(name) is None:
                return Err(MissingFieldError(name))

        known = {f.name for f in fields(self.details_class)}
        values = {k: v for k, v in self._values.items() if k in known}
        return Ok(self.details_class(**values))


class SwapDetailsBuilder(QuoteDetailsBuilder):
    """Builder for legacy SwapDetails."""

    details_class = SwapDetails
    required_fields = ("src", "dst", "amount", "from_addr", "slippage")

    def from_addr(self, from_addr: str):
        return self._set("from_addr", from_addr)

    def permit(self, permit: str):
        return self._set("permit", permit)

    def receiver(self, receiver: str):
        return self._set("receiver", receiver)

    def referrer(self, referrer: str):
        return self._set("referrer", referrer)

    def disable_estimate(self, disable_estimate: bool):
        return self._set("disable_estimate", disable_estimate)

    def allow_partial_fill(self, allow_partial_fill: bool):
        return self._set("allow_partial_fill", allow_partial_fill)

    def slippage(self, slippage: int) -> Result:
        """Set slippage percentage, ensuring it lies within 0..50."""
        if slippage < 0 or slippage > MAX_SLIPPAGE:
            return Err(InvalidSlippageError(slippage))
        return Ok(self._set("slippage", slippage))


class SwapDetailsV6Builder(SwapDetailsBuilder):
    """Builder for SwapDetailsV6. Same as the legacy builder plus origin."""

    details_class = SwapDetailsV6
    # Sender is reported as "from_addr" here too, matching the setter name
    required_fields = ("src", "dst", "amount", "from_addr", "origin", "slippage")

    def origin(self, origin: str):
        return self._set("origin", origin)

    def use_permit2(self, use_permit2: bool):
        return self._set("use_permit2", use_permit2)
