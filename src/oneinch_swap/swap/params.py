"""Query parameter assembly for swap and quote requests."""

from typing import Any, Optional

Params = list[tuple[str, str]]


def param_value(value: Any) -> str:
    """Convert a parameter value to its query string form.

    Booleans become ``true``/``false``, integers are rendered in base 10.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def insert_optional_param(params: Params, name: str, value: Optional[Any]) -> None:
    """Append ``name=value`` only if value is set."""
    if value is None:
        return
    params.append((name, param_value(value)))


# Optional parameters shared by every swap/quote request, in URL order.
# Each entry maps the query name to the details attribute.
OPTIONAL_FLAG_PARAMS = (
    ("disableEstimate", "disable_estimate"),
    ("allowPartialFill", "allow_partial_fill"),
    ("includeGas", "include_gas"),
    ("includeProtocols", "include_protocols"),
    ("includeTokensInfo", "include_tokens_info"),
)

OPTIONAL_NUMERIC_PARAMS = (
    ("fee", "fee"),
    ("complexityLevel", "complexity_level"),
    ("parts", "parts"),
    ("mainRouteParts", "main_route_parts"),
    ("gasLimit", "gas_limit"),
)

OPTIONAL_STRING_PARAMS = (
    ("protocols", "protocols"),
    ("gasPrice", "gas_price"),
    ("connectorTokens", "connector_tokens"),
    ("permit", "permit"),
    ("receiver", "receiver"),
    ("referrer", "referrer"),
)


def assemble_params(details: Any, required: Params, extra: tuple = ()) -> Params:
    """Linearize request details into ordered query pairs.

    Args:
        details: Built request details (SwapDetails, SwapDetailsV6, QuoteDetails)
        required: Required pairs, inserted first and unconditionally
        extra: Version specific optional (query name, attribute) pairs appended last

    Returns:
        Ordered (name, value) pairs; attributes the details type does not
        have or that are unset produce no pair.
    """
    params: Params = [(name, param_value(value)) for name, value in required]

    for group in (OPTIONAL_FLAG_PARAMS, OPTIONAL_NUMERIC_PARAMS, OPTIONAL_STRING_PARAMS, extra):
        for name, attr in group:
            insert_optional_param(params, name, getattr(details, attr, None))

    return params
