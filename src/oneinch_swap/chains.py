"""1inch API endpoints and supported networks.

The swap API is versioned per path segment:
- v5.2: legacy swap/quote (``toAmount`` responses)
- v6.0: swap with mandatory ``origin`` (``dstAmount`` responses)
"""

from enum import IntEnum
from typing import Union

# 1inch API endpoints
BASIC_URL = "https://api.1inch.dev"
SWAP_API_VERSION = "v5.2"
SWAP_V6_API_VERSION = "v6.0"


class Network(IntEnum):
    """EVM networks served by the 1inch swap API (value = chain ID)."""

    ETHEREUM = 1
    OPTIMISM = 10
    BSC = 56
    GNOSIS = 100
    POLYGON = 137
    FANTOM = 250
    ZKSYNC = 324
    KLAYTN = 8217
    BASE = 8453
    ARBITRUM = 42161
    AVALANCHE = 43114
    AURORA = 1313161554


# Common aliases
NETWORK_ALIASES = {
    "eth": Network.ETHEREUM,
    "mainnet": Network.ETHEREUM,
    "bnb": Network.BSC,
    "matic": Network.POLYGON,
    "avax": Network.AVALANCHE,
    "arb": Network.ARBITRUM,
    "op": Network.OPTIMISM,
    "xdai": Network.GNOSIS,
    "zksync_era": Network.ZKSYNC,
}


def get_network(value: Union[str, int, Network]) -> Network:
    """Resolve a network from its name, alias or chain ID.

    Raises:
        ValueError: if the value does not match a supported network
    """
    if isinstance(value, Network):
        return value

    if isinstance(value, int):
        return Network(value)

    key = value.strip().lower()
    if key.isdigit():
        return Network(int(key))

    if key in NETWORK_ALIASES:
        return NETWORK_ALIASES[key]

    try:
        return Network[key.upper()]
    except KeyError:
        raise ValueError(f"Unsupported network: {value}") from None


def swap_endpoint(base_url: str, version: str, chain: int, method: str) -> str:
    """Build a swap API endpoint, e.g. ``{base}/swap/v6.0/1/swap/``."""
    return f"{base_url.rstrip('/')}/swap/{version}/{int(chain)}/{method}"
