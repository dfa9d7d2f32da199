#!/usr/bin/env python3
"""Print the 1inch router address that must be approved for a network.

Usage:
    python scripts/router_address.py            # configured network
    python scripts/router_address.py polygon
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from oneinch_swap import OneInchClient
from oneinch_swap.config import get_settings

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


async def main() -> int:
    chain = sys.argv[1] if len(sys.argv) > 1 else None

    client = OneInchClient.from_settings(get_settings())
    result = await client.get_router_address(chain)

    if result.is_err():
        print(f"Lookup failed: {result.error}")
        return 1

    print(result.value.address)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
