#!/usr/bin/env python3
"""Request a swap quote from the 1inch API.

Usage:
    python scripts/quote.py --src 0x... --dst 0x... --amount 1000000
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from oneinch_swap import OneInchClient, QuoteDetailsBuilder
from oneinch_swap.config import get_settings

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


async def main() -> int:
    parser = argparse.ArgumentParser(description="1inch quote request")
    parser.add_argument("--src", required=True, help="Source token address")
    parser.add_argument("--dst", required=True, help="Destination token address")
    parser.add_argument("--amount", required=True, help="Amount in minimal units")
    parser.add_argument("--protocols", help="Comma-separated protocol allow-list")
    parser.add_argument("--include-protocols", action="store_true", help="Return the route taken")
    parser.add_argument("--include-tokens-info", action="store_true", help="Return token metadata")

    args = parser.parse_args()

    builder = QuoteDetailsBuilder().src(args.src).dst(args.dst).amount(args.amount)
    if args.protocols:
        builder.protocols(args.protocols)
    if args.include_protocols:
        builder.include_protocols(True)
    if args.include_tokens_info:
        builder.include_tokens_info(True)

    details = builder.build()
    if details.is_err():
        print(f"Invalid request: {details.error}")
        return 1

    client = OneInchClient.from_settings(get_settings())
    result = await client.quote(details.value)

    if result.is_err():
        print(f"Quote failed: {result.error}")
        return 1

    quote = result.value
    print(f"Expected output: {quote.to_amount}")
    print(quote.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
