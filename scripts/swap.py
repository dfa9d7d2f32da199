#!/usr/bin/env python3
"""Request swap transaction data from the 1inch API.

Usage:
    python scripts/swap.py --src 0x... --dst 0x... --amount 1000000 --from 0x... --slippage 1
    python scripts/swap.py ... --v6 --origin 0x... --use-permit2

Reads ONEINCH_API_TOKEN and ONEINCH_NETWORK from the environment or .env.
"""

import argparse
import asyncio
import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from oneinch_swap import OneInchClient, SwapDetailsBuilder, SwapDetailsV6Builder
from oneinch_swap.config import get_settings

logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def build_details(args: argparse.Namespace):
    """Build swap details from CLI arguments."""
    builder = SwapDetailsV6Builder().origin(args.origin) if args.v6 else SwapDetailsBuilder()
    builder.src(args.src).dst(args.dst).amount(args.amount).from_addr(args.from_addr)

    checked = builder.slippage(args.slippage)
    if checked.is_err():
        return checked

    if args.fee is not None:
        checked = builder.fee(args.fee)
        if checked.is_err():
            return checked

    if args.receiver:
        builder.receiver(args.receiver)
    if args.disable_estimate:
        builder.disable_estimate(True)
    if args.include_tokens_info:
        builder.include_tokens_info(True)
    if args.v6 and args.use_permit2:
        builder.use_permit2(True)

    return builder.build()


async def main() -> int:
    parser = argparse.ArgumentParser(description="1inch swap request")
    parser.add_argument("--src", required=True, help="Source token address")
    parser.add_argument("--dst", required=True, help="Destination token address")
    parser.add_argument("--amount", required=True, help="Amount in minimal units")
    parser.add_argument("--from", dest="from_addr", required=True, help="Wallet performing the swap")
    parser.add_argument("--slippage", type=int, default=1, help="Slippage percent (0-50)")
    parser.add_argument("--fee", type=int, help="Referrer fee (0-3)")
    parser.add_argument("--receiver", help="Receiver of the destination token")
    parser.add_argument("--disable-estimate", action="store_true", help="Skip on-chain estimation")
    parser.add_argument("--include-tokens-info", action="store_true", help="Return token metadata")
    parser.add_argument("--v6", action="store_true", help="Use the v6.0 API")
    parser.add_argument("--origin", help="EOA initiating the transaction (v6 only)")
    parser.add_argument("--use-permit2", action="store_true", help="Use Permit2 (v6 only)")

    args = parser.parse_args()

    if args.v6 and not args.origin:
        parser.error("--origin is required with --v6")

    details = build_details(args)
    if details.is_err():
        print(f"Invalid request: {details.error}")
        return 1

    client = OneInchClient.from_settings(get_settings())
    if args.v6:
        result = await client.swap_v6(details.value)
    else:
        result = await client.swap(details.value)

    if result.is_err():
        print(f"Swap failed: {result.error}")
        return 1

    print(result.value.model_dump_json(by_alias=True, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
