#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from krakenspot import KrakenSpotRESTConnector
from krakenspot.models import SecurityOptions


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Show Kraken spot balances. Reads KRAKEN_API_KEY and KRAKEN_API_SECRET."
    )
    p.add_argument("--otp", default=None, help="Two-factor password, if the key requires one")
    p.add_argument("--debug", action="store_true", help="Log request signing")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    key = os.environ.get("KRAKEN_API_KEY")
    secret = os.environ.get("KRAKEN_API_SECRET")
    if not key or not secret:
        raise SystemExit("KRAKEN_API_KEY and KRAKEN_API_SECRET must be set")

    secopts = SecurityOptions(second_factor=args.otp) if args.otp else None
    async with KrakenSpotRESTConnector(key, secret) as rest:
        reply = await rest.get_extended_balance(secopts=secopts)

    envelope = reply.result
    if not envelope.ok:
        print(f"Kraken error: {', '.join(envelope.error)}")
        return

    print(f"{'Asset':10} | {'Balance':>20} | {'Hold':>20}")
    print("-" * 56)
    for asset, balance in sorted(envelope.result.items()):
        print(f"{asset:10} | {balance.balance:>20} | {balance.hold_trade or '':>20}")


if __name__ == "__main__":
    asyncio.run(main())
