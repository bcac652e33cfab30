#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from krakenspot import KrakenSpotRESTConnector
from krakenspot.core import OHLCInterval


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch recent Kraken spot OHLC candles via REST")
    p.add_argument("pair", nargs="?", default="XBTUSD")
    p.add_argument("interval", nargs="?", default="M1", choices=[i.name for i in OHLCInterval])
    p.add_argument("limit", nargs="?", type=int, default=10)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    interval = OHLCInterval[args.interval]

    async with KrakenSpotRESTConnector() as rest:
        reply = await rest.get_ohlc_data(args.pair, interval=interval)
    envelope = reply.result
    if not envelope.ok:
        print(f"Kraken error: {', '.join(envelope.error)}")
        return

    data = envelope.result
    candles = data.data[-args.limit :]
    print("=" * 65)
    print(f"Pair       : {data.pair}")
    print(f"Interval   : {interval.name} ({int(interval)} min)")
    print(f"Bars count : {len(candles)}")
    print(f"Last       : {data.last}")
    print("=" * 65)
    print(
        f"{'Timestamp':25} | {'Open':>11} | {'High':>11} | {'Low':>11} | {'Close':>11} | {'Volume':>13}"
    )
    print("-" * 83)
    for c in candles:
        print(
            f"{c.time.isoformat():25} | {c.open:>11} | {c.high:>11} | {c.low:>11} | {c.close:>11} | {c.volume:>13}"
        )
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
