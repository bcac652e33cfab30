"""Unit tests for NonceGenerator."""

from concurrent.futures import ThreadPoolExecutor
from unittest.mock import patch

from krakenspot.spot.rest import NonceGenerator


class TestNonceGenerator:
    def test_uses_microsecond_clock(self):
        with patch("krakenspot.spot.rest.nonce.time.time_ns", return_value=1_616_492_376_594_000_123):
            assert NonceGenerator()() == 1_616_492_376_594_000

    def test_strictly_increasing_on_frozen_clock(self):
        generator = NonceGenerator()
        with patch("krakenspot.spot.rest.nonce.time.time_ns", return_value=5_000):
            values = [generator() for _ in range(3)]
        assert values == [5, 6, 7]

    def test_unique_across_threads(self):
        generator = NonceGenerator()
        with ThreadPoolExecutor(max_workers=8) as pool:
            values = list(pool.map(lambda _: generator(), range(200)))
        assert len(set(values)) == 200
