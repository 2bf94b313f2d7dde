"""
Tests for the simulated server confirmation.

Delays are set to zero and outcomes forced through success_rate so the
tests are fast and deterministic.
"""

import asyncio
import random

import pytest

from rm_barcode import ConfirmationError, ConfirmationResult, confirm_barcode, confirm_many
from rm_barcode.confirmation import FAILURE_MESSAGE, SUCCESS_MESSAGE


FAST = {"min_delay": 0.0, "max_delay": 0.0}


class TestConfirmBarcode:

    def test_success(self):
        result = asyncio.run(confirm_barcode("AB473124829GB", success_rate=1.0, **FAST))
        assert result == ConfirmationResult(
            success=True, barcode="AB473124829GB", message=SUCCESS_MESSAGE
        )

    def test_failure_raises(self):
        with pytest.raises(ConfirmationError) as exc_info:
            asyncio.run(confirm_barcode("AB473124829GB", success_rate=0.0, **FAST))
        assert exc_info.value.barcode == "AB473124829GB"
        assert exc_info.value.message == FAILURE_MESSAGE

    def test_seeded_rng_is_reproducible(self):
        def run(seed):
            outcomes = []
            rng = random.Random(seed)
            for _ in range(20):
                try:
                    asyncio.run(confirm_barcode("AB473124829GB", rng=rng, **FAST))
                    outcomes.append(True)
                except ConfirmationError:
                    outcomes.append(False)
            return outcomes

        assert run(42) == run(42)

    def test_cancellation(self):
        async def scenario():
            task = asyncio.ensure_future(
                confirm_barcode("AB473124829GB", min_delay=10.0, max_delay=10.0)
            )
            await asyncio.sleep(0)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(scenario())


class TestConfirmMany:

    def test_results_in_input_order(self):
        barcodes = ["AB473124829GB", "XH545554533GB", "AA000000005GB"]
        results = asyncio.run(confirm_many(barcodes, success_rate=1.0, **FAST))
        assert [r.barcode for r in results] == barcodes
        assert all(r.success for r in results)

    def test_rejections_returned_not_raised(self):
        results = asyncio.run(confirm_many(["AB473124829GB"], success_rate=0.0, **FAST))
        assert results == [
            ConfirmationResult(success=False, barcode="AB473124829GB", message=FAILURE_MESSAGE)
        ]

    def test_runs_concurrently(self):
        """Ten 0.2s confirmations finish well under two seconds."""
        async def timed():
            loop = asyncio.get_running_loop()
            start = loop.time()
            await confirm_many(
                ["AB473124829GB"] * 10, min_delay=0.2, max_delay=0.2, success_rate=1.0
            )
            return loop.time() - start

        assert asyncio.run(timed()) < 1.5
