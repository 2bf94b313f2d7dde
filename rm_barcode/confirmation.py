"""
Simulated server confirmation for pre-validated barcodes.

There is no real backend: each confirmation waits a random delay and then
succeeds or fails at random. Use it to exercise the asynchronous paths of a
caller (loading states, concurrent submissions, cancellation).
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .exceptions import ConfirmationError


logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Barcode validated successfully by server"
FAILURE_MESSAGE = "Server validation failed - please try again"

DEFAULT_MIN_DELAY = 1.0
DEFAULT_MAX_DELAY = 30.0
DEFAULT_SUCCESS_RATE = 0.5


@dataclass
class ConfirmationResult:
    """Outcome of one server confirmation."""
    success: bool
    barcode: str
    message: str


async def confirm_barcode(
    barcode: str,
    *,
    min_delay: float = DEFAULT_MIN_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    success_rate: float = DEFAULT_SUCCESS_RATE,
    rng: Optional[random.Random] = None
) -> ConfirmationResult:
    """
    Simulate sending a barcode to the server for confirmation.

    Args:
        barcode: Normalized, pre-validated barcode
        min_delay: Shortest simulated latency in seconds
        max_delay: Longest simulated latency in seconds
        success_rate: Probability (0-1) that the server accepts
        rng: Optional random source, for reproducible runs

    Returns:
        ConfirmationResult on acceptance

    Raises:
        ConfirmationError: If the server rejects the barcode
    """
    rng = rng or random.Random()

    delay = rng.uniform(min_delay, max_delay)
    will_succeed = rng.random() < success_rate

    logger.debug("Confirming %s (delay %.2fs)", barcode, delay)
    await asyncio.sleep(delay)

    if not will_succeed:
        logger.warning("Server rejected %s", barcode)
        raise ConfirmationError(barcode, FAILURE_MESSAGE)

    logger.info("Server confirmed %s", barcode)
    return ConfirmationResult(success=True, barcode=barcode, message=SUCCESS_MESSAGE)


async def confirm_many(barcodes: Iterable[str], **kwargs) -> List[ConfirmationResult]:
    """
    Confirm several barcodes concurrently.

    Rejections are returned as unsuccessful results rather than raised.
    Results are in input order.
    """
    async def confirm_one(barcode: str) -> ConfirmationResult:
        try:
            return await confirm_barcode(barcode, **kwargs)
        except ConfirmationError as exc:
            return ConfirmationResult(success=False, barcode=exc.barcode, message=exc.message)

    return list(await asyncio.gather(*(confirm_one(b) for b in barcodes)))
