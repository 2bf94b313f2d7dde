"""
Barcode validator integration for the UI.

Pre-validation runs the local rm_barcode module in a subprocess; passing
barcodes are then confirmed by the simulated server on a background
event loop.
"""

from __future__ import annotations

import asyncio
import json
import logging
import random
import subprocess
import sys
import threading
from concurrent.futures import Future
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from rm_barcode.confirmation import confirm_barcode
from rm_barcode.exceptions import ConfirmationError

from .history import ValidationHistory, ValidationStatus


logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent

PRE_VALIDATION_PASSED = "Pre-validation passed! Sending to server..."


def validate_scan(scan_text: str) -> Tuple[bool, Dict[str, Any], str]:
    """
    Validate a barcode using the local rm_barcode module.

    Returns:
        (valid, data, error_message)
    """
    try:
        result = subprocess.run(
            [
                sys.executable,
                "-m",
                "rm_barcode",
                "--json",
                "--components",
                "--",
                scan_text,
            ],
            cwd=PROJECT_ROOT,
            check=False,
            capture_output=True,
            text=True,
        )
    except (OSError, ValueError) as exc:
        # ValueError: argument contains a NUL byte
        return False, {}, f"Failed to run validator: {exc}"

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError:
        return False, {}, result.stderr.strip() or "Validator returned invalid JSON"

    if data.get("Valid"):
        return True, data, ""
    return False, data, data.get("Error") or data.get("error") or "Validation failed"


class ConfirmationClient:
    """
    Runs server confirmations on an event loop in a daemon thread.

    Each confirmation updates its history entry to valid or invalid when it
    finishes. ``shutdown`` cancels whatever is still outstanding.
    """

    def __init__(self, settings: Dict[str, Any], rng: Optional[random.Random] = None):
        self.settings = settings
        self.rng = rng or random.Random()
        self._loop = asyncio.new_event_loop()
        self._semaphore: Optional[asyncio.Semaphore] = None
        self._futures: List[Future] = []
        self._lock = threading.Lock()
        self._thread = threading.Thread(
            target=self._run_loop, name="rm-barcode-confirmation", daemon=True
        )
        self._thread.start()

    def _run_loop(self) -> None:
        asyncio.set_event_loop(self._loop)
        self._loop.run_forever()

    async def _confirm(self, barcode: str) -> bool:
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self.settings["confirmation_workers"])
        async with self._semaphore:
            try:
                await confirm_barcode(
                    barcode,
                    min_delay=self.settings["confirmation_min_delay"],
                    max_delay=self.settings["confirmation_max_delay"],
                    success_rate=self.settings["confirmation_success_rate"],
                    rng=self.rng,
                )
            except ConfirmationError:
                return False
        return True

    def submit(self, history: ValidationHistory, entry_id: str, barcode: str) -> Future:
        """Schedule confirmation of ``barcode`` for history entry ``entry_id``."""
        future = asyncio.run_coroutine_threadsafe(self._confirm(barcode), self._loop)

        def _done(fut: Future) -> None:
            if fut.cancelled():
                status = ValidationStatus.INVALID
            elif fut.exception() is not None:
                logger.error("Confirmation of %s failed: %s", barcode, fut.exception())
                status = ValidationStatus.INVALID
            else:
                status = ValidationStatus.VALID if fut.result() else ValidationStatus.INVALID
            history.update_status(entry_id, status)
            with self._lock:
                if fut in self._futures:
                    self._futures.remove(fut)

        with self._lock:
            self._futures.append(future)
        future.add_done_callback(_done)
        return future

    def outstanding(self) -> int:
        with self._lock:
            return len(self._futures)

    async def _cancel_outstanding(self) -> None:
        current = asyncio.current_task()
        tasks = [t for t in asyncio.all_tasks() if t is not current]
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def shutdown(self) -> None:
        """Cancel outstanding confirmations, then stop and close the loop."""
        if not self._loop.is_closed():
            asyncio.run_coroutine_threadsafe(self._cancel_outstanding(), self._loop).result(timeout=5)
            self._loop.call_soon_threadsafe(self._loop.stop)
        self._thread.join(timeout=5)
        if not self._thread.is_alive():
            self._loop.close()


def submit_barcode(
    raw: str,
    history: ValidationHistory,
    client: ConfirmationClient
) -> Tuple[bool, str]:
    """
    Pre-validate a barcode and, if it passes, send it for confirmation.

    Failed pre-validation leaves the history untouched.

    Returns:
        (accepted, message)
    """
    ok, data, err = validate_scan(raw)
    if not ok:
        return False, err

    barcode = data["Barcode"]
    entry = history.add(barcode)
    client.submit(history, entry.id, barcode)
    logger.info("Submitted %s for confirmation", barcode)
    return True, PRE_VALIDATION_PASSED
