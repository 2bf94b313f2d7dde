"""
In-memory validation history.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional
from uuid import uuid4

import pandas as pd


class ValidationStatus(str, Enum):
    VALIDATING = "validating"
    VALID = "valid"
    INVALID = "invalid"


STATUS_TEXT: Dict[ValidationStatus, str] = {
    ValidationStatus.VALIDATING: "Validating...",
    ValidationStatus.VALID: "Valid barcode",
    ValidationStatus.INVALID: "Invalid barcode",
}

STATUS_ICON: Dict[ValidationStatus, str] = {
    ValidationStatus.VALIDATING: "⏳",
    ValidationStatus.VALID: "✓",
    ValidationStatus.INVALID: "✗",
}


@dataclass
class ValidationEntry:
    """A single submitted barcode and its confirmation status."""
    barcode: str
    status: ValidationStatus = ValidationStatus.VALIDATING
    timestamp: float = field(default_factory=time.time)
    id: str = field(default_factory=lambda: uuid4().hex)


class ValidationHistory:
    """
    Newest-first list of submitted barcodes.

    Confirmations complete on a background thread, so all access goes
    through a lock. Only the most recent ``limit`` entries are kept.
    """

    def __init__(self, limit: int = 50):
        self.limit = limit
        self._entries: List[ValidationEntry] = []
        self._lock = threading.Lock()

    def add(self, barcode: str) -> ValidationEntry:
        entry = ValidationEntry(barcode=barcode)
        with self._lock:
            self._entries.insert(0, entry)
            del self._entries[self.limit:]
        return entry

    def update_status(self, entry_id: str, status: ValidationStatus) -> Optional[ValidationEntry]:
        """Set an entry's status. Returns None if the entry was evicted."""
        with self._lock:
            for entry in self._entries:
                if entry.id == entry_id:
                    entry.status = status
                    return entry
        return None

    def entries(self) -> List[ValidationEntry]:
        with self._lock:
            return list(self._entries)

    def pending(self) -> List[ValidationEntry]:
        return [e for e in self.entries() if e.status is ValidationStatus.VALIDATING]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def to_dataframe(self) -> pd.DataFrame:
        rows = [
            {
                "": STATUS_ICON[e.status],
                "Barcode": e.barcode,
                "Status": STATUS_TEXT[e.status],
                "Submitted": pd.Timestamp(e.timestamp, unit="s"),
            }
            for e in self.entries()
        ]
        return pd.DataFrame(rows, columns=["", "Barcode", "Status", "Submitted"])
