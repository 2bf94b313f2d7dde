"""
Tests for the in-memory validation history.
"""

import threading

from modules.history import ValidationHistory, ValidationStatus


class TestValidationHistory:

    def test_new_entries_are_validating_and_newest_first(self):
        history = ValidationHistory()
        first = history.add("AB473124829GB")
        second = history.add("XH545554533GB")
        assert [e.id for e in history.entries()] == [second.id, first.id]
        assert all(e.status is ValidationStatus.VALIDATING for e in history.entries())

    def test_update_status(self):
        history = ValidationHistory()
        entry = history.add("AB473124829GB")
        updated = history.update_status(entry.id, ValidationStatus.VALID)
        assert updated is entry
        assert history.entries()[0].status is ValidationStatus.VALID
        assert history.pending() == []

    def test_update_unknown_entry(self):
        history = ValidationHistory()
        assert history.update_status("missing", ValidationStatus.VALID) is None

    def test_limit_evicts_oldest(self):
        history = ValidationHistory(limit=3)
        entries = [history.add(f"AB{n:08d}0GB") for n in range(5)]
        assert len(history) == 3
        assert [e.id for e in history.entries()] == [e.id for e in reversed(entries[2:])]

    def test_clear(self):
        history = ValidationHistory()
        history.add("AB473124829GB")
        history.clear()
        assert history.entries() == []

    def test_ids_unique(self):
        history = ValidationHistory()
        ids = {history.add("AB473124829GB").id for _ in range(100)}
        assert len(ids) == 100

    def test_concurrent_updates(self):
        history = ValidationHistory(limit=1000)
        entries = [history.add("AB473124829GB") for _ in range(200)]

        def worker(chunk):
            for entry in chunk:
                history.update_status(entry.id, ValidationStatus.INVALID)

        threads = [threading.Thread(target=worker, args=(entries[i::4],)) for i in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert all(e.status is ValidationStatus.INVALID for e in history.entries())

    def test_to_dataframe(self):
        history = ValidationHistory()
        a = history.add("AB473124829GB")
        history.add("XH545554533GB")
        history.update_status(a.id, ValidationStatus.VALID)

        df = history.to_dataframe()
        assert list(df.columns) == ["", "Barcode", "Status", "Submitted"]
        assert df["Barcode"].tolist() == ["XH545554533GB", "AB473124829GB"]
        assert df["Status"].tolist() == ["Validating...", "Valid barcode"]
        assert df[""].tolist() == ["⏳", "✓"]

    def test_empty_dataframe(self):
        df = ValidationHistory().to_dataframe()
        assert df.empty
        assert "Status" in df.columns
