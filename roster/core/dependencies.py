from __future__ import annotations

from roster.services.record_store import RecordStore, record_store


def get_record_store() -> RecordStore:
    return record_store
