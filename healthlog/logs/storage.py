# -*- coding: utf-8 -*-
"""Health log — in-process, append-only entry store.

Entries live for as long as the owning ``LogStore`` (normally one per
application). Nothing is written to disk.

Ids are the insertion time in milliseconds since the epoch. With the
``clock`` strategy two submissions in the same millisecond share an id;
``monotonic`` bumps the id past the previous one instead.

``id`` and ``timestamp`` are always the store's own: values a caller sends
under those names are overwritten rather than kept, so an entry can never
take over another entry's id.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from .errors import ProcessingError, ValidationError
from .models import HealthRecord, StoredLogEntry

logger = logging.getLogger(__name__)

ID_STRATEGIES = ("clock", "monotonic")
REQUIRED_FIELDS = ("Date", "Time")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _epoch_millis(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def _iso_millis(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class LogStore:
    """Ordered collection of ``StoredLogEntry`` objects."""

    def __init__(
        self,
        id_strategy: str = "clock",
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(f"Unknown id strategy {id_strategy!r}; expected one of {ID_STRATEGIES}")
        self.id_strategy = id_strategy
        self._clock = clock or _utcnow
        self._entries: List[StoredLogEntry] = []
        self._last_millis: Optional[int] = None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.count()

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def submit(self, payload: Any) -> Tuple[StoredLogEntry, int]:
        """Validate ``payload``, append it as a new entry.

        Returns the entry and the store size after the append.
        """
        if not isinstance(payload, dict):
            raise ProcessingError(f"Expected a JSON object, got {type(payload).__name__}")
        if any(not payload.get(name) for name in REQUIRED_FIELDS):
            raise ValidationError()
        try:
            record = HealthRecord.model_validate(payload)
        except PydanticValidationError as exc:
            raise ProcessingError(f"Malformed health record: {exc}") from exc

        fields = record.model_dump(by_alias=True)
        with self._lock:
            entry_id, timestamp = self._next_identity()
            fields.update(id=entry_id, timestamp=timestamp)
            entry = StoredLogEntry.model_validate(fields)
            self._entries.append(entry)
            total = len(self._entries)

        logger.info("New health log received: %s", entry.model_dump(by_alias=True))
        return entry, total

    def list(self) -> Tuple[List[StoredLogEntry], int]:
        with self._lock:
            snapshot = list(self._entries)
        return snapshot, len(snapshot)

    def _next_identity(self) -> Tuple[str, str]:
        # Caller holds self._lock.
        now = self._clock()
        millis = _epoch_millis(now)
        if self.id_strategy == "monotonic" and self._last_millis is not None and millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return str(millis), _iso_millis(now)
