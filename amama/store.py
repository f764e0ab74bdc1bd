"""
Document storage: a single JSON file on disk, and an in-memory test double.
"""

from __future__ import annotations

import copy
import json
import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds")


def serialize_document(doc: dict) -> str:
    return json.dumps(doc, indent=2, ensure_ascii=False)


class DocumentStore(Protocol):
    """Defines the operations the API needs from the document store."""

    def read(self) -> dict:
        ...

    def write(self, doc: dict) -> dict:
        ...

    def reset(self) -> dict:
        ...

    def describe(self) -> str:
        ...


@dataclass
class InMemoryDocumentStore:
    """Test double that keeps the document in process memory."""

    default_factory: Callable[[], dict]
    document: Optional[dict] = None
    writes: int = 0

    def read(self) -> dict:
        if self.document is None:
            return self.write(self.default_factory())
        # Mimic a fresh parse so callers never mutate the stored copy
        return copy.deepcopy(self.document)

    def write(self, doc: dict) -> dict:
        stamped = dict(doc)
        stamped["lastUpdated"] = utc_now_iso()
        self.document = json.loads(serialize_document(stamped))
        self.writes += 1
        return copy.deepcopy(self.document)

    def reset(self) -> dict:
        return self.write(self.default_factory())

    def describe(self) -> str:
        return "memory"


class JsonFileStore:
    """
    Whole-document JSON store backed by one file.

    The file is created with the default document on first read and is
    rewritten in full on every write. A lock serializes access within the
    process; nothing guards against other processes touching the file.
    """

    def __init__(self, path: str | Path, default_factory: Callable[[], dict]):
        self.path = Path(path)
        self.default_factory = default_factory
        self._lock = threading.Lock()

    def read(self) -> dict:
        with self._lock:
            try:
                text = self.path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info("Data file %s not found; seeding defaults", self.path)
                return self._write_locked(self.default_factory())
            return json.loads(text)

    def write(self, doc: dict) -> dict:
        with self._lock:
            return self._write_locked(doc)

    def reset(self) -> dict:
        with self._lock:
            logger.info("Resetting %s to defaults", self.path)
            return self._write_locked(self.default_factory())

    def describe(self) -> str:
        return str(self.path)

    def _write_locked(self, doc: dict) -> dict:
        stamped = dict(doc)
        stamped["lastUpdated"] = utc_now_iso()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(serialize_document(stamped), encoding="utf-8")
        logger.debug("Wrote %s", self.path)
        return stamped
