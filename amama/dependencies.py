"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

from functools import partial

from amama.config import Settings, get_settings
from amama.defaults import default_document
from amama.store import DocumentStore, InMemoryDocumentStore, JsonFileStore

_store: DocumentStore | None = None


def build_store(settings: Settings) -> DocumentStore:
    seed = partial(default_document, settings)
    if settings.use_in_memory_store:
        return InMemoryDocumentStore(default_factory=seed)
    return JsonFileStore(settings.data_file, default_factory=seed)


def get_store() -> DocumentStore:
    """
    Return a singleton store so every request shares the same file lock.
    """
    global _store
    if _store:
        return _store
    _store = build_store(get_settings())
    return _store
