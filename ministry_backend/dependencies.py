"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging
from typing import Callable

from ministry_backend.config import get_settings
from ministry_backend.crud import CrudService
from ministry_backend.entities import EntityDefinition
from ministry_backend.responses import ResponseFormatter
from ministry_backend.store import DocumentStore, FirestoreDocumentStore, InMemoryDocumentStore

logger = logging.getLogger(__name__)

_document_store: DocumentStore | None = None
_response_formatter: ResponseFormatter | None = None


def get_document_store() -> DocumentStore:
    """
    Return a singleton document store so in-memory state persists across requests.
    """
    global _document_store
    if _document_store:
        return _document_store

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.firebase_configured:
        logger.info("Using in-memory document store")
        _document_store = InMemoryDocumentStore()
    else:
        # Imported lazily so local runs never touch Firebase credentials.
        from ministry_backend.firebase import create_firestore_client

        _document_store = FirestoreDocumentStore(create_firestore_client(settings))
    return _document_store


def get_response_formatter() -> ResponseFormatter:
    global _response_formatter
    if _response_formatter:
        return _response_formatter
    _response_formatter = ResponseFormatter()
    return _response_formatter


def build_crud_service(entity: EntityDefinition) -> CrudService:
    store = get_document_store()
    return CrudService(
        store.collection(entity.collection),
        get_response_formatter(),
        entity_name=entity.name,
    )


def crud_service_dependency(entity: EntityDefinition) -> Callable[[], CrudService]:
    """Return a FastAPI dependency that yields the service for ``entity``."""

    def get_crud_service() -> CrudService:
        return build_crud_service(entity)

    return get_crud_service
