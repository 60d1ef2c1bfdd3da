"""
Document store abstraction for Firestore and an in-memory test implementation.
"""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from google.api_core import exceptions as google_exceptions
from google.cloud.firestore import AsyncClient
from google.cloud.firestore_v1.base_query import FieldFilter

from ministry_backend.errors import DocumentNotFoundError, StoreOperationError

Record = Dict[str, Any]


@dataclass(frozen=True)
class StoredDocument:
    """A document as read from a collection: its store id and its fields."""

    id: str
    data: Record = field(default_factory=dict)

    def as_record(self) -> Record:
        # The store id wins over any stored field named "id".
        return {**self.data, "id": self.id}


class DocumentCollection(Protocol):
    """The operations the CRUD service needs from one named collection."""

    name: str

    async def list_all(self) -> list[StoredDocument]:
        ...

    async def get(self, doc_id: str) -> Optional[StoredDocument]:
        ...

    async def find_first(self, field_name: str, value: Any) -> Optional[StoredDocument]:
        ...

    async def add(self, data: Record) -> str:
        ...

    async def update(self, doc_id: str, partial: Record) -> None:
        """Merge ``partial`` into an existing document or raise DocumentNotFoundError."""
        ...

    async def delete(self, doc_id: str) -> None:
        """Remove an existing document or raise DocumentNotFoundError."""
        ...


class DocumentStore(Protocol):
    def collection(self, name: str) -> DocumentCollection:
        ...


@dataclass
class InMemoryCollection:
    """Dict-backed collection. No await happens between check and write."""

    name: str
    documents: Dict[str, Record] = field(default_factory=dict)

    async def list_all(self) -> list[StoredDocument]:
        return [
            StoredDocument(id=doc_id, data=copy.deepcopy(data))
            for doc_id, data in self.documents.items()
        ]

    async def get(self, doc_id: str) -> Optional[StoredDocument]:
        data = self.documents.get(doc_id)
        if data is None:
            return None
        return StoredDocument(id=doc_id, data=copy.deepcopy(data))

    async def find_first(self, field_name: str, value: Any) -> Optional[StoredDocument]:
        for doc_id, data in self.documents.items():
            if field_name in data and data[field_name] == value:
                return StoredDocument(id=doc_id, data=copy.deepcopy(data))
        return None

    async def add(self, data: Record) -> str:
        doc_id = uuid.uuid4().hex
        self.documents[doc_id] = copy.deepcopy(data)
        return doc_id

    async def update(self, doc_id: str, partial: Record) -> None:
        existing = self.documents.get(doc_id)
        if existing is None:
            raise DocumentNotFoundError(self.name, doc_id)
        if not partial:
            raise ValueError("Cannot update with an empty document.")
        existing.update(copy.deepcopy(partial))

    async def delete(self, doc_id: str) -> None:
        if doc_id not in self.documents:
            raise DocumentNotFoundError(self.name, doc_id)
        del self.documents[doc_id]


class InMemoryDocumentStore:
    """Simple in-memory document store for development and tests."""

    def __init__(self):
        self.collections: Dict[str, InMemoryCollection] = {}

    def collection(self, name: str) -> InMemoryCollection:
        if name not in self.collections:
            self.collections[name] = InMemoryCollection(name=name)
        return self.collections[name]

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        for collection in self.collections.values():
            collection.documents.clear()


class FirestoreCollection:
    """
    Firestore-backed collection using the async client.

    Updates rely on Firestore rejecting ``update()`` on a missing document and
    deletes carry an ``exists=True`` precondition, so the existence check and
    the write are one atomic call.
    """

    def __init__(self, client: AsyncClient, name: str):
        self.client = client
        self.name = name
        self._ref = client.collection(name)

    async def list_all(self) -> list[StoredDocument]:
        try:
            snapshots = await self._ref.get()
        except google_exceptions.GoogleAPICallError as exc:
            raise StoreOperationError(exc.message) from exc
        return [_to_stored(snapshot) for snapshot in snapshots]

    async def get(self, doc_id: str) -> Optional[StoredDocument]:
        try:
            snapshot = await self._ref.document(doc_id).get()
        except google_exceptions.GoogleAPICallError as exc:
            raise StoreOperationError(exc.message) from exc
        if not snapshot.exists:
            return None
        return _to_stored(snapshot)

    async def find_first(self, field_name: str, value: Any) -> Optional[StoredDocument]:
        query = self._ref.where(filter=FieldFilter(field_name, "==", value)).limit(1)
        try:
            snapshots = await query.get()
        except google_exceptions.GoogleAPICallError as exc:
            raise StoreOperationError(exc.message) from exc
        if not snapshots:
            return None
        return _to_stored(snapshots[0])

    async def add(self, data: Record) -> str:
        try:
            _, doc_ref = await self._ref.add(data)
        except google_exceptions.GoogleAPICallError as exc:
            raise StoreOperationError(exc.message) from exc
        return doc_ref.id

    async def update(self, doc_id: str, partial: Record) -> None:
        if not partial:
            # The client rejects empty updates before any existence check.
            if await self.get(doc_id) is None:
                raise DocumentNotFoundError(self.name, doc_id)
            raise ValueError("Cannot update with an empty document.")
        try:
            await self._ref.document(doc_id).update(partial)
        except google_exceptions.NotFound as exc:
            raise DocumentNotFoundError(self.name, doc_id) from exc
        except google_exceptions.GoogleAPICallError as exc:
            raise StoreOperationError(exc.message) from exc

    async def delete(self, doc_id: str) -> None:
        option = self.client.write_option(exists=True)
        try:
            await self._ref.document(doc_id).delete(option=option)
        except (google_exceptions.NotFound, google_exceptions.FailedPrecondition) as exc:
            raise DocumentNotFoundError(self.name, doc_id) from exc
        except google_exceptions.GoogleAPICallError as exc:
            raise StoreOperationError(exc.message) from exc


class FirestoreDocumentStore:
    def __init__(self, client: AsyncClient):
        self.client = client

    def collection(self, name: str) -> FirestoreCollection:
        return FirestoreCollection(self.client, name)


def _to_stored(snapshot) -> StoredDocument:
    return StoredDocument(id=snapshot.id, data=snapshot.to_dict() or {})
