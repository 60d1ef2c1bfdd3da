"""
Generic CRUD service shared by every entity collection.

One ``CrudService`` is built per entity from a collection and a formatter;
entities never subclass it. Reads return raw records (or ``None``) and let
store failures propagate. Mutations always return an ``OperationResponse``
and never raise.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from ministry_backend.errors import (
    UNKNOWN_ERROR_MESSAGE,
    CrudError,
    DocumentNotFoundError,
    StoreOperationError,
)
from ministry_backend.responses import OperationKind, OperationResponse, ResponseFormatter
from ministry_backend.store import DocumentCollection, Record, StoredDocument

logger = logging.getLogger(__name__)

SUCCESS_STATUS = 200


class CrudService:
    def __init__(
        self,
        collection: DocumentCollection,
        formatter: ResponseFormatter,
        entity_name: Optional[str] = None,
    ):
        self.collection = collection
        self.formatter = formatter
        self.entity_name = entity_name or collection.name

    async def find_all(self) -> list[Record]:
        documents = await self.collection.list_all()
        return [document.as_record() for document in documents]

    async def find_by_id(self, doc_id: str) -> Optional[Record]:
        if not doc_id:
            return None
        document = await self.collection.get(doc_id)
        if document is None:
            return None
        return document.as_record()

    async def find_by_pid(self, pid: str) -> Optional[Record]:
        document = await self._find_by_field("pid", pid)
        if document is None:
            return None
        return document.as_record()

    async def create(self, data: Record) -> OperationResponse:
        async def action() -> Record:
            doc_id = await self.collection.add(data)
            logger.info("Created %s/%s", self.collection.name, doc_id)
            return {**data, "id": doc_id}

        return await self._run(OperationKind.CREATE, action)

    async def update(self, doc_id: str, partial: Record) -> OperationResponse:
        async def action() -> Record:
            self._require_id(doc_id)
            await self.collection.update(doc_id, partial)
            return {**partial, "id": doc_id}

        return await self._run(OperationKind.UPDATE, action)

    async def delete(self, doc_id: str) -> OperationResponse:
        async def action() -> Record:
            self._require_id(doc_id)
            await self.collection.delete(doc_id)
            logger.info("Deleted %s/%s", self.collection.name, doc_id)
            return {"id": doc_id}

        return await self._run(OperationKind.DELETE, action)

    async def _find_by_field(self, field_name: str, value: Any) -> Optional[StoredDocument]:
        """Return the first document whose ``field_name`` equals ``value``."""
        return await self.collection.find_first(field_name, value)

    def _require_id(self, doc_id: str) -> None:
        if not doc_id:
            raise DocumentNotFoundError(self.collection.name, doc_id)

    async def _run(
        self,
        operation: OperationKind,
        action: Callable[[], Awaitable[Any]],
    ) -> OperationResponse:
        try:
            result = await action()
        except Exception as exc:
            failure = _as_failure(exc)
            logger.warning(
                "%s on %s failed: %s",
                operation.value,
                self.collection.name,
                failure.message,
            )
            return self.formatter.error(operation, failure)
        return self.formatter.success(operation, self.entity_name, SUCCESS_STATUS, result)


def _as_failure(exc: Exception) -> CrudError:
    if isinstance(exc, CrudError):
        return exc
    message = str(exc)
    if not message:
        return StoreOperationError(UNKNOWN_ERROR_MESSAGE)
    return StoreOperationError(message)
