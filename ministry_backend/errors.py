"""
Typed failures raised by the document stores and the CRUD service.
"""

from __future__ import annotations

NOT_FOUND_MESSAGE = "Documento não encontrado"
UNKNOWN_ERROR_MESSAGE = "Erro desconhecido"


class CrudError(Exception):
    """Base class for failures surfaced through the response envelope."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DocumentNotFoundError(CrudError):
    """The target document of an update/delete does not exist."""

    def __init__(self, collection: str, doc_id: str):
        super().__init__(NOT_FOUND_MESSAGE)
        self.collection = collection
        self.doc_id = doc_id


class StoreOperationError(CrudError):
    """A store/transport failure, or any other failure normalised by the service."""
