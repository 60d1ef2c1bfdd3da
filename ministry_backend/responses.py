"""
Response envelope shared by every mutating CRUD operation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field

from ministry_backend.errors import UNKNOWN_ERROR_MESSAGE

ERROR_STATUS = 500


class OperationKind(str, Enum):
    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class OperationResponse(BaseModel):
    message: str
    status: int
    data: Any = Field(default_factory=dict)


class ResponseFormatter:
    """Builds the ``{message, status, data}`` envelope. Holds no state."""

    def success(
        self,
        operation: OperationKind,
        entity_name: str,
        status: int,
        data: Optional[Any] = None,
    ) -> OperationResponse:
        return OperationResponse(
            message=f"success: {OperationKind(operation).value} of {entity_name}",
            status=status,
            data={} if data is None else data,
        )

    def error(self, operation: OperationKind, error: BaseException) -> OperationResponse:
        # The status does not distinguish not-found from internal failures.
        detail = getattr(error, "message", None) or str(error) or UNKNOWN_ERROR_MESSAGE
        return OperationResponse(
            message=f"error: {OperationKind(operation).value}",
            status=ERROR_STATUS,
            data={"error": detail},
        )
