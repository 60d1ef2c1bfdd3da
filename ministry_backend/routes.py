"""
HTTP routes for the ministry backend API.

Every entity gets the same six routes, built from its ``EntityDefinition``.
Mutations answer with the envelope and mirror its status on the HTTP
response; reads answer with raw records.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Response

from ministry_backend.crud import CrudService
from ministry_backend.dependencies import crud_service_dependency
from ministry_backend.entities import ENTITIES, EntityDefinition
from ministry_backend.responses import OperationResponse
from ministry_backend.schemas import to_document


def build_entity_router(entity: EntityDefinition) -> APIRouter:
    router = APIRouter(prefix=f"/{entity.name}", tags=[entity.name])
    get_service = crud_service_dependency(entity)
    CreateModel = entity.create_model
    UpdateModel = entity.update_model

    @router.post("", response_model=OperationResponse)
    async def create_record(
        payload: CreateModel,
        response: Response,
        service: CrudService = Depends(get_service),
    ):
        envelope = await service.create(to_document(payload))
        response.status_code = envelope.status
        return envelope

    @router.get("", response_model=list[dict[str, Any]])
    async def list_records(service: CrudService = Depends(get_service)):
        return await service.find_all()

    @router.get("/pid/{pid}", response_model=dict[str, Any])
    async def get_record_by_pid(pid: str, service: CrudService = Depends(get_service)):
        record = await service.find_by_pid(pid)
        if record is None:
            raise HTTPException(status_code=404, detail=f"No {entity.name} with pid {pid}")
        return record

    @router.get("/{doc_id}", response_model=dict[str, Any])
    async def get_record(doc_id: str, service: CrudService = Depends(get_service)):
        record = await service.find_by_id(doc_id)
        if record is None:
            raise HTTPException(status_code=404, detail=f"No {entity.name} with id {doc_id}")
        return record

    @router.patch("/{doc_id}", response_model=OperationResponse)
    async def update_record(
        doc_id: str,
        payload: UpdateModel,
        response: Response,
        service: CrudService = Depends(get_service),
    ):
        envelope = await service.update(doc_id, to_document(payload, partial=True))
        response.status_code = envelope.status
        return envelope

    @router.delete("/{doc_id}", response_model=OperationResponse)
    async def delete_record(
        doc_id: str,
        response: Response,
        service: CrudService = Depends(get_service),
    ):
        envelope = await service.delete(doc_id)
        response.status_code = envelope.status
        return envelope

    return router


router = APIRouter()


@router.get("/health")
def health():
    return {"status": "ok"}


for _entity in ENTITIES:
    router.include_router(build_entity_router(_entity))
