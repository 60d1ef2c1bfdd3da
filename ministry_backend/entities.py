"""
Per-entity configuration: which collection an entity lives in and which
payload schemas its routes accept.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel

from ministry_backend.schemas import (
    EventCreate,
    EventUpdate,
    MinistryCreate,
    MinistryUpdate,
    ScaleCreate,
    ScaleUpdate,
    UserCreate,
    UserUpdate,
)

# Firestore collection names. Collections are created on first write.
EVENTS_COLLECTION = "events"
USERS_COLLECTION = "users"
MINISTRIES_COLLECTION = "ministerys"
SCALES_COLLECTION = "scales"


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    collection: str
    create_model: type[BaseModel]
    update_model: type[BaseModel]


EVENTS = EntityDefinition(
    name="events",
    collection=EVENTS_COLLECTION,
    create_model=EventCreate,
    update_model=EventUpdate,
)
USERS = EntityDefinition(
    name="users",
    collection=USERS_COLLECTION,
    create_model=UserCreate,
    update_model=UserUpdate,
)
MINISTRIES = EntityDefinition(
    name="ministerys",
    collection=MINISTRIES_COLLECTION,
    create_model=MinistryCreate,
    update_model=MinistryUpdate,
)
SCALES = EntityDefinition(
    name="scales",
    collection=SCALES_COLLECTION,
    create_model=ScaleCreate,
    update_model=ScaleUpdate,
)

ENTITIES = (EVENTS, USERS, MINISTRIES, SCALES)
