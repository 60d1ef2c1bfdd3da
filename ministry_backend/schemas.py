"""
Pydantic payload schemas for the ministry backend.

Field names match the stored document fields, so payloads are persisted
as sent. Update schemas make every field optional; only the fields a
client sends are merged into the stored document.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, model_validator


class Address(BaseModel):
    street: str
    number: str
    neighborhood: Optional[str] = None
    city: str
    state: str
    zipCode: str


class Ticket(BaseModel):
    name: str
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)


class MemberRef(BaseModel):
    """Reference to a user embedded in a ministry or scale."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None


class ScaleStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class EventCreate(BaseModel):
    initialDate: datetime
    endDate: datetime
    maxMembers: int = Field(..., ge=1, le=1000)
    tickets: list[Ticket] = Field(default_factory=list)
    address: Address
    description: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    ownerId: str

    @model_validator(mode="after")
    def check_dates(self) -> "EventCreate":
        if self.endDate < self.initialDate:
            raise ValueError("endDate must not be before initialDate")
        return self


class EventUpdate(BaseModel):
    initialDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    maxMembers: Optional[int] = Field(default=None, ge=1, le=1000)
    tickets: Optional[list[Ticket]] = None
    address: Optional[Address] = None
    description: Optional[str] = Field(default=None, min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    ownerId: Optional[str] = None


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    ministeryID: str
    pid: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)
    imgUrl: HttpUrl


class UserUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    ministeryID: Optional[str] = None
    pid: Optional[str] = Field(default=None, min_length=1)
    password: Optional[str] = Field(default=None, min_length=6)
    imgUrl: Optional[HttpUrl] = None


class MinistryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    members: list[MemberRef] = Field(default_factory=list)
    principal: str = Field(..., min_length=1)
    imgUrl: HttpUrl
    pid: Optional[str] = None


class MinistryUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    members: Optional[list[MemberRef]] = None
    principal: Optional[str] = Field(default=None, min_length=1)
    imgUrl: Optional[HttpUrl] = None
    pid: Optional[str] = None


class ScaleCreate(BaseModel):
    date: datetime
    ministeryID: str
    members: list[MemberRef] = Field(default_factory=list)
    status: ScaleStatus = ScaleStatus.PENDING
    pid: Optional[str] = None


class ScaleUpdate(BaseModel):
    date: Optional[datetime] = None
    ministeryID: Optional[str] = None
    members: Optional[list[MemberRef]] = None
    status: Optional[ScaleStatus] = None
    pid: Optional[str] = None


def to_document(payload: BaseModel, *, partial: bool = False) -> dict:
    """
    Serialise a payload into plain JSON types for the document store.

    Partial payloads drop explicit nulls, so an update cannot clear a field
    the create schema requires.
    """
    if partial:
        return payload.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    return payload.model_dump(mode="json", exclude_none=True)
