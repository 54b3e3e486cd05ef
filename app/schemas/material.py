# app/schemas/material.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.models.enums import MaterialStatus


class MaterialCreate(BaseModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    quantity: int = Field(default=1, ge=1)
    location: Optional[str] = None
    status: MaterialStatus = MaterialStatus.DISPONIBLE
    description: Optional[str] = None
    photo_url: Optional[str] = None
    vehicle_id: Optional[str] = None


class MaterialAssign(BaseModel):
    vehicle_id: Optional[str] = None     # null → unassign


class MaterialOut(BaseModel):
    id: str
    name: str
    type: str
    quantity: int
    location: Optional[str]
    status: str
    description: Optional[str]
    photo_url: Optional[str]
    vehicle_id: Optional[str]
    is_verified: bool
    created_at: datetime

    class Config:
        from_attributes = True
