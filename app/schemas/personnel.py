# app/schemas/personnel.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.models.enums import PersonnelStatus


class PersonnelCreate(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    role: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    fire_station: Optional[str] = None
    status: PersonnelStatus = PersonnelStatus.ACTIF
    notes: Optional[str] = None
    photo_url: Optional[str] = None


class PersonnelOut(BaseModel):
    id: str
    first_name: str
    last_name: str
    role: Optional[str]
    contact_number: Optional[str]
    email: Optional[str]
    fire_station: Optional[str]
    status: str
    notes: Optional[str]
    photo_url: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True
