# app/schemas/vehicle.py
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.models.enums import VehicleStatus
from app.schemas.material import MaterialOut
from app.schemas.verification import VerificationProgressOut, VerificationSummary


class VehicleCreate(BaseModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    fire_station: str = Field(min_length=1)
    plate_number: str = Field(min_length=1)
    capacity: int = Field(default=0, ge=0)
    equipment_list: Optional[str] = None
    status: VehicleStatus = VehicleStatus.OPERATIONNEL
    photo_url: Optional[str] = None
    lien: Optional[str] = None


class VehicleOut(BaseModel):
    id: str
    name: str
    type: str
    fire_station: str
    plate_number: str
    capacity: int
    equipment_list: Optional[str]
    status: str
    photo_url: Optional[str]
    lien: Optional[str]
    created_at: datetime
    verifier_id: Optional[str]
    last_verified_at: Optional[datetime]
    verification_status: Optional[str]

    class Config:
        from_attributes = True


class VehicleListItem(VehicleOut):
    verification: VerificationSummary


class VehicleDetail(BaseModel):
    vehicle: VehicleOut
    materials: list[MaterialOut]
    progress: VerificationProgressOut
    verification: VerificationSummary
