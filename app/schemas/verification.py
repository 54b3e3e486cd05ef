# app/schemas/verification.py
from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.models.enums import VerificationStatus


class VerificationSummary(BaseModel):
    """What the vehicle listing shows for the last verification pass."""
    status: Optional[VerificationStatus] = None
    verified_at: Optional[datetime] = None
    verifier_id: Optional[str] = None
    verified_by: Optional[str] = None
    verifier_avatar_url: Optional[str] = None
    icon: Optional[str] = None        # check | alert | minus (None = never verified)
    label: str


class VerificationProgressOut(BaseModel):
    verified: int
    total: int
    percent: float
    display: str


class VerificationResult(BaseModel):
    vehicle_id: str
    status: VerificationStatus
    verified_at: datetime
    verifier_id: str
    message: str
