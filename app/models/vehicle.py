# app/models/vehicle.py
"""
Vehicles table — one row per fire truck / ambulance / utility vehicle.
Carries the outcome of the last verification pass (verifier, time, status).
Those three columns are either all NULL (never verified) or all set.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, CheckConstraint
from app.database import Base
from app.models.enums import VehicleStatus, VerificationStatus

VERIFICATION_STATUSES = ", ".join(f"'{s.value}'" for s in VerificationStatus)


class Vehicle(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        CheckConstraint(
            "(verifier_id IS NULL) = (last_verified_at IS NULL) "
            "AND (last_verified_at IS NULL) = (verification_status IS NULL)",
            name="ck_vehicles_verification_all_or_none",
        ),
        CheckConstraint(
            f"verification_status IS NULL OR verification_status IN ({VERIFICATION_STATUSES})",
            name="ck_vehicles_verification_status",
        ),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    type = Column(String(100), nullable=False)
    fire_station = Column(String(200), nullable=False)
    plate_number = Column(String(50), unique=True, nullable=False, index=True)
    capacity = Column(Integer, default=0, nullable=False)
    equipment_list = Column(Text)
    status = Column(String(50), default=VehicleStatus.OPERATIONNEL.value, nullable=False)
    photo_url = Column(String(500))
    lien = Column(String(500))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Last verification pass
    verifier_id = Column(String(36), ForeignKey("profiles.id"))
    last_verified_at = Column(DateTime)
    verification_status = Column(String(50))   # OK | Anomalie | Non applicable

    def __repr__(self):
        return f"<Vehicle {self.plate_number} name={self.name} verification={self.verification_status}>"
