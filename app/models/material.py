# app/models/material.py
"""
Materials table — inventory items, optionally loaded on one vehicle.
vehicle_id is a plain foreign key: deleting a vehicle unassigns its materials,
it never deletes them.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, ForeignKey, CheckConstraint
from app.database import Base
from app.models.enums import MaterialStatus


class Material(Base):
    __tablename__ = "materials"
    __table_args__ = (CheckConstraint("quantity >= 1", name="ck_materials_quantity_positive"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    type = Column(String(100), nullable=False)
    quantity = Column(Integer, default=1, nullable=False)
    location = Column(String(200))
    status = Column(String(50), default=MaterialStatus.DISPONIBLE.value, nullable=False)
    description = Column(Text)
    photo_url = Column(String(500))
    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="SET NULL"), index=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Material {self.id} name={self.name} vehicle={self.vehicle_id} verified={self.is_verified}>"
