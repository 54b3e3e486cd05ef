# app/models/personnel.py
"""Personnel table — firefighters and staff. Not involved in verification."""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Text
from app.database import Base
from app.models.enums import PersonnelStatus


class Personnel(Base):
    __tablename__ = "personnel"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), nullable=False, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    role = Column(String(100))
    contact_number = Column(String(50))
    email = Column(String(200))
    fire_station = Column(String(200))
    status = Column(String(50), default=PersonnelStatus.ACTIF.value, nullable=False)
    notes = Column(Text)
    photo_url = Column(String(500))
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<Personnel {self.first_name} {self.last_name} role={self.role}>"
