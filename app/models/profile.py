# app/models/profile.py
"""
Public profile of an account. Rows are created by the auth provider's
sign-up hook; this service only reads them to label "verified by".
"""

from sqlalchemy import Column, String
from app.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)    # same id as the auth account
    username = Column(String(100))
    avatar_url = Column(String(500))

    def __repr__(self):
        return f"<Profile {self.id} username={self.username}>"
