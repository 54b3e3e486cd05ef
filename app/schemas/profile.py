# app/schemas/profile.py
from pydantic import BaseModel
from typing import Optional


class ProfileOut(BaseModel):
    id: str
    username: Optional[str]
    avatar_url: Optional[str]

    class Config:
        from_attributes = True
