# app/services/personnel_service.py
"""Personnel records. Plain owner-scoped CRUD plus free-text search."""

from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.schemas.personnel import PersonnelCreate
from app.services.record_store import OwnerScopedStore

SEARCH_FIELDS = ("first_name", "last_name", "role", "fire_station", "status")


def matches(member, term: str) -> bool:
    term = term.lower()
    return any(term in (getattr(member, f) or "").lower() for f in SEARCH_FIELDS)


async def list_personnel(db: Session, auth: Optional[AuthContext], search: Optional[str] = None) -> list:
    store = OwnerScopedStore(db, auth)
    members = store.select("personnel", order_by="created_at", descending=True)
    if search:
        members = [m for m in members if matches(m, search)]
    return members


async def create_personnel(db: Session, auth: Optional[AuthContext], body: PersonnelCreate):
    return OwnerScopedStore(db, auth).insert("personnel", body.model_dump(mode="json"))
