# app/services/material_service.py
"""Material inventory: create, list, delete (owner-scoped)."""

from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.schemas.material import MaterialCreate
from app.services.record_store import OwnerScopedStore
from app.utils.logger import get_logger

logger = get_logger(__name__)

_UNSET = object()


async def list_materials(db: Session, auth: Optional[AuthContext], vehicle_id=_UNSET) -> list:
    """All materials, or only those on vehicle_id (None → unassigned ones)."""
    store = OwnerScopedStore(db, auth)
    if vehicle_id is _UNSET:
        return store.select("materials", order_by="name")
    return store.select("materials", order_by="name", vehicle_id=vehicle_id)


async def create_material(db: Session, auth: Optional[AuthContext], body: MaterialCreate):
    store = OwnerScopedStore(db, auth)
    if body.vehicle_id is not None:
        # Same-owner check before the material points at the vehicle
        store.get("vehicles", body.vehicle_id)
    values = body.model_dump(mode="json")
    values["is_verified"] = False
    material = store.insert("materials", values)
    logger.info(f"Added material {material.name} x{material.quantity} vehicle={material.vehicle_id}")
    return material


async def delete_material(db: Session, auth: Optional[AuthContext], material_id: str):
    OwnerScopedStore(db, auth).delete("materials", material_id)
