# app/services/assignment_service.py
"""
Material ↔ vehicle assignment.
A material belongs to at most one vehicle (materials.vehicle_id, nullable).
Both sides must belong to the same owner; this is checked here before the
write because the database has no constraint for it.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.exceptions import MaterialUpdateFailed, StoreFailure
from app.services.record_store import OwnerScopedStore
from app.utils.logger import get_logger

logger = get_logger(__name__)


def list_vehicle_materials(store: OwnerScopedStore, vehicle_id: str) -> list:
    """Materials loaded on vehicle_id, owner-scoped, sorted by name."""
    return store.select("materials", order_by="name", vehicle_id=vehicle_id)


async def get_vehicle_materials(db: Session, auth: Optional[AuthContext], vehicle_id: str) -> list:
    store = OwnerScopedStore(db, auth)
    return list_vehicle_materials(store, vehicle_id)


async def assign_material(db: Session, auth: Optional[AuthContext], material_id: str,
                          vehicle_id: Optional[str]):
    """
    Set (or clear, with vehicle_id=None) the vehicle a material is loaded on.
    Only vehicle_id changes. Returns the updated material.
    """
    store = OwnerScopedStore(db, auth)
    material = store.get("materials", material_id)

    if vehicle_id is not None:
        # Raises NotFound for another owner's vehicle as well as a missing one
        store.get("vehicles", vehicle_id)

    previous = material.vehicle_id
    try:
        material = store.update("materials", material_id, {"vehicle_id": vehicle_id})
    except StoreFailure as e:
        logger.error(f"[ASSIGN] material {material_id} → {vehicle_id} failed: {e}")
        raise MaterialUpdateFailed(material_id, str(e)) from e

    logger.info(f"[ASSIGN] material {material_id}: {previous} → {vehicle_id}")
    return material


def unassign_vehicle_materials(store: OwnerScopedStore, vehicle_id: str) -> int:
    """Detach every material from vehicle_id (staged, committed by the caller's next write)."""
    materials = list_vehicle_materials(store, vehicle_id)
    for material in materials:
        material.vehicle_id = None
    return len(materials)
