# app/services/vehicle_service.py
"""
Vehicle registration and lookup helpers.
Used by the vehicles router. Verification lives in verification_recorder.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.exceptions import Conflict
from app.schemas.vehicle import VehicleCreate
from app.services.assignment_service import unassign_vehicle_materials
from app.services.record_store import OwnerScopedStore
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def create_vehicle(db: Session, auth: Optional[AuthContext], body: VehicleCreate):
    store = OwnerScopedStore(db, auth)
    try:
        vehicle = store.insert("vehicles", body.model_dump(mode="json"))
    except Conflict as e:
        # plate_number is unique across the whole store, not per owner
        raise Conflict(f"Plate {body.plate_number} already registered",
                       collection="vehicles", operation="insert") from e
    logger.info(f"Registered vehicle {vehicle.name} ({vehicle.plate_number})")
    return vehicle


async def delete_vehicle(db: Session, auth: Optional[AuthContext], vehicle_id: str):
    """Delete a vehicle. Its materials stay in inventory, unassigned."""
    store = OwnerScopedStore(db, auth)
    vehicle = store.get("vehicles", vehicle_id)
    detached = unassign_vehicle_materials(store, vehicle_id)
    store.delete("vehicles", vehicle_id)
    logger.info(f"Removed vehicle {vehicle.plate_number}, {detached} materials unassigned")
