# app/services/verification_recorder.py
"""
Records the outcome of a verification pass on the vehicle.

record_verification reads the vehicle's current material set, aggregates
it, and writes verifier / timestamp / status in one update. On any store
failure the vehicle row is left as it was and ValidationFailed is raised.
There is no version check: if two sessions validate the same vehicle,
the later write wins.
"""

from datetime import datetime
from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.exceptions import StoreFailure, ValidationFailed
from app.models.enums import VerificationStatus
from app.schemas.verification import VerificationSummary
from app.services.assignment_service import list_vehicle_materials
from app.services.record_store import OwnerScopedStore
from app.services.status_aggregator import aggregate
from app.utils.logger import get_logger

logger = get_logger(__name__)

NEVER_VERIFIED_LABEL = "never verified"

STATUS_ICONS = {
    VerificationStatus.OK: "check",
    VerificationStatus.ANOMALIE: "alert",
    VerificationStatus.NON_APPLICABLE: "minus",
}


async def record_verification(db: Session, auth: Optional[AuthContext], vehicle_id: str) -> VerificationStatus:
    store = OwnerScopedStore(db, auth)
    vehicle_name = store.get("vehicles", vehicle_id).name

    materials = list_vehicle_materials(store, vehicle_id)
    status = aggregate(materials)

    patch = {
        "verifier_id": store.owner_id,
        "last_verified_at": datetime.utcnow(),
        "verification_status": status.value,
    }
    try:
        store.update("vehicles", vehicle_id, patch)
    except StoreFailure as e:
        logger.error(f"[VALIDATE] vehicle {vehicle_id} ({vehicle_name}) write failed: {e}")
        raise ValidationFailed(vehicle_id, str(e)) from e

    logger.info(
        f"[VALIDATE] vehicle {vehicle_id} ({vehicle_name}) → {status.value} "
        f"by {store.owner_id} over {len(materials)} materials"
    )
    return status


def verification_summary(vehicle, verifier=None) -> VerificationSummary:
    """
    Display data for a vehicle's last verification.
    verifier is the Profile resolved from vehicle.verifier_id (may be None
    if the profile is gone; the verification is still shown).
    """
    if not vehicle.verification_status:
        return VerificationSummary(label=NEVER_VERIFIED_LABEL)

    try:
        status = VerificationStatus(vehicle.verification_status)
    except ValueError:
        # Rows written before the CHECK constraint existed
        logger.warning(f"Vehicle {vehicle.id} has unknown verification status {vehicle.verification_status!r}")
        status = None
    shown = status.value if status else vehicle.verification_status
    verified_by = verifier.username if verifier is not None else None
    when = vehicle.last_verified_at.strftime("%Y-%m-%d %H:%M") if vehicle.last_verified_at else "?"
    return VerificationSummary(
        status=status,
        verified_at=vehicle.last_verified_at,
        verifier_id=vehicle.verifier_id,
        verified_by=verified_by,
        verifier_avatar_url=verifier.avatar_url if verifier is not None else None,
        icon=STATUS_ICONS.get(status),
        label=f"{shown} — verified by {verified_by or 'unknown user'} on {when}",
    )


async def list_vehicles_with_verification(db: Session, auth: Optional[AuthContext]) -> list:
    """Owner's vehicles, newest first, each paired with its verification summary."""
    store = OwnerScopedStore(db, auth)
    vehicles = store.select("vehicles", order_by="created_at", descending=True)
    profiles = store.get_many("profiles", (v.verifier_id for v in vehicles))
    return [(v, verification_summary(v, profiles.get(v.verifier_id))) for v in vehicles]
