# app/routers/vehicles.py
"""Vehicles — registration, listing with last verification, detail view, validation."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.auth.context import AuthContext
from app.auth.dependencies import get_auth_context
from app.database import get_db
from app.schemas.material import MaterialOut
from app.schemas.vehicle import VehicleCreate, VehicleDetail, VehicleListItem, VehicleOut
from app.schemas.verification import VerificationProgressOut, VerificationResult
from app.services import vehicle_service
from app.services.assignment_service import list_vehicle_materials
from app.services.record_store import OwnerScopedStore
from app.services.status_aggregator import progress
from app.services.verification_recorder import (
    list_vehicles_with_verification,
    record_verification,
    verification_summary,
)

router = APIRouter()


def _progress_out(materials) -> VerificationProgressOut:
    p = progress(materials)
    return VerificationProgressOut(verified=p.verified, total=p.total, percent=p.percent, display=str(p))


@router.get("/vehicles", response_model=list[VehicleListItem], summary="List vehicles with last verification")
async def list_vehicles(db: Session = Depends(get_db), auth: AuthContext = Depends(get_auth_context)):
    rows = await list_vehicles_with_verification(db, auth)
    return [
        VehicleListItem(**VehicleOut.model_validate(v).model_dump(), verification=summary)
        for v, summary in rows
    ]


@router.post("/vehicles", response_model=VehicleOut, status_code=201, summary="Register a new vehicle")
async def register_vehicle(body: VehicleCreate, db: Session = Depends(get_db),
                           auth: AuthContext = Depends(get_auth_context)):
    return await vehicle_service.create_vehicle(db, auth, body)


@router.get("/vehicles/{vehicle_id}", response_model=VehicleDetail, summary="Vehicle detail with materials")
async def get_vehicle(vehicle_id: str, db: Session = Depends(get_db),
                      auth: AuthContext = Depends(get_auth_context)):
    store = OwnerScopedStore(db, auth)
    vehicle = store.get("vehicles", vehicle_id)
    materials = list_vehicle_materials(store, vehicle_id)
    verifier = store.get_many("profiles", [vehicle.verifier_id]).get(vehicle.verifier_id)
    return VehicleDetail(
        vehicle=VehicleOut.model_validate(vehicle),
        materials=[MaterialOut.model_validate(m) for m in materials],
        progress=_progress_out(materials),
        verification=verification_summary(vehicle, verifier),
    )


@router.delete("/vehicles/{vehicle_id}", summary="Remove a vehicle")
async def remove_vehicle(vehicle_id: str, db: Session = Depends(get_db),
                         auth: AuthContext = Depends(get_auth_context)):
    await vehicle_service.delete_vehicle(db, auth, vehicle_id)
    return {"status": "removed", "vehicle_id": vehicle_id}


@router.post("/vehicles/{vehicle_id}/validate", response_model=VerificationResult,
             summary="Record the verification pass for a vehicle")
async def validate_vehicle(vehicle_id: str, db: Session = Depends(get_db),
                           auth: AuthContext = Depends(get_auth_context)):
    """Aggregates the vehicle's material flags and stores verifier, time and status."""
    status = await record_verification(db, auth, vehicle_id)
    vehicle = OwnerScopedStore(db, auth).get("vehicles", vehicle_id)
    return VerificationResult(
        vehicle_id=vehicle_id,
        status=status,
        verified_at=vehicle.last_verified_at,
        verifier_id=vehicle.verifier_id,
        message=f"Verification complete. Status: {status.value}",
    )
