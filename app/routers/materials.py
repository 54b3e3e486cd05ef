# app/routers/materials.py
"""Materials — inventory, vehicle assignment, verification flag."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.auth.context import AuthContext
from app.auth.dependencies import get_auth_context
from app.database import get_db
from app.schemas.material import MaterialAssign, MaterialCreate, MaterialOut
from app.services import material_service
from app.services.assignment_service import assign_material
from app.services.verification_service import toggle_verified

router = APIRouter()


@router.get("/materials", response_model=list[MaterialOut], summary="List materials")
async def list_materials(
    vehicle_id: Optional[str] = None,
    unassigned: bool = Query(False, description="Only materials not loaded on any vehicle"),
    db: Session = Depends(get_db),
    auth: AuthContext = Depends(get_auth_context),
):
    if unassigned:
        return await material_service.list_materials(db, auth, vehicle_id=None)
    if vehicle_id:
        return await material_service.list_materials(db, auth, vehicle_id=vehicle_id)
    return await material_service.list_materials(db, auth)


@router.post("/materials", response_model=MaterialOut, status_code=201, summary="Add a material")
async def add_material(body: MaterialCreate, db: Session = Depends(get_db),
                       auth: AuthContext = Depends(get_auth_context)):
    return await material_service.create_material(db, auth, body)


@router.delete("/materials/{material_id}", summary="Remove a material")
async def remove_material(material_id: str, db: Session = Depends(get_db),
                          auth: AuthContext = Depends(get_auth_context)):
    await material_service.delete_material(db, auth, material_id)
    return {"status": "removed", "material_id": material_id}


@router.put("/materials/{material_id}/vehicle", response_model=MaterialOut,
            summary="Assign a material to a vehicle (null to unassign)")
async def set_material_vehicle(material_id: str, body: MaterialAssign, db: Session = Depends(get_db),
                               auth: AuthContext = Depends(get_auth_context)):
    return await assign_material(db, auth, material_id, body.vehicle_id)


@router.post("/materials/{material_id}/toggle-verified", response_model=MaterialOut,
             summary="Flip the verified flag of a material")
async def toggle_material_verified(material_id: str, db: Session = Depends(get_db),
                                   auth: AuthContext = Depends(get_auth_context)):
    return await toggle_verified(db, auth, material_id)
