# app/routers/personnel.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from app.auth.context import AuthContext
from app.auth.dependencies import get_auth_context
from app.database import get_db
from app.schemas.personnel import PersonnelCreate, PersonnelOut
from app.services import personnel_service

router = APIRouter()


@router.get("/personnel", response_model=list[PersonnelOut], summary="List personnel — optional search")
async def list_personnel(search: Optional[str] = None, db: Session = Depends(get_db),
                         auth: AuthContext = Depends(get_auth_context)):
    """Search matches first/last name, role, station and status (case-insensitive)."""
    return await personnel_service.list_personnel(db, auth, search)


@router.post("/personnel", response_model=PersonnelOut, status_code=201, summary="Add a personnel member")
async def add_personnel(body: PersonnelCreate, db: Session = Depends(get_db),
                        auth: AuthContext = Depends(get_auth_context)):
    return await personnel_service.create_personnel(db, auth, body)
