# app/routers/profiles.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.auth.context import AuthContext
from app.auth.dependencies import get_auth_context
from app.database import get_db
from app.schemas.profile import ProfileOut
from app.services.record_store import OwnerScopedStore

router = APIRouter()


@router.get("/me", response_model=ProfileOut, summary="Current user's profile")
def get_me(db: Session = Depends(get_db), auth: AuthContext = Depends(get_auth_context)):
    return OwnerScopedStore(db, auth).get("profiles", auth.user_id)
