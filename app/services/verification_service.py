# app/services/verification_service.py
"""
Per-material verification flag.
toggle_verified flips is_verified on one material and nothing else; the
vehicle's stored status only changes when the verification is recorded.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.exceptions import MaterialUpdateFailed, StoreFailure
from app.services.record_store import OwnerScopedStore
from app.utils.logger import get_logger

logger = get_logger(__name__)


async def toggle_verified(db: Session, auth: Optional[AuthContext], material_id: str):
    store = OwnerScopedStore(db, auth)
    material = store.get("materials", material_id)
    new_value = not material.is_verified
    try:
        material = store.update("materials", material_id, {"is_verified": new_value})
    except StoreFailure as e:
        logger.error(f"[VERIFY] toggle on material {material_id} failed: {e}")
        raise MaterialUpdateFailed(material_id, str(e)) from e

    logger.info(f"[VERIFY] material {material_id} ({material.name}) verified={new_value}")
    return material
