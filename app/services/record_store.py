# app/services/record_store.py
"""
Owner-scoped access to the four record collections.

Every read and write goes through OwnerScopedStore, which adds the
user_id filter (or stamps user_id on insert) from the AuthContext. Call
sites never filter by owner themselves. Database errors are rolled back
and re-raised as StoreFailure naming the collection and operation.
"""

from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.auth.context import AuthContext, require_auth
from app.exceptions import Conflict, NotFound, StoreFailure
from app.models.material import Material
from app.models.personnel import Personnel
from app.models.profile import Profile
from app.models.vehicle import Vehicle
from app.utils.logger import get_logger

logger = get_logger(__name__)

COLLECTIONS = {
    "vehicles": Vehicle,
    "materials": Material,
    "personnel": Personnel,
    "profiles": Profile,
}

# Profiles belong to every account and are readable by id only.
UNSCOPED_COLLECTIONS = {"profiles"}
PROTECTED_FIELDS = {"id", "user_id"}


class OwnerScopedStore:
    def __init__(self, db: Session, auth: Optional[AuthContext]):
        self.db = db
        self.auth = require_auth(auth)

    @property
    def owner_id(self) -> str:
        return self.auth.user_id

    # ── Helpers ───────────────────────────────────────────────────────────
    def _model(self, collection: str):
        try:
            return COLLECTIONS[collection]
        except KeyError:
            raise ValueError(f"Unknown collection: {collection}")

    def _query(self, collection: str):
        model = self._model(collection)
        q = self.db.query(model)
        if collection not in UNSCOPED_COLLECTIONS:
            q = q.filter(model.user_id == self.owner_id)
        return q

    def _fail(self, exc: SQLAlchemyError, collection: str, operation: str):
        self.db.rollback()
        logger.error(f"[STORE] {operation} on {collection} failed: {exc}")
        if isinstance(exc, IntegrityError):
            raise Conflict(f"{operation} on {collection} violates a constraint",
                           collection=collection, operation=operation) from exc
        raise StoreFailure(f"{operation} on {collection} failed",
                           collection=collection, operation=operation) from exc

    # ── Reads ─────────────────────────────────────────────────────────────
    def select(self, collection: str, order_by=None, descending: bool = False, **filters) -> list:
        """Owner-scoped select with equality filters. A None value matches NULL."""
        model = self._model(collection)
        try:
            q = self._query(collection)
            for field, value in filters.items():
                column = getattr(model, field)
                q = q.filter(column.is_(None) if value is None else column == value)
            if order_by:
                column = getattr(model, order_by)
                q = q.order_by(column.desc() if descending else column.asc())
            return q.all()
        except SQLAlchemyError as e:
            self._fail(e, collection, "select")

    def get(self, collection: str, record_id: str):
        """Return one owner-scoped row, or raise NotFound."""
        model = self._model(collection)
        try:
            row = self._query(collection).filter(model.id == record_id).first()
        except SQLAlchemyError as e:
            self._fail(e, collection, "select")
        if row is None:
            raise NotFound(collection, record_id)
        return row

    def get_many(self, collection: str, ids) -> dict:
        """Map id → row for the given ids (missing ids are simply absent)."""
        ids = {i for i in ids if i}
        if not ids:
            return {}
        model = self._model(collection)
        try:
            rows = self._query(collection).filter(model.id.in_(ids)).all()
        except SQLAlchemyError as e:
            self._fail(e, collection, "select")
        return {row.id: row for row in rows}

    # ── Writes ────────────────────────────────────────────────────────────
    def insert(self, collection: str, values: dict):
        """Insert a row owned by the caller. Any user_id in values is replaced."""
        model = self._model(collection)
        row = model(**{**values, "user_id": self.owner_id})
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self._fail(e, collection, "insert")
        logger.info(f"[STORE] insert {collection} id={row.id}")
        return row

    def update(self, collection: str, record_id: str, patch: dict):
        """
        Apply patch to one owner-scoped row in a single commit.
        Either every field is written or, on failure, none is.
        """
        bad = PROTECTED_FIELDS & set(patch)
        if bad:
            raise ValueError(f"Cannot patch protected fields: {sorted(bad)}")
        row = self.get(collection, record_id)
        try:
            for field, value in patch.items():
                setattr(row, field, value)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self._fail(e, collection, "update")
        logger.info(f"[STORE] update {collection} id={record_id} fields={sorted(patch)}")
        return row

    def delete(self, collection: str, record_id: str) -> None:
        row = self.get(collection, record_id)
        try:
            self.db.delete(row)
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail(e, collection, "delete")
        logger.info(f"[STORE] delete {collection} id={record_id}")
