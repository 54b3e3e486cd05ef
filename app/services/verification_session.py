# app/services/verification_session.py
"""
State of one vehicle's verification pass (the vehicle detail view).

Holds the vehicle and its material list in memory. Every action writes
to the store first and only touches the local list once the write is
confirmed, so a failed write leaves local state as it was.
Actions are issued as CancellableOperation handles; close() discards any
still in flight so late results never reach a torn-down session.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.auth.context import AuthContext
from app.models.enums import VerificationStatus
from app.schemas.material import MaterialOut
from app.schemas.vehicle import VehicleOut
from app.services import assignment_service, verification_recorder, verification_service
from app.services.cancellation import CancellableOperation
from app.services.record_store import OwnerScopedStore
from app.services.status_aggregator import VerificationProgress, aggregate, progress
from app.utils.logger import get_logger

logger = get_logger(__name__)


class VerificationSession:
    def __init__(self, db: Session, auth: Optional[AuthContext], vehicle_id: str):
        self.db = db
        self.auth = auth
        self.vehicle_id = vehicle_id
        self.vehicle: Optional[VehicleOut] = None
        self.materials: list[MaterialOut] = []
        self.closed = False
        self._pending: set[CancellableOperation] = set()

    # ── Derived ───────────────────────────────────────────────────────────
    @property
    def progress(self) -> VerificationProgress:
        return progress(self.materials)

    @property
    def preview_status(self) -> VerificationStatus:
        """Status a validation would record right now, computed locally."""
        return aggregate(self.materials)

    # ── Actions ───────────────────────────────────────────────────────────
    def _issue(self, coro, on_result, name: str) -> CancellableOperation:
        if self.closed:
            coro.close()
            raise RuntimeError(f"{name} issued on a closed verification session")
        op = CancellableOperation(coro, on_result=on_result, name=name)
        self._pending.add(op)
        op.add_done_callback(lambda _op: self._pending.discard(op))
        return op

    def load(self) -> CancellableOperation:
        async def _load():
            store = OwnerScopedStore(self.db, self.auth)
            vehicle = store.get("vehicles", self.vehicle_id)
            materials = assignment_service.list_vehicle_materials(store, self.vehicle_id)
            return VehicleOut.model_validate(vehicle), [MaterialOut.model_validate(m) for m in materials]

        def _apply(result):
            self.vehicle, self.materials = result

        return self._issue(_load(), _apply, f"load vehicle {self.vehicle_id}")

    def toggle(self, material_id: str) -> CancellableOperation:
        async def _toggle():
            material = await verification_service.toggle_verified(self.db, self.auth, material_id)
            return MaterialOut.model_validate(material)

        def _apply(updated: MaterialOut):
            self.materials = [updated if m.id == updated.id else m for m in self.materials]

        return self._issue(_toggle(), _apply, f"toggle material {material_id}")

    def assign(self, material_id: str, vehicle_id: Optional[str]) -> CancellableOperation:
        async def _assign():
            material = await assignment_service.assign_material(self.db, self.auth, material_id, vehicle_id)
            return MaterialOut.model_validate(material)

        def _apply(updated: MaterialOut):
            others = [m for m in self.materials if m.id != updated.id]
            if updated.vehicle_id == self.vehicle_id:
                others.append(updated)
                others.sort(key=lambda m: m.name)
            self.materials = others

        return self._issue(_assign(), _apply, f"assign material {material_id}")

    def validate(self) -> CancellableOperation:
        """Record the verification. The handle resolves to (status, refreshed vehicle)."""
        async def _validate():
            status = await verification_recorder.record_verification(self.db, self.auth, self.vehicle_id)
            vehicle = OwnerScopedStore(self.db, self.auth).get("vehicles", self.vehicle_id)
            return status, VehicleOut.model_validate(vehicle)

        def _apply(result):
            _status, self.vehicle = result

        return self._issue(_validate(), _apply, f"validate vehicle {self.vehicle_id}")

    def close(self):
        """Tear down: late results of in-flight operations are dropped."""
        self.closed = True
        for op in list(self._pending):
            op.discard()
        self._pending.clear()
