# tests/test_assignment_service.py
"""Unit tests for material ↔ vehicle assignment."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError
from app.exceptions import AuthenticationRequired, MaterialUpdateFailed, NotFound
from app.services.assignment_service import assign_material, get_vehicle_materials


class TestAssignMaterial:
    @pytest.mark.asyncio
    async def test_assign_then_reassign_moves_material(self, db, owner, make_vehicle, make_material):
        a, b = make_vehicle(owner), make_vehicle(owner)
        m = make_material(owner)

        await assign_material(db, owner, m.id, a.id)
        assert [x.id for x in await get_vehicle_materials(db, owner, a.id)] == [m.id]

        await assign_material(db, owner, m.id, b.id)
        assert await get_vehicle_materials(db, owner, a.id) == []
        assert [x.id for x in await get_vehicle_materials(db, owner, b.id)] == [m.id]

    @pytest.mark.asyncio
    async def test_unassign_clears_vehicle(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        m = make_material(owner, vehicle_id=v.id)
        updated = await assign_material(db, owner, m.id, None)
        assert updated.vehicle_id is None
        assert await get_vehicle_materials(db, owner, v.id) == []

    @pytest.mark.asyncio
    async def test_only_vehicle_id_changes(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        m = make_material(owner, name="ARI", is_verified=True, quantity=4)
        updated = await assign_material(db, owner, m.id, v.id)
        assert (updated.name, updated.is_verified, updated.quantity) == ("ARI", True, 4)

    @pytest.mark.asyncio
    async def test_cannot_assign_to_other_owners_vehicle(self, db, owner, other_owner, make_vehicle, make_material):
        theirs = make_vehicle(other_owner)
        m = make_material(owner)
        with pytest.raises(NotFound):
            await assign_material(db, owner, m.id, theirs.id)
        db.refresh(m)
        assert m.vehicle_id is None

    @pytest.mark.asyncio
    async def test_cannot_assign_other_owners_material(self, db, owner, other_owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        theirs = make_material(other_owner)
        with pytest.raises(NotFound):
            await assign_material(db, owner, theirs.id, v.id)

    @pytest.mark.asyncio
    async def test_store_failure_names_material(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        m = make_material(owner)
        with patch.object(db, "commit", side_effect=OperationalError("UPDATE", {}, Exception("down"))):
            with pytest.raises(MaterialUpdateFailed) as exc:
                await assign_material(db, owner, m.id, v.id)
        assert exc.value.material_id == m.id
        assert m.id in str(exc.value)
        assert await get_vehicle_materials(db, owner, v.id) == []

    @pytest.mark.asyncio
    async def test_requires_session(self, db, make_material):
        with pytest.raises(AuthenticationRequired):
            await assign_material(db, None, "any", None)


class TestVehicleMaterials:
    @pytest.mark.asyncio
    async def test_sorted_by_name(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        for name in ("Tuyau", "Extincteur", "Lance"):
            make_material(owner, name=name, vehicle_id=v.id)
        names = [m.name for m in await get_vehicle_materials(db, owner, v.id)]
        assert names == ["Extincteur", "Lance", "Tuyau"]

    @pytest.mark.asyncio
    async def test_other_owner_materials_never_returned(self, db, owner, other_owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        mine = make_material(owner, vehicle_id=v.id)
        # Same vehicle_id by coincidence, different owner
        make_material(other_owner, vehicle_id=v.id)
        assert [m.id for m in await get_vehicle_materials(db, owner, v.id)] == [mine.id]
