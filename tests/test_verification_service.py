# tests/test_verification_service.py
"""Unit tests for the per-material verification toggle."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import MagicMock, patch
from sqlalchemy.exc import OperationalError
from app.exceptions import AuthenticationRequired, MaterialUpdateFailed, NotFound
from app.schemas.material import MaterialCreate
from app.services.material_service import create_material
from app.services.verification_service import toggle_verified


class TestToggleVerified:
    @pytest.mark.asyncio
    async def test_new_material_starts_unverified(self, db, owner):
        m = await create_material(db, owner, MaterialCreate(name="ARI", type="Respiratoire"))
        assert m.is_verified is False

    @pytest.mark.asyncio
    async def test_toggle_flips(self, db, owner, make_material):
        m = make_material(owner)
        assert (await toggle_verified(db, owner, m.id)).is_verified is True

    @pytest.mark.asyncio
    async def test_toggle_twice_restores(self, db, owner, make_material):
        for start in (False, True):
            m = make_material(owner, name=f"m-{start}", is_verified=start)
            await toggle_verified(db, owner, m.id)
            assert (await toggle_verified(db, owner, m.id)).is_verified is start

    @pytest.mark.asyncio
    async def test_only_one_material_changes(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        a = make_material(owner, name="A", vehicle_id=v.id)
        b = make_material(owner, name="B", vehicle_id=v.id)
        await toggle_verified(db, owner, a.id)
        db.refresh(b)
        assert b.is_verified is False

    @pytest.mark.asyncio
    async def test_does_not_write_vehicle_status(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        m = make_material(owner, vehicle_id=v.id)
        await toggle_verified(db, owner, m.id)
        db.refresh(v)
        assert v.verification_status is None
        assert v.last_verified_at is None
        assert v.verifier_id is None

    @pytest.mark.asyncio
    async def test_other_owner_material_not_found(self, db, owner, other_owner, make_material):
        theirs = make_material(other_owner)
        with pytest.raises(NotFound):
            await toggle_verified(db, owner, theirs.id)

    @pytest.mark.asyncio
    async def test_store_failure_keeps_flag(self, db, owner, make_material):
        m = make_material(owner)
        with patch.object(db, "commit", side_effect=OperationalError("UPDATE", {}, Exception("down"))):
            with pytest.raises(MaterialUpdateFailed):
                await toggle_verified(db, owner, m.id)
        db.refresh(m)
        assert m.is_verified is False

    @pytest.mark.asyncio
    async def test_no_session_no_query(self):
        db = MagicMock()
        with pytest.raises(AuthenticationRequired):
            await toggle_verified(db, None, "m-1")
        db.query.assert_not_called()
