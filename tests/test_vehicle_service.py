# tests/test_vehicle_service.py
"""Unit tests for vehicle registration and removal."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError
from app.exceptions import Conflict, StoreFailure
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate
from app.services.vehicle_service import create_vehicle, delete_vehicle


def _body(plate="FR-112-SD", name="VSAV 1"):
    return VehicleCreate(name=name, type="Ambulance", fire_station="Caserne Nord", plate_number=plate)


class TestCreateVehicle:
    @pytest.mark.asyncio
    async def test_registers_under_caller(self, db, owner):
        vehicle = await create_vehicle(db, owner, _body())
        assert vehicle.user_id == owner.user_id
        assert vehicle.verification_status is None

    @pytest.mark.asyncio
    async def test_duplicate_plate_other_owner_is_conflict(self, db, owner, other_owner):
        await create_vehicle(db, other_owner, _body())
        with pytest.raises(Conflict) as exc:
            await create_vehicle(db, owner, _body(name="VSAV 2"))
        assert "already registered" in str(exc.value)
        assert exc.value.collection == "vehicles"
        # session still usable after the rollback
        assert db.query(Vehicle).count() == 1

    @pytest.mark.asyncio
    async def test_failed_write_is_store_failure(self, db, owner):
        boom = OperationalError("INSERT INTO vehicles", {}, Exception("connection lost"))
        with patch.object(db, "commit", side_effect=boom):
            with pytest.raises(StoreFailure) as exc:
                await create_vehicle(db, owner, _body())
        assert not isinstance(exc.value, Conflict)
        assert exc.value.operation == "insert"
        assert db.query(Vehicle).count() == 0


class TestDeleteVehicle:
    @pytest.mark.asyncio
    async def test_failed_read_is_store_failure(self, db, owner, make_vehicle):
        v = make_vehicle(owner)
        boom = OperationalError("SELECT vehicles", {}, Exception("connection lost"))
        with patch.object(db, "query", side_effect=boom):
            with pytest.raises(StoreFailure) as exc:
                await delete_vehicle(db, owner, v.id)
        assert exc.value.collection == "vehicles"
        assert exc.value.operation == "select"
        assert db.get(Vehicle, v.id) is not None

    @pytest.mark.asyncio
    async def test_materials_survive_unassigned(self, db, owner, make_vehicle, make_material):
        v = make_vehicle(owner)
        m = make_material(owner, vehicle_id=v.id)
        await delete_vehicle(db, owner, v.id)
        db.refresh(m)
        assert m.vehicle_id is None
