# app/exceptions.py
"""
Exception hierarchy for the fleet service.
Services raise these; app.main maps them to HTTP responses.
"""

from typing import Optional


class FleetError(Exception):
    """Base exception for all fleet service errors."""


class AuthenticationRequired(FleetError):
    """No authenticated identity. Raised before any store call."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class NotFound(FleetError):
    """Referenced row does not exist for the requesting owner."""

    def __init__(self, collection: str, record_id: str):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection} {record_id} not found")


class StoreFailure(FleetError):
    """Database error on a store operation (network, constraint, server)."""

    def __init__(self, message: str, *, collection: str = "", operation: str = ""):
        self.collection = collection
        self.operation = operation
        super().__init__(message)


class Conflict(StoreFailure):
    """Unique constraint violated (e.g. duplicate plate number)."""


class MaterialUpdateFailed(FleetError):
    """A material write (assignment or verification flag) failed. Names the material."""

    def __init__(self, material_id: str, reason: str):
        self.material_id = material_id
        self.reason = reason
        super().__init__(f"update failed for material {material_id}: {reason}")


class ValidationFailed(FleetError):
    """Writing the verification outcome onto a vehicle failed."""

    def __init__(self, vehicle_id: str, reason: Optional[str] = None):
        self.vehicle_id = vehicle_id
        self.reason = reason
        msg = f"validation failed for vehicle {vehicle_id}"
        super().__init__(f"{msg}: {reason}" if reason else msg)


class OperationDiscarded(FleetError):
    """The caller discarded an in-flight operation before it completed."""
