# app/services/status_aggregator.py
"""
Derives a vehicle's verification status from its materials' flags.
Pure functions: no DB access, no side effects.

    no materials          → Non applicable
    all materials checked → OK
    anything else         → Anomalie
"""

from dataclasses import dataclass
from typing import Iterable

from app.models.enums import VerificationStatus


@dataclass(frozen=True)
class VerificationProgress:
    verified: int
    total: int

    @property
    def percent(self) -> float:
        return (self.verified / self.total) * 100 if self.total else 0

    def __str__(self):
        return f"{self.verified}/{self.total} ({round(self.percent)}%)"


def aggregate(materials: Iterable) -> VerificationStatus:
    """Status for a set of materials (anything with an is_verified attribute)."""
    flags = [bool(m.is_verified) for m in materials]
    if not flags:
        return VerificationStatus.NON_APPLICABLE
    if all(flags):
        return VerificationStatus.OK
    return VerificationStatus.ANOMALIE


def progress(materials: Iterable) -> VerificationProgress:
    flags = [bool(m.is_verified) for m in materials]
    return VerificationProgress(verified=sum(flags), total=len(flags))
