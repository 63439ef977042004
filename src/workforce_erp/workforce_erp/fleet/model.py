from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import VehicleStatus


@dataclass(frozen=True)
class Vehicle:
    """Company vehicle with its insurance and inspection due dates."""

    vehicle_id: int
    name: str
    plate: str
    insurance_due: date
    inspection_due: date
    status: VehicleStatus = VehicleStatus.AVAILABLE
