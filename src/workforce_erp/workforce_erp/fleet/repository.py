from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import VehicleStatus
from .model import Vehicle


class VehicleRepository(Protocol):
    def list_all(self) -> Sequence[Vehicle]:
        raise NotImplementedError

    def get_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        raise NotImplementedError

    def add(
        self,
        *,
        name: str,
        plate: str,
        insurance_due: date,
        inspection_due: date,
        status: VehicleStatus,
    ) -> int:
        raise NotImplementedError

    def save(self, vehicle: Vehicle) -> bool:
        raise NotImplementedError

    def delete(self, vehicle_id: int) -> bool:
        raise NotImplementedError
