from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_min_length
from ..core.enums import VehicleStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Vehicle
from .repository import VehicleRepository

logger = logging.getLogger(__name__)


class FleetService:
    def __init__(self, vehicles: VehicleRepository):
        self._vehicles = vehicles

    def get(self, vehicle_id: int) -> Vehicle:
        vehicle = self._vehicles.get_by_id(int(vehicle_id))
        if not vehicle:
            raise NotFoundError(f"Vehicle {vehicle_id} not found")
        return vehicle

    def list_vehicles(self, *, status: Optional[VehicleStatus] = None) -> Sequence[Vehicle]:
        items = list(self._vehicles.list_all())
        if status is not None:
            items = [v for v in items if v.status == status]
        items.sort(key=lambda v: v.name.lower())
        return items

    def register(
        self,
        *,
        name: str,
        plate: str,
        insurance_due: date,
        inspection_due: date,
        status: VehicleStatus = VehicleStatus.AVAILABLE,
    ) -> Vehicle:
        name = require_min_length(name, 2, "Name")
        plate = require_min_length(plate, 5, "Plate")
        self._check_plate_free(plate)

        vehicle_id = self._vehicles.add(
            name=name,
            plate=plate,
            insurance_due=insurance_due,
            inspection_due=inspection_due,
            status=VehicleStatus(status),
        )
        logger.info("Vehicle %s registered (%s)", vehicle_id, plate)
        return self.get(vehicle_id)

    def update(
        self,
        *,
        vehicle_id: int,
        name: Optional[str] = None,
        plate: Optional[str] = None,
        insurance_due: Optional[date] = None,
        inspection_due: Optional[date] = None,
        status: Optional[VehicleStatus] = None,
    ) -> Vehicle:
        vehicle = self.get(vehicle_id)
        if name is not None:
            vehicle = replace(vehicle, name=require_min_length(name, 2, "Name"))
        if plate is not None:
            plate = require_min_length(plate, 5, "Plate")
            self._check_plate_free(plate, exclude_id=vehicle.vehicle_id)
            vehicle = replace(vehicle, plate=plate)
        if insurance_due is not None:
            vehicle = replace(vehicle, insurance_due=insurance_due)
        if inspection_due is not None:
            vehicle = replace(vehicle, inspection_due=inspection_due)
        if status is not None:
            vehicle = replace(vehicle, status=VehicleStatus(status))

        if not self._vehicles.save(vehicle):
            raise ValidationError("Updating vehicle failed")
        return vehicle

    def set_status(self, *, vehicle_id: int, status: VehicleStatus) -> Vehicle:
        return self.update(vehicle_id=vehicle_id, status=status)

    def remove(self, vehicle_id: int) -> None:
        vehicle = self.get(vehicle_id)
        self._vehicles.delete(vehicle.vehicle_id)
        logger.info("Vehicle %s removed (%s)", vehicle.vehicle_id, vehicle.plate)

    def _check_plate_free(self, plate: str, *, exclude_id: Optional[int] = None) -> None:
        wanted = plate.upper()
        for other in self._vehicles.list_all():
            if other.vehicle_id != exclude_id and other.plate.upper() == wanted:
                raise ValidationError(f"Plate {plate} is already registered")
