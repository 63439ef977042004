from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import VehicleStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Vehicle
from .repository import VehicleRepository

_COLUMNS = "vehicle_id, name, plate, insurance_due, inspection_due, status"


def _to_vehicle(r: dict) -> Vehicle:
    return Vehicle(
        vehicle_id=int(r["vehicle_id"]),
        name=r["name"],
        plate=r["plate"],
        insurance_due=r["insurance_due"],
        inspection_due=r["inspection_due"],
        status=VehicleStatus(r["status"]),
    )


class MySQLVehicleRepository(VehicleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Vehicle]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM vehicles ORDER BY name")
            return [_to_vehicle(r) for r in fetchall(cur)]

    def get_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM vehicles WHERE vehicle_id=%s", (int(vehicle_id),))
            r = fetchone(cur)
            return _to_vehicle(r) if r else None

    def add(
        self,
        *,
        name: str,
        plate: str,
        insurance_due: date,
        inspection_due: date,
        status: VehicleStatus,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO vehicles(name, plate, insurance_due, inspection_due, status) VALUES(%s,%s,%s,%s,%s)",
                (name, plate, insurance_due, inspection_due, status.value),
            )
            return int(cur.lastrowid)

    def save(self, vehicle: Vehicle) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE vehicles
                SET name=%s, plate=%s, insurance_due=%s, inspection_due=%s, status=%s
                WHERE vehicle_id=%s
                """,
                (
                    vehicle.name,
                    vehicle.plate,
                    vehicle.insurance_due,
                    vehicle.inspection_due,
                    vehicle.status.value,
                    vehicle.vehicle_id,
                ),
            )
            if cur.rowcount > 0:
                return True
            # unchanged rows report 0 affected rows
            cur.execute("SELECT 1 AS found FROM vehicles WHERE vehicle_id=%s", (vehicle.vehicle_id,))
            return fetchone(cur) is not None

    def delete(self, vehicle_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM vehicles WHERE vehicle_id=%s", (int(vehicle_id),))
            return cur.rowcount > 0
