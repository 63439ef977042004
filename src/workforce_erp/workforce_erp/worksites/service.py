from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_min_length
from ..core.enums import Role, WorksiteKind
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import PlanningEntry, Worksite
from .repository import PlanningRepository, WorksiteRepository

logger = logging.getLogger(__name__)


class WorksiteService:
    """Worksites and the day-by-day planning of employees onto them."""

    def __init__(
        self,
        worksites: WorksiteRepository,
        planning: PlanningRepository,
        employees: EmployeeRepository,
    ):
        self._worksites = worksites
        self._planning = planning
        self._employees = employees

    def get(self, worksite_id: int) -> Worksite:
        worksite = self._worksites.get_by_id(int(worksite_id))
        if not worksite:
            raise NotFoundError(f"Worksite {worksite_id} not found")
        return worksite

    def list_worksites(self, *, active_only: bool = False) -> Sequence[Worksite]:
        items = list(self._worksites.list_all())
        if active_only:
            items = [w for w in items if w.is_active]
        items.sort(key=lambda w: w.name.lower())
        return items

    def add(self, *, name: str, address: str, kind: WorksiteKind) -> Worksite:
        worksite_id = self._worksites.add(
            name=require_min_length(name, 2, "Name"),
            address=require_min_length(address, 5, "Address"),
            kind=WorksiteKind(kind),
        )
        logger.info("Worksite %s added", worksite_id)
        return self.get(worksite_id)

    def update(
        self,
        *,
        worksite_id: int,
        name: Optional[str] = None,
        address: Optional[str] = None,
        kind: Optional[WorksiteKind] = None,
    ) -> Worksite:
        # planning points at the id, so a rename needs no planning changes
        worksite = self.get(worksite_id)
        if name is not None:
            worksite = replace(worksite, name=require_min_length(name, 2, "Name"))
        if address is not None:
            worksite = replace(worksite, address=require_min_length(address, 5, "Address"))
        if kind is not None:
            worksite = replace(worksite, kind=WorksiteKind(kind))
        self._save(worksite)
        return worksite

    def set_active(self, *, worksite_id: int, active: bool) -> Worksite:
        """Activate or deactivate a worksite.

        Deactivating removes every planning entry that sends someone there;
        those employees show up as not planned again.
        """
        worksite = replace(self.get(worksite_id), is_active=bool(active))
        self._save(worksite)
        if not worksite.is_active:
            dropped = self._planning.remove_worksite(worksite.worksite_id)
            logger.info("Worksite %s deactivated, %s planning entries removed", worksite.worksite_id, dropped)
        return worksite

    def _save(self, worksite: Worksite) -> None:
        if not self._worksites.save(worksite):
            raise ValidationError("Updating worksite failed")

    def assign(self, *, work_date: date, employee_id: str, worksite_id: Optional[int]) -> PlanningEntry:
        """Plan an employee for a day; ``worksite_id=None`` plans a day off."""
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        if employee.role != Role.EMPLOYEE:
            raise ValidationError("Only employees can be planned")
        if worksite_id is not None and not self.get(worksite_id).is_active:
            raise ValidationError("Cannot plan on an inactive worksite")

        entry = PlanningEntry(
            work_date=work_date,
            employee_id=employee.employee_id,
            worksite_id=int(worksite_id) if worksite_id is not None else None,
        )
        self._planning.upsert(entry)
        return entry

    def unassign(self, *, work_date: date, employee_id: str) -> bool:
        return self._planning.remove(work_date, str(employee_id))

    def planning(self, *, start: date, end: date) -> Sequence[PlanningEntry]:
        if end < start:
            raise ValidationError("End date must be on or after start date")
        rows = list(self._planning.list_range(start, end))
        rows.sort(key=lambda e: (e.work_date, e.employee_id))
        return rows
