from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.datetime_utils import today_local
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import EmploymentType, Role
from ..core.exceptions import NotFoundError
from ..payroll.rates import resolve_rate
from .model import Employee, RateRecord
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def list_employees(self, *, role: Optional[Role] = None) -> Sequence[Employee]:
        items = list(self._employees.list_all())
        if role is not None:
            items = [e for e in items if e.role == role]
        items.sort(key=lambda e: e.name.lower())
        return items

    def hire(
        self,
        *,
        name: str,
        email: str,
        employment_type: EmploymentType,
        hourly_rate: Any,
        start_date: date,
        phone: str = "",
        house_id: Optional[int] = None,
        role: Role = Role.EMPLOYEE,
    ) -> Employee:
        """Create an employee whose first rate takes effect on ``start_date``."""
        name = require_non_empty(name, "Name")
        email = require_non_empty(email, "Email")
        rate = require_non_negative(hourly_rate, "Hourly rate")

        employee = Employee(
            employee_id=uuid.uuid4().hex,
            name=name,
            email=email,
            role=Role(role),
            employment_type=EmploymentType(employment_type),
            hourly_rates=(RateRecord(rate=rate, effective_date=start_date),),
            start_date=start_date,
            phone=(phone or "").strip(),
            house_id=house_id,
        )
        self._employees.add(employee)
        logger.info("Hired employee %s (%s) at %s from %s", employee.employee_id, name, rate, start_date)
        return employee

    def schedule_rate(self, *, employee_id: str, rate: Any, effective_date: date) -> Employee:
        """Add a rate record, possibly future-dated.

        A record already effective on the same date is replaced, so the
        latest write for a date always wins.
        """
        employee = self.get(employee_id)
        amount = require_non_negative(rate, "Hourly rate")

        others = tuple(r for r in employee.hourly_rates if r.effective_date != effective_date)
        if len(others) != len(employee.hourly_rates):
            logger.warning("Replacing rate of employee %s effective %s", employee.employee_id, effective_date)

        updated = replace(employee, hourly_rates=others + (RateRecord(rate=amount, effective_date=effective_date),))
        self._employees.save(updated)
        logger.info("Scheduled rate %s for employee %s from %s", amount, employee.employee_id, effective_date)
        return updated

    def current_rate(self, employee_id: str, *, on: Optional[date] = None) -> Decimal:
        return resolve_rate(self.get(employee_id), on or today_local())
