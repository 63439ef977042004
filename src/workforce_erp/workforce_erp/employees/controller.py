from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.http import date_value, int_value, json_body, json_errors, to_jsonable
from ..core.enums import EmploymentType, Role
from ..core.exceptions import ValidationError
from ..container import Container


def _employee_json(container: Container, employee) -> dict:
    data = to_jsonable(employee)
    data["current_rate"] = to_jsonable(container.employee_service.current_rate(employee.employee_id, on=today_local()))
    return data


def _house_id(container: Container, value) -> Optional[int]:
    if value is None:
        return None
    return container.finance_service.get_house(int_value(value, "house_id")).house_id


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="api_list_employees")
    @json_errors
    def list_employees():
        role = request.args.get("role")
        try:
            role_filter = Role(role) if role else None
        except ValueError:
            raise ValidationError("Unknown role")
        employees = container.employee_service.list_employees(role=role_filter)
        return jsonify({"success": True, "employees": [_employee_json(container, e) for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="api_hire_employee")
    @json_errors
    def hire_employee():
        data = json_body()
        try:
            employment_type = EmploymentType(data.get("employment_type", EmploymentType.BY_TIME.value))
        except ValueError:
            raise ValidationError("Unknown employment type")

        employee = container.employee_service.hire(
            name=data.get("name", ""),
            email=data.get("email", ""),
            employment_type=employment_type,
            hourly_rate=data.get("hourly_rate", 0),
            start_date=date_value(data.get("start_date"), "start_date"),
            phone=data.get("phone", ""),
            house_id=_house_id(container, data.get("house_id")),
        )
        return jsonify({"success": True, "employee": _employee_json(container, employee)}), 201

    @app.route("/api/employees/<employee_id>/rates", methods=["POST"], endpoint="api_schedule_rate")
    @json_errors
    def schedule_rate(employee_id: str):
        data = json_body()
        employee = container.employee_service.schedule_rate(
            employee_id=employee_id,
            rate=data.get("rate"),
            effective_date=date_value(data.get("effective_date"), "effective_date"),
        )
        return jsonify({"success": True, "employee": _employee_json(container, employee)})
