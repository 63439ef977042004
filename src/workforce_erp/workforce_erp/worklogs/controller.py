from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import (
    bool_value,
    date_value,
    json_body,
    json_errors,
    optional_json_body,
    time_value,
    to_jsonable,
)
from ..common.validators import require_non_negative_int
from ..core.exceptions import ValidationError
from ..container import Container
from .model import OutputDetail, TimeDetail, WorkLogDetail


def _detail_from(data: dict) -> WorkLogDetail:
    detail = data.get("detail")
    if not isinstance(detail, dict):
        raise ValidationError("detail is required")
    if "start" in detail or "end" in detail:
        return TimeDetail(start=time_value(detail.get("start"), "start"), end=time_value(detail.get("end"), "end"))
    return OutputDetail(
        departures=require_non_negative_int(detail.get("departures"), "departures"),
        stayovers=require_non_negative_int(detail.get("stayovers"), "stayovers"),
        extra_beds=require_non_negative_int(detail.get("extra_beds"), "extra_beds"),
        extra_minutes=require_non_negative_int(detail.get("extra_minutes"), "extra_minutes"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/api/worklogs", methods=["GET"], endpoint="api_list_worklogs")
    @json_errors
    def list_worklogs():
        employee_id = request.args.get("employee_id", "").strip()
        if not employee_id:
            raise ValidationError("Query parameter 'employee_id' is required")
        start = request.args.get("start")
        end = request.args.get("end")
        rows = container.work_log_service.list_for_employee(
            employee_id,
            start=date_value(start, "start") if start else None,
            end=date_value(end, "end") if end else None,
        )
        return jsonify({"success": True, "work_logs": to_jsonable(list(rows))})

    @app.route("/api/worklogs", methods=["POST"], endpoint="api_submit_worklog")
    @json_errors
    def submit_worklog():
        data = json_body()
        entry = container.work_log_service.submit(
            employee_id=str(data.get("employee_id", "")),
            work_date=date_value(data.get("work_date"), "work_date"),
            detail=_detail_from(data),
        )
        return jsonify({"success": True, "work_log": to_jsonable(entry)}), 201

    @app.route("/api/worklogs/<int:log_id>", methods=["PUT"], endpoint="api_edit_worklog")
    @json_errors
    def edit_worklog(log_id: int):
        data = json_body()
        work_date = data.get("work_date")
        entry = container.work_log_service.edit(
            log_id=log_id,
            detail=_detail_from(data),
            work_date=date_value(work_date, "work_date") if work_date else None,
        )
        return jsonify({"success": True, "work_log": to_jsonable(entry)})

    @app.route("/api/worklogs/<int:log_id>/approve", methods=["POST"], endpoint="api_approve_worklog")
    @json_errors
    def approve_worklog(log_id: int):
        override = bool_value(optional_json_body(), "override")
        entry = container.work_log_service.approve(log_id=log_id, override=override)
        return jsonify({"success": True, "work_log": to_jsonable(entry)})

    @app.route("/api/worklogs/<int:log_id>/reject", methods=["POST"], endpoint="api_reject_worklog")
    @json_errors
    def reject_worklog(log_id: int):
        override = bool_value(optional_json_body(), "override")
        entry = container.work_log_service.reject(log_id=log_id, override=override)
        return jsonify({"success": True, "work_log": to_jsonable(entry)})
