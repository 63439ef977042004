from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_value, json_body, json_errors, to_jsonable
from ..core.enums import ApprovalStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/leave", methods=["GET"], endpoint="api_list_leave")
    @json_errors
    def list_leave():
        status = request.args.get("status")
        try:
            status_filter = ApprovalStatus(status.upper()) if status else None
        except ValueError:
            raise ValidationError("Unknown status")
        rows = container.leave_service.list(status=status_filter, employee_id=request.args.get("employee_id") or None)
        return jsonify({"success": True, "requests": to_jsonable(list(rows))})

    @app.route("/api/leave", methods=["POST"], endpoint="api_create_leave")
    @json_errors
    def create_leave():
        data = json_body()
        request_id = container.leave_service.create(
            employee_id=str(data.get("employee_id", "")),
            start_date=date_value(data.get("start_date"), "start_date"),
            end_date=date_value(data.get("end_date"), "end_date"),
            reason=data.get("reason", ""),
        )
        return jsonify({"success": True, "request_id": request_id}), 201

    @app.route("/api/leave/<int:request_id>/approve", methods=["POST"], endpoint="api_approve_leave")
    @json_errors
    def approve_leave(request_id: int):
        req = container.leave_service.approve(request_id=request_id)
        return jsonify({"success": True, "request": to_jsonable(req)})

    @app.route("/api/leave/<int:request_id>/reject", methods=["POST"], endpoint="api_reject_leave")
    @json_errors
    def reject_leave(request_id: int):
        req = container.leave_service.reject(request_id=request_id)
        return jsonify({"success": True, "request": to_jsonable(req)})
