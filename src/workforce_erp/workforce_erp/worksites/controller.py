from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import bool_value, date_value, int_value, json_body, json_errors, to_jsonable
from ..core.enums import WorksiteKind
from ..core.exceptions import ValidationError
from ..container import Container
from .model import PlanningEntry


def _kind(value) -> WorksiteKind:
    try:
        return WorksiteKind(str(value).upper())
    except ValueError:
        raise ValidationError("Unknown worksite kind")


def _entry_json(entry: PlanningEntry) -> dict:
    data = to_jsonable(entry)
    data["day_off"] = entry.is_day_off
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/worksites", methods=["GET"], endpoint="api_list_worksites")
    @json_errors
    def list_worksites():
        active_only = request.args.get("active", "").lower() in {"1", "true", "yes"}
        worksites = container.worksite_service.list_worksites(active_only=active_only)
        return jsonify({"success": True, "worksites": to_jsonable(list(worksites))})

    @app.route("/api/worksites", methods=["POST"], endpoint="api_add_worksite")
    @json_errors
    def add_worksite():
        data = json_body()
        worksite = container.worksite_service.add(
            name=data.get("name", ""),
            address=data.get("address", ""),
            kind=_kind(data.get("kind", WorksiteKind.OTHER.value)),
        )
        return jsonify({"success": True, "worksite": to_jsonable(worksite)}), 201

    @app.route("/api/worksites/<int:worksite_id>", methods=["PUT"], endpoint="api_update_worksite")
    @json_errors
    def update_worksite(worksite_id: int):
        data = json_body()
        svc = container.worksite_service
        worksite = svc.update(
            worksite_id=worksite_id,
            name=data.get("name"),
            address=data.get("address"),
            kind=_kind(data["kind"]) if "kind" in data else None,
        )
        if "is_active" in data:
            worksite = svc.set_active(worksite_id=worksite_id, active=bool_value(data, "is_active"))
        return jsonify({"success": True, "worksite": to_jsonable(worksite)})

    @app.route("/api/planning", methods=["GET"], endpoint="api_planning")
    @json_errors
    def planning():
        start = date_value(request.args.get("start"), "start")
        end = request.args.get("end")
        rows = container.worksite_service.planning(start=start, end=date_value(end, "end") if end else start)
        return jsonify({"success": True, "planning": [_entry_json(e) for e in rows]})

    @app.route("/api/planning", methods=["PUT"], endpoint="api_assign_planning")
    @json_errors
    def assign_planning():
        data = json_body()
        worksite_id = data.get("worksite_id")
        entry = container.worksite_service.assign(
            work_date=date_value(data.get("work_date"), "work_date"),
            employee_id=str(data.get("employee_id", "")),
            worksite_id=int_value(worksite_id, "worksite_id") if worksite_id is not None else None,
        )
        return jsonify({"success": True, "entry": _entry_json(entry)})

    @app.route("/api/planning", methods=["DELETE"], endpoint="api_unassign_planning")
    @json_errors
    def unassign_planning():
        data = json_body()
        removed = container.worksite_service.unassign(
            work_date=date_value(data.get("work_date"), "work_date"),
            employee_id=str(data.get("employee_id", "")),
        )
        return jsonify({"success": True, "removed": removed})
