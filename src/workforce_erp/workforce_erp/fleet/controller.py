from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_value, json_body, json_errors, to_jsonable
from ..core.enums import VehicleStatus
from ..core.exceptions import ValidationError
from ..container import Container


def _status(value) -> VehicleStatus:
    try:
        return VehicleStatus(str(value).upper())
    except ValueError:
        raise ValidationError("Unknown vehicle status")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/vehicles", methods=["GET"], endpoint="api_list_vehicles")
    @json_errors
    def list_vehicles():
        status = request.args.get("status")
        vehicles = container.fleet_service.list_vehicles(status=_status(status) if status else None)
        return jsonify({"success": True, "vehicles": to_jsonable(list(vehicles))})

    @app.route("/api/vehicles", methods=["POST"], endpoint="api_register_vehicle")
    @json_errors
    def register_vehicle():
        data = json_body()
        vehicle = container.fleet_service.register(
            name=data.get("name", ""),
            plate=data.get("plate", ""),
            insurance_due=date_value(data.get("insurance_due"), "insurance_due"),
            inspection_due=date_value(data.get("inspection_due"), "inspection_due"),
            status=_status(data.get("status", VehicleStatus.AVAILABLE.value)),
        )
        return jsonify({"success": True, "vehicle": to_jsonable(vehicle)}), 201

    @app.route("/api/vehicles/<int:vehicle_id>", methods=["PUT"], endpoint="api_update_vehicle")
    @json_errors
    def update_vehicle(vehicle_id: int):
        data = json_body()
        vehicle = container.fleet_service.update(
            vehicle_id=vehicle_id,
            name=data.get("name"),
            plate=data.get("plate"),
            insurance_due=date_value(data["insurance_due"], "insurance_due") if "insurance_due" in data else None,
            inspection_due=date_value(data["inspection_due"], "inspection_due") if "inspection_due" in data else None,
            status=_status(data["status"]) if "status" in data else None,
        )
        return jsonify({"success": True, "vehicle": to_jsonable(vehicle)})

    @app.route("/api/vehicles/<int:vehicle_id>", methods=["DELETE"], endpoint="api_remove_vehicle")
    @json_errors
    def remove_vehicle(vehicle_id: int):
        container.fleet_service.remove(vehicle_id)
        return jsonify({"success": True, "message": "Vehicle removed"})
