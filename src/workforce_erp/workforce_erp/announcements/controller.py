from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import date_value, json_body, json_errors, to_jsonable
from ..core.enums import Priority
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/announcements", methods=["GET"], endpoint="api_list_announcements")
    @json_errors
    def list_announcements():
        items = container.announcement_service.list(category=request.args.get("category"))
        return jsonify({"success": True, "announcements": to_jsonable(list(items))})

    @app.route("/api/announcements", methods=["POST"], endpoint="api_publish_announcement")
    @json_errors
    def publish_announcement():
        data = json_body()
        categories = data.get("categories") or []
        if not isinstance(categories, list) or not all(isinstance(c, str) for c in categories):
            raise ValidationError("categories must be a list of strings")
        try:
            priority = Priority(str(data.get("priority", Priority.MEDIUM.value)).lower())
        except ValueError:
            raise ValidationError("Unknown priority")

        announcement = container.announcement_service.publish(
            title=data.get("title", ""),
            content=data.get("content", ""),
            categories=categories,
            priority=priority,
            on=date_value(data["date"], "date") if data.get("date") else None,
        )
        return jsonify({"success": True, "announcement": to_jsonable(announcement)}), 201

    @app.route("/api/announcements/<announcement_id>", methods=["DELETE"], endpoint="api_remove_announcement")
    @json_errors
    def remove_announcement(announcement_id: str):
        container.announcement_service.remove(announcement_id)
        return jsonify({"success": True, "message": "Announcement removed"})
