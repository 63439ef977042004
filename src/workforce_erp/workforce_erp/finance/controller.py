from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import date_value, json_body, json_errors, month_args, to_jsonable
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/finance/summary", methods=["GET"], endpoint="api_finance_summary")
    @json_errors
    def finance_summary():
        year, month = month_args()
        svc = container.finance_service
        return jsonify(
            {
                "success": True,
                "summary": to_jsonable(svc.monthly_summary(year=year, month=month)),
                "amount_payable": to_jsonable(svc.amount_payable(year=year, month=month)),
                "amount_receivable": to_jsonable(svc.amount_receivable()),
            }
        )

    @app.route("/api/finance/cash-flow", methods=["GET"], endpoint="api_cash_flow")
    @json_errors
    def cash_flow():
        year, month = month_args()
        items = container.finance_service.cash_flow(year=year, month=month)
        return jsonify({"success": True, "items": to_jsonable(items)})

    @app.route("/api/finance/revenue", methods=["POST"], endpoint="api_add_revenue")
    @json_errors
    def add_revenue():
        data = json_body()
        revenue = container.finance_service.add_revenue(
            description=data.get("description", ""),
            client=data.get("client", ""),
            on=date_value(data.get("date"), "date"),
            amount=data.get("amount"),
        )
        return jsonify({"success": True, "revenue": to_jsonable(revenue)}), 201

    @app.route("/api/finance/expenses", methods=["POST"], endpoint="api_add_expense")
    @json_errors
    def add_expense():
        data = json_body()
        expense = container.finance_service.add_expense(
            description=data.get("description", ""),
            category=data.get("category", ""),
            on=date_value(data.get("date"), "date"),
            amount=data.get("amount"),
        )
        return jsonify({"success": True, "expense": to_jsonable(expense)}), 201

    @app.route("/api/finance/revenue/<revenue_id>/toggle", methods=["POST"], endpoint="api_toggle_revenue")
    @json_errors
    def toggle_revenue(revenue_id: str):
        revenue = container.finance_service.toggle_revenue_status(revenue_id)
        return jsonify({"success": True, "revenue": to_jsonable(revenue)})

    @app.route("/api/finance/expenses/<expense_id>/toggle", methods=["POST"], endpoint="api_toggle_expense")
    @json_errors
    def toggle_expense(expense_id: str):
        expense = container.finance_service.toggle_expense_status(expense_id)
        return jsonify({"success": True, "expense": to_jsonable(expense)})

    @app.route("/api/houses", methods=["GET"], endpoint="api_list_houses")
    @json_errors
    def list_houses():
        return jsonify({"success": True, "houses": to_jsonable(list(container.finance_service.list_houses()))})

    @app.route("/api/houses", methods=["POST"], endpoint="api_add_house")
    @json_errors
    def add_house():
        data = json_body()
        house = container.finance_service.add_house(
            name=data.get("name", ""),
            address=data.get("address", ""),
            rent=data.get("rent", 0),
        )
        return jsonify({"success": True, "house": to_jsonable(house)}), 201

    @app.route("/api/houses/<int:house_id>", methods=["PUT"], endpoint="api_update_house")
    @json_errors
    def update_house(house_id: int):
        data = json_body()
        house = container.finance_service.update_house(
            house_id=house_id,
            name=data.get("name"),
            address=data.get("address"),
            rent=data.get("rent"),
        )
        return jsonify({"success": True, "house": to_jsonable(house)})

    @app.route("/api/houses/<int:house_id>", methods=["DELETE"], endpoint="api_delete_house")
    @json_errors
    def delete_house(house_id: int):
        unassigned = container.finance_service.delete_house(house_id)
        return jsonify({"success": True, "unassigned_employees": unassigned})
