from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import body_month, date_value, json_body, json_errors, month_args, to_jsonable
from ..container import Container
from .model import PayrollLine, PayrollSheet
from .service import format_minutes


def _line_json(line: PayrollLine) -> dict:
    data = to_jsonable(line)
    data["hours"] = format_minutes(line.result.total_minutes)
    return data


def _sheet_json(sheet: PayrollSheet) -> dict:
    return {
        "period_start": sheet.period_start.isoformat(),
        "period_end": sheet.period_end.isoformat(),
        "lines": [_line_json(line) for line in sheet.lines],
        "totals": {
            "total_minutes": sheet.total_minutes,
            "hours": format_minutes(sheet.total_minutes),
            "base_amount": to_jsonable(sheet.total_base),
            "bonus_amount": to_jsonable(sheet.total_bonus),
            "extra": to_jsonable(sheet.total_extra),
            "discount": to_jsonable(sheet.total_discount),
            "total_amount": to_jsonable(sheet.total_net),
        },
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll/monthly", methods=["GET"], endpoint="api_monthly_payroll")
    @json_errors
    def monthly_payroll():
        year, month = month_args()
        sheet = container.payroll_report_service.monthly_payroll(year=year, month=month)
        return jsonify({"success": True, "payroll": _sheet_json(sheet)})

    @app.route("/api/payroll/report", methods=["GET"], endpoint="api_payroll_report")
    @json_errors
    def payroll_report():
        start = date_value(request.args.get("start"), "start")
        end = date_value(request.args.get("end"), "end")
        sheet = container.payroll_report_service.period_report(start=start, end=end)
        return jsonify({"success": True, "report": _sheet_json(sheet)})

    @app.route("/api/payroll/employees/<employee_id>", methods=["GET"], endpoint="api_employee_payroll")
    @json_errors
    def employee_payroll(employee_id: str):
        year, month = month_args()
        line = container.payroll_report_service.employee_summary(employee_id=employee_id, year=year, month=month)
        return jsonify({"success": True, "payroll": _line_json(line)})

    @app.route("/api/payroll/adjustments", methods=["PUT"], endpoint="api_payroll_adjustment")
    @json_errors
    def payroll_adjustment():
        data = json_body()
        year, month = body_month(data)
        adjustments = container.payroll_report_service.set_adjustment(
            year=year,
            month=month,
            employee_id=str(data.get("employee_id", "")),
            extra=data.get("extra"),
            discount=data.get("discount"),
        )
        return jsonify({"success": True, "adjustments": to_jsonable(adjustments)})
