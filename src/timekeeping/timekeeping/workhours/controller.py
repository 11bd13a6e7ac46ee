from __future__ import annotations

import logging
from datetime import date
from typing import Any

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date, parse_iso_datetime
from ..common.hours import format_hours_minutes
from ..core.exceptions import ValidationError
from ..summaries.model import AttendanceSummary, DailyOverview
from .model import WorkHoursRecord

logger = logging.getLogger(__name__)


def record_to_dict(r: WorkHoursRecord) -> dict[str, Any]:
    return {
        "employee_id": r.employee_id,
        "work_date": r.work_date.strftime("%Y-%m-%d"),
        "first_checkin": r.first_checkin.isoformat() if r.first_checkin else None,
        "last_checkout": r.last_checkout.isoformat() if r.last_checkout else None,
        "regular_hours": str(r.regular_hours),
        "overtime_hours": str(r.overtime_hours),
        "regular_hours_formatted": format_hours_minutes(r.regular_hours),
        "overtime_hours_formatted": format_hours_minutes(r.overtime_hours),
        "total_hours_formatted": format_hours_minutes(r.total_hours),
        "status": r.status.value,
        "late_minutes": r.late_minutes,
        "early_minutes": r.early_minutes,
        "is_workday": r.is_workday,
        "warnings": list(r.warnings),
    }


def summary_to_dict(s: AttendanceSummary) -> dict[str, Any]:
    return {
        "employee_id": s.employee_id,
        "month": s.month,
        "year": s.year,
        "total_hours": str(s.total_hours),
        "overtime_hours": str(s.overtime_hours),
        "leave_days": s.leave_days,
        "late_minutes": s.late_minutes,
        "early_minutes": s.early_minutes,
        "penalty_amount": s.penalty_amount,
        "present_days": s.present_days,
        "late_days": s.late_days,
        "absent_days": s.absent_days,
        "leave_records": s.leave_records,
    }


def overview_to_dict(o: DailyOverview) -> dict[str, Any]:
    return {
        "date": o.work_date.strftime("%Y-%m-%d"),
        "present": o.present,
        "late": o.late,
        "absent": o.absent,
        "leave": o.leave,
        "total": o.total,
    }


def register(app: Flask, container) -> None:
    service = container.timekeeping_service

    def _parse_date(value: str) -> date:
        try:
            return parse_iso_date(value)
        except (TypeError, ValueError):
            raise ValidationError("Ngày không hợp lệ (YYYY-MM-DD)")

    def _error(message: str, code: int):
        return jsonify({"success": False, "message": message}), code

    @app.route("/api/time-logs", methods=["POST"], endpoint="api_time_logs")
    def api_time_logs():
        """Called by the face recognition kiosk with a recognized employee id."""
        try:
            data = request.get_json(silent=True) or {}
            raw_ts = data.get("timestamp")
            try:
                timestamp = parse_iso_datetime(raw_ts) if raw_ts else now_local()
            except (TypeError, ValueError):
                raise ValidationError("Thời gian không hợp lệ (ISO-8601)")

            record = service.record_event(data.get("employee_id"), data.get("kind"), timestamp=timestamp)
            return jsonify({"success": True, "work_hours": record_to_dict(record)}), 201
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to record time log")
            return _error("Lỗi hệ thống khi ghi nhận chấm công", 500)

    @app.route("/api/work-hours/<int:employee_id>/<work_date>", methods=["GET"], endpoint="api_work_hours")
    def api_work_hours(employee_id: int, work_date: str):
        try:
            record = service.get_work_hours(employee_id, _parse_date(work_date))
            if record is None:
                return _error("Chưa có dữ liệu giờ công cho ngày này", 404)
            return jsonify({"success": True, "work_hours": record_to_dict(record)}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to read work hours")
            return _error("Lỗi hệ thống khi đọc giờ công", 500)

    @app.route("/api/work-hours/<int:employee_id>/<work_date>", methods=["POST"], endpoint="api_rederive_work_hours")
    def api_rederive_work_hours(employee_id: int, work_date: str):
        try:
            record = service.rederive_day(employee_id, _parse_date(work_date))
            return jsonify({"success": True, "work_hours": record_to_dict(record)}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to derive work hours")
            return _error("Lỗi hệ thống khi tính giờ công", 500)

    @app.route("/api/work-hours/employee/<int:employee_id>", methods=["GET"], endpoint="api_employee_work_hours")
    def api_employee_work_hours(employee_id: int):
        """Stored records between ?start and ?end (default: current month up to today)."""
        try:
            today = now_local().date()
            start_raw = request.args.get("start")
            end_raw = request.args.get("end")
            start = _parse_date(start_raw) if start_raw else today.replace(day=1)
            end = _parse_date(end_raw) if end_raw else today
            records = service.list_work_hours(employee_id, start, end)
            return jsonify({"success": True, "work_hours": [record_to_dict(r) for r in records]}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to list work hours")
            return _error("Lỗi hệ thống khi đọc giờ công", 500)

    @app.route(
        "/api/attendance-summary/<int:employee_id>/<int:year>/<int:month>",
        methods=["POST"],
        endpoint="api_rebuild_summary",
    )
    def api_rebuild_summary(employee_id: int, year: int, month: int):
        try:
            summary = service.rebuild_month(employee_id, month, year)
            return jsonify({"success": True, "summary": summary_to_dict(summary)}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to rebuild attendance summary")
            return _error("Lỗi hệ thống khi tổng hợp chấm công", 500)

    @app.route(
        "/api/attendance-summary/<int:employee_id>/<int:year>/<int:month>",
        methods=["GET"],
        endpoint="api_get_summary",
    )
    def api_get_summary(employee_id: int, year: int, month: int):
        try:
            summary = service.get_summary(employee_id, month, year)
            if summary is None:
                return _error("Chưa có bảng tổng hợp cho tháng này", 404)
            return jsonify({"success": True, "summary": summary_to_dict(summary)}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to read attendance summary")
            return _error("Lỗi hệ thống khi đọc bảng tổng hợp", 500)

    @app.route(
        "/api/attendance-summary/employee/<int:employee_id>",
        methods=["GET"],
        endpoint="api_employee_summaries",
    )
    def api_employee_summaries(employee_id: int):
        """One month when ?month is given, otherwise every stored month of ?year."""
        try:
            year = request.args.get("year") or now_local().year
            month = request.args.get("month")
            if month:
                found = service.get_summary(employee_id, month, year)
                summaries = [found] if found else []
            else:
                summaries = service.list_summaries_for_employee(employee_id, year)
            return jsonify({"success": True, "summaries": [summary_to_dict(s) for s in summaries]}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to list attendance summaries")
            return _error("Lỗi hệ thống khi đọc bảng tổng hợp", 500)

    @app.route("/api/attendance-summary", methods=["GET"], endpoint="api_month_summaries")
    def api_month_summaries():
        try:
            today = now_local().date()
            month = request.args.get("month") or today.month
            year = request.args.get("year") or today.year
            summaries = service.list_summaries_for_month(month, year)
            return jsonify({"success": True, "summaries": [summary_to_dict(s) for s in summaries]}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to list attendance summaries")
            return _error("Lỗi hệ thống khi đọc bảng tổng hợp", 500)

    @app.route("/api/attendance/daily", methods=["GET"], endpoint="api_daily_overview")
    def api_daily_overview():
        try:
            raw = request.args.get("date") or now_local().date().strftime("%Y-%m-%d")
            overview = service.daily_overview(_parse_date(raw))
            return jsonify({"success": True, "overview": overview_to_dict(overview)}), 200
        except ValidationError as e:
            return _error(str(e), 400)
        except Exception:
            logger.exception("Failed to build daily overview")
            return _error("Lỗi hệ thống khi thống kê chấm công", 500)
