"""JSON shapes returned by the controllers."""

from __future__ import annotations

from ..members.model import Member
from ..operations.model import Operation, OperationType
from ..reports.aggregation import MemberSummaryRow, Summary, Totals, TypeSummaryRow
from ..reports.service import QuarterlyReport
from .formatting import format_hours, format_money


def member_to_dict(m: Member) -> dict:
    return {"id": m.member_id, "name": m.name, "rank": m.rank}


def operation_type_to_dict(t: OperationType) -> dict:
    return {"key": t.key, "label": t.label, "rate": format_money(t.hourly_rate)}


def operation_to_dict(op: Operation) -> dict:
    return {
        "id": op.operation_id,
        "member_id": op.member_id,
        "member_name": op.member_name,
        "date": op.date.strftime("%Y-%m-%d"),
        "type": op.type,
        "hours": format_hours(op.hours),
        "rate": format_money(op.rate),
        "total": format_money(op.total),
    }


def totals_to_dict(t: Totals) -> dict:
    return {
        "total_compensation": format_money(t.total_compensation),
        "total_hours": format_hours(t.total_hours),
        "total_operations": t.total_operations,
    }


def member_row_to_dict(r: MemberSummaryRow) -> dict:
    return {
        "id": r.member_id,
        "name": r.name,
        "rank": r.rank,
        "operations": r.operation_count,
        "hours": format_hours(r.hours),
        "total": format_money(r.total),
    }


def type_row_to_dict(r: TypeSummaryRow) -> dict:
    return {"type": r.type, "count": r.count, "hours": format_hours(r.hours), "total": format_money(r.total)}


def summary_to_dict(s: Summary) -> dict:
    out = totals_to_dict(s.totals)
    out["active_members"] = s.active_members
    out["member_summary"] = [member_row_to_dict(r) for r in s.member_summary]
    out["type_summary"] = [type_row_to_dict(r) for r in s.type_summary]
    return out


def report_to_dict(report: QuarterlyReport) -> dict:
    out = {
        "selected": True,
        "quarter": report.period.quarter.value,
        "quarter_label": report.period.quarter.label,
        "year": report.period.year,
        "start": report.period.start.strftime("%Y-%m-%d %H:%M:%S"),
        "end": report.period.end.strftime("%Y-%m-%d %H:%M:%S"),
    }
    out.update(totals_to_dict(report.totals))
    out["member_summary"] = [member_row_to_dict(r) for r in report.member_summary]
    out["type_summary"] = [type_row_to_dict(r) for r in report.type_summary]
    out["operations"] = [operation_to_dict(op) for op in report.operations]
    return out
