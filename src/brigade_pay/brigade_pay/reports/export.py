from __future__ import annotations

import csv
import io

from ..common.formatting import format_hours, format_money, format_money_label
from .service import QuarterlyReport


def report_filename(report: QuarterlyReport) -> str:
    return f"raport_{report.period.quarter.value}_{report.period.year}.csv"


def write_quarterly_csv(report: QuarterlyReport) -> bytes:
    """Printable quarterly report as CSV: details, per-member and per-type sections.

    Encoded utf-8-sig so spreadsheet apps pick up Polish characters.
    """

    out = io.StringIO()
    writer = csv.writer(out)

    writer.writerow([f"Raport kwartalny {report.period.quarter.label} {report.period.year}"])
    writer.writerow(["Okres", report.period.start.strftime("%Y-%m-%d"), report.period.end.strftime("%Y-%m-%d")])
    writer.writerow(["Wynik", format_money_label(report.total_compensation)])
    writer.writerow(["Liczba godzin", format_hours(report.total_hours)])
    writer.writerow(["Zdarzenia", report.total_operations])
    writer.writerow([])

    writer.writerow(["date", "member_name", "type", "hours", "rate", "total"])
    for op in report.operations:
        writer.writerow(
            [
                op.date.strftime("%Y-%m-%d"),
                op.member_name,
                op.type,
                format_hours(op.hours),
                format_money(op.rate),
                format_money(op.total),
            ]
        )
    writer.writerow([])

    writer.writerow(["member_name", "rank", "operations", "hours", "total"])
    for row in report.member_summary:
        writer.writerow([row.name, row.rank, row.operation_count, format_hours(row.hours), format_money(row.total)])
    writer.writerow([])

    writer.writerow(["type", "count", "hours", "total"])
    for row in report.type_summary:
        writer.writerow([row.type, row.count, format_hours(row.hours), format_money(row.total)])

    return out.getvalue().encode("utf-8-sig")
