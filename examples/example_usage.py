"""Example: use the service layer directly (no Flask).

Logs a few events for the demo roster and prints the Q1 report.
"""

from src.brigade_pay.brigade_pay.common.formatting import format_hours, format_money_label
from src.brigade_pay.brigade_pay.container import build_container


def main():
    container = build_container(seed_demo_members=True)
    ops = container.operation_service
    ops.add_operation(member_id="1", type_key="fire", work_date="2024-02-10", hours="2")
    ops.add_operation(member_id="2", type_key="training", work_date="2024-03-02", hours="3")
    ops.add_operation(member_id="1", type_key="training", work_date="2024-05-01", hours="1")

    report = container.report_service.compute_quarterly_report(quarter="Q1", year=2024)
    print(report.period.quarter.label, report.period.year, format_money_label(report.total_compensation))
    for row in report.member_summary:
        print(f"  {row.name:<15} {row.operation_count:>3} {format_hours(row.hours):>6} {format_money_label(row.total):>10}")


if __name__ == "__main__":
    main()
