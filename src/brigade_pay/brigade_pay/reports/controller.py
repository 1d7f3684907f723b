from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import report_to_dict, summary_to_dict
from ..container import Container
from ..core.exceptions import ValidationError
from ..users.controller import login_required
from .export import report_filename, write_quarterly_csv


def register(app: Flask, container: Container) -> None:
    def _selected_report():
        return container.report_service.compute_quarterly_report(
            quarter=request.args.get("quarter", ""),
            year=request.args.get("year"),
        )

    @app.route("/summary", methods=["GET"], endpoint="summary")
    @login_required
    def summary():
        return jsonify(summary_to_dict(container.report_service.compute_summary()))

    @app.route("/reports/years", methods=["GET"], endpoint="report_years")
    @login_required
    def report_years():
        return jsonify(container.report_service.list_available_years())

    @app.route("/reports/quarterly", methods=["GET"], endpoint="report_quarterly")
    @login_required
    def report_quarterly():
        report = _selected_report()
        if report is None:
            return jsonify({"selected": False})
        return jsonify(report_to_dict(report))

    @app.route("/reports/quarterly.csv", methods=["GET"], endpoint="report_quarterly_csv")
    @login_required
    def report_quarterly_csv():
        report = _selected_report()
        if report is None:
            raise ValidationError("Wybierz kwartał")

        return app.response_class(
            write_quarterly_csv(report),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report_filename(report)}"},
        )
