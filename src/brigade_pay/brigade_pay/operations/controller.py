from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.formatting import format_money
from ..common.serializers import operation_to_dict, operation_type_to_dict
from ..container import Container
from ..users.controller import login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/operation-types", methods=["GET"], endpoint="operation_types")
    @login_required
    def operation_types():
        return jsonify([operation_type_to_dict(t) for t in container.operation_service.catalog])

    @app.route("/operations", methods=["GET"], endpoint="operations_list")
    @login_required
    def operations_list():
        return jsonify([operation_to_dict(op) for op in container.operation_service.list_operations()])

    @app.route("/operations", methods=["POST"], endpoint="operations_add")
    @login_required
    def operations_add():
        data = request.get_json(silent=True) or request.form.to_dict()
        op = container.operation_service.add_operation(
            member_id=data.get("member_id", ""),
            type_key=data.get("type", ""),
            work_date=data.get("date", ""),
            hours=data.get("hours", ""),
        )
        return jsonify(operation_to_dict(op)), 201

    @app.route("/operations/<operation_id>", methods=["DELETE"], endpoint="operations_delete")
    @login_required
    def operations_delete(operation_id: str):
        container.operation_service.delete_operation(operation_id)
        return jsonify({"success": True})

    @app.route("/operations/preview", methods=["GET"], endpoint="operations_preview")
    @login_required
    def operations_preview():
        total = container.operation_service.preview_total(
            type_key=request.args.get("type", ""),
            hours=request.args.get("hours", ""),
        )
        return jsonify({"total": format_money(total)})
