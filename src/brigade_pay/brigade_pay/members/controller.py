from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.serializers import member_to_dict
from ..container import Container
from ..users.controller import login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/members", methods=["GET"], endpoint="members_list")
    @login_required
    def members_list():
        return jsonify([member_to_dict(m) for m in container.member_service.list_members()])

    @app.route("/members", methods=["POST"], endpoint="members_add")
    @login_required
    def members_add():
        data = request.get_json(silent=True) or request.form.to_dict()
        member = container.member_service.add_member(name=data.get("name", ""), rank=data.get("rank", ""))
        return jsonify(member_to_dict(member)), 201

    @app.route("/members/<member_id>", methods=["DELETE"], endpoint="members_delete")
    @login_required
    def members_delete(member_id: str):
        removed = container.member_service.delete_member(member_id)
        return jsonify({"success": True, "removed_operations": removed})
