from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..container import Container


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return jsonify({"success": False, "message": "Zaloguj się, aby kontynuować"}), 401
        return view(*args, **kwargs)

    return wrapper


def _payload() -> dict:
    return request.get_json(silent=True) or request.form.to_dict()


def register(app: Flask, container: Container) -> None:
    def _start_session(s_user, remember: bool) -> None:
        session.clear()
        session.permanent = bool(remember)
        session["username"] = s_user.username
        session["full_name"] = s_user.full_name

    @app.route("/auth/register", methods=["POST"], endpoint="register")
    def register_user():
        data = _payload()
        s_user = container.auth_service.register(
            username=data.get("username", ""),
            password=data.get("password", ""),
            full_name=data.get("full_name", ""),
        )
        _start_session(s_user, remember=False)
        return jsonify({"success": True, "username": s_user.username, "full_name": s_user.full_name}), 201

    @app.route("/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = _payload()
        s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        _start_session(s_user, remember=bool(data.get("remember_me")))
        return jsonify({"success": True, "username": s_user.username, "full_name": s_user.full_name})

    @app.route("/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        return jsonify({"username": session.get("username"), "full_name": session.get("full_name")})
