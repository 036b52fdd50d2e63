from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import parse_id, require_enum
from ..container import Container
from ..core.enums import TaskStatus
from .payloads import parse_new_task, parse_task_changes


def register(app: Flask, container: Container) -> None:
    def _bad_id():
        return jsonify({"message": "Invalid task id"}), 400

    def _not_found():
        return jsonify({"message": "Task not found"}), 404

    @app.route("/api/tasks", methods=["GET"], endpoint="list_tasks")
    def list_tasks():
        # accept employeeId or employee_id; a malformed id means "no filter"
        raw_employee_id = request.args.get("employeeId") or request.args.get("employee_id")
        employee_id = parse_id(raw_employee_id) if raw_employee_id else None

        raw_status = request.args.get("status")
        status = require_enum(raw_status, TaskStatus, "status") if raw_status else None

        tasks = container.task_service.list_tasks(employee_id=employee_id, status=status)
        return jsonify([t.as_dict() for t in tasks])

    @app.route("/api/tasks/<raw_id>", methods=["GET"], endpoint="get_task")
    def get_task(raw_id: str):
        task_id = parse_id(raw_id)
        if not task_id:
            return _bad_id()
        task = container.task_service.get_task(task_id)
        if not task:
            return _not_found()
        return jsonify(task.as_dict())

    @app.route("/api/tasks", methods=["POST"], endpoint="create_task")
    def create_task():
        data = parse_new_task(request.get_json(silent=True))
        task = container.task_service.create_task(data)
        return jsonify(task.as_dict()), 201

    @app.route("/api/tasks/<raw_id>", methods=["PUT", "PATCH"], endpoint="update_task")
    def update_task(raw_id: str):
        task_id = parse_id(raw_id)
        if not task_id:
            return _bad_id()
        changes = parse_task_changes(request.get_json(silent=True))
        task = container.task_service.update_task(task_id, changes)
        if not task:
            return _not_found()
        return jsonify(task.as_dict())

    @app.route("/api/tasks/<raw_id>/toggle", methods=["POST"], endpoint="toggle_task")
    def toggle_task(raw_id: str):
        task_id = parse_id(raw_id)
        if not task_id:
            return _bad_id()
        task = container.task_service.toggle_completed(task_id)
        if not task:
            return _not_found()
        return jsonify(task.as_dict())

    @app.route("/api/tasks/<raw_id>", methods=["DELETE"], endpoint="delete_task")
    def delete_task(raw_id: str):
        task_id = parse_id(raw_id)
        if not task_id:
            return _bad_id()
        if not container.task_service.delete_task(task_id):
            return _not_found()
        return "", 204
