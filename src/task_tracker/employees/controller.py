from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import parse_id
from ..container import Container
from .payloads import parse_employee_changes, parse_new_employee


def register(app: Flask, container: Container) -> None:
    def _bad_id():
        return jsonify({"message": "Invalid employee id"}), 400

    def _not_found():
        return jsonify({"message": "Employee not found"}), 404

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        employees = container.employee_service.list_employees()
        return jsonify([e.as_dict() for e in employees])

    @app.route("/api/employees/<raw_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(raw_id: str):
        employee_id = parse_id(raw_id)
        if not employee_id:
            return _bad_id()
        employee = container.employee_service.get_employee(employee_id)
        if not employee:
            return _not_found()
        return jsonify(employee.as_dict())

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = parse_new_employee(request.get_json(silent=True))
        employee = container.employee_service.create_employee(data)
        return jsonify(employee.as_dict()), 201

    @app.route("/api/employees/<raw_id>", methods=["PUT", "PATCH"], endpoint="update_employee")
    def update_employee(raw_id: str):
        employee_id = parse_id(raw_id)
        if not employee_id:
            return _bad_id()
        changes = parse_employee_changes(request.get_json(silent=True))
        employee = container.employee_service.update_employee(employee_id, changes)
        if not employee:
            return _not_found()
        return jsonify(employee.as_dict())

    @app.route("/api/employees/<raw_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(raw_id: str):
        employee_id = parse_id(raw_id)
        if not employee_id:
            return _bad_id()
        if not container.employee_service.delete_employee(employee_id):
            return _not_found()
        return "", 204
