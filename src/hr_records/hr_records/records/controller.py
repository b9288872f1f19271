from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import NotFoundError, StoreError, ValidationError
from .service import RecordService


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def register_record_routes(app: Flask, service: RecordService, *, resource: str, endpoint: str) -> None:
    """Mount the list (/api/<resource>) and item (/api/<resource>/<id>) endpoints."""

    @app.route(f"/api/{resource}", methods=["GET"], endpoint=f"{endpoint}_list")
    def list_records():
        try:
            records = service.list_all()
        except StoreError as e:
            return _error(str(e), 500)
        return jsonify([r.to_dict() for r in records]), 200

    @app.route(f"/api/{resource}", methods=["POST"], endpoint=f"{endpoint}_create")
    def create_record():
        try:
            record = service.create(request.get_json(silent=True))
        except ValidationError as e:
            return _error(str(e), 400)
        except StoreError as e:
            return _error(str(e), 500)
        return jsonify(record.to_dict()), 201

    @app.route(f"/api/{resource}/<record_id>", methods=["GET"], endpoint=f"{endpoint}_detail")
    def get_record(record_id: str):
        try:
            record = service.get(record_id)
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StoreError as e:
            return _error(str(e), 500)
        return jsonify(record.to_dict()), 200

    @app.route(f"/api/{resource}/<record_id>", methods=["PUT"], endpoint=f"{endpoint}_update")
    def update_record(record_id: str):
        try:
            record = service.update(record_id, request.get_json(silent=True))
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StoreError as e:
            return _error(str(e), 500)
        return jsonify(record.to_dict()), 200

    @app.route(f"/api/{resource}/<record_id>", methods=["DELETE"], endpoint=f"{endpoint}_delete")
    def delete_record(record_id: str):
        try:
            service.delete(record_id)
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except StoreError as e:
            return _error(str(e), 500)
        return "", 204
