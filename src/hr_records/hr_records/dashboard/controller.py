from __future__ import annotations

from flask import Flask, jsonify

from ..core.exceptions import StoreError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard_metrics")
    def dashboard_metrics():
        try:
            metrics = container.dashboard_service.metrics()
        except StoreError as e:
            return jsonify({"error": str(e)}), 500
        return jsonify(metrics.to_dict()), 200
