"""Health check endpoints."""
from flask import Blueprint, jsonify

bp = Blueprint("health", __name__)


@bp.route("/health")
def health_check():
    """Basic health check endpoint."""
    return jsonify({"status": "ok"}), 200


@bp.route("/ready")
def readiness_check():
    """Readiness check endpoint."""
    return jsonify({"status": "ready"}), 200
