# vendor_eval/api/deployment.py
import math

from flask import Blueprint, current_app, jsonify, request

from ..extensions import db
from ..models.deployment_error import DeploymentError

bp = Blueprint("deployment", __name__)


def _int_arg(name, default, minimum):
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")
    return value


@bp.route("/api/deployment/errors", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
def deployment_errors():
    if request.method not in ("GET", "POST"):
        return jsonify({"error": "Method not allowed"}), 405, {"Allow": "GET, POST"}

    if request.method == "GET":
        try:
            limit = _int_arg("limit", 10, 1)
            offset = _int_arg("offset", 0, 0)
        except ValueError as e:
            return jsonify({"error": str(e)}), 400

        query = DeploymentError.query
        resolved = request.args.get("resolved")
        if resolved is not None:
            query = query.filter(DeploymentError.resolved == (resolved == "true"))
        total = query.count()
        rows = (query.order_by(DeploymentError.created_at.desc(), DeploymentError.id.desc())
                .limit(limit).offset(offset).all())
        return jsonify({
            "errors": [r.to_dict() for r in rows],
            "total": total,
            "page": offset // limit + 1,
            "totalPages": math.ceil(total / limit),
        })

    data = request.get_json(silent=True) or {}
    if not data.get("errorMessage") or not data.get("environment"):
        return jsonify({"error": "Missing required fields: errorMessage and environment are required"}), 400

    row = DeploymentError(
        error_message=data["errorMessage"],
        error_stack=data.get("errorStack"),
        error_code=data.get("errorCode"),
        environment=data["environment"],
        component=data.get("component"),
        error_metadata=data.get("metadata") or {},
    )
    db.session.add(row)
    db.session.commit()

    current_app.logger.error('Deployment Error Logged [%s]: %s', row.environment, row.error_message)
    if row.error_stack:
        current_app.logger.error('Stack: %s', row.error_stack)
    return jsonify(row.to_dict()), 201
