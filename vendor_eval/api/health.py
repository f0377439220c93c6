# vendor_eval/api/health.py
import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from ..services.health import ping_database

bp = Blueprint("health", __name__)


@bp.get("/api/health")
def health():
    started = current_app.config.get("STARTED_AT") or time.time()
    ok, error = ping_database()
    body = {
        "status": "healthy" if ok else "degraded",
        "uptime": round(time.time() - started, 3),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if ok else "disconnected",
        "environment": {
            "appEnv": current_app.config.get("APP_ENV"),
            "hasConnectionString": bool(current_app.config.get("SQLALCHEMY_DATABASE_URI")),
        },
    }
    if error:
        body["databaseError"] = error
    return jsonify(body), 200 if ok else 503
