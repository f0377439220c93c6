from flask import current_app, jsonify, request
from flask_login import login_required
from . import bp
from ...extensions import db
from ...models.evaluator import Evaluator
from ...models.user import User
from ...services.rubric import DOMAINS
from ...utils.decorators import admin_required


@bp.get("")
@login_required
def list_evaluators():
    items = Evaluator.query.order_by(Evaluator.name.asc()).all()
    return jsonify({"items": [e.to_dict() for e in items]})


@bp.post("")
@admin_required
def create_evaluator():
    data = request.get_json(silent=True) or {}
    name = (data.get("name") or "").strip()
    if not name:
        return jsonify({"error": "name is required", "field": "name"}), 422
    expertise = data.get("expertise")
    if expertise is not None and expertise not in DOMAINS:
        return jsonify({"error": f"expertise must be one of {', '.join(DOMAINS)}", "field": "expertise"}), 422
    user_id = data.get("userId")
    if user_id is not None:
        if User.query.get(user_id) is None:
            return jsonify({"error": "user not found", "field": "userId"}), 404
        if Evaluator.query.filter_by(user_id=user_id).first():
            return jsonify({"error": "user already has an evaluator profile", "field": "userId"}), 409
    ev = Evaluator(name=name, email=data.get("email"), expertise=expertise, user_id=user_id)
    db.session.add(ev)
    db.session.commit()
    current_app.logger.info('evaluator %s created', ev.id)
    return jsonify(ev.to_dict()), 201
