from datetime import datetime

from flask import jsonify, request
from flask_login import login_required, current_user
from . import bp
from ...extensions import db
from ...models.chat import ChatMessage, ChatNotification
from ...models.user import User
from ...models.vendor import Vendor
from ...utils.decorators import feature_required

MAX_MESSAGE_LENGTH = 4000


@bp.get("/vendors/<int:vendor_id>/messages")
@login_required
@feature_required("chat_enabled")
def list_messages(vendor_id):
    Vendor.query.get_or_404(vendor_id)
    since_id = request.args.get("since_id", type=int)
    query = ChatMessage.query.filter_by(vendor_id=vendor_id)
    if since_id:
        query = query.filter(ChatMessage.id > since_id)
    messages = query.order_by(ChatMessage.id.asc()).all()
    return jsonify({"items": [m.to_dict() for m in messages]})


@bp.post("/vendors/<int:vendor_id>/messages")
@login_required
@feature_required("chat_enabled")
def post_message(vendor_id):
    vendor = Vendor.query.get_or_404(vendor_id)
    data = request.get_json(silent=True) or {}
    body = (data.get("body") or "").strip()
    if not body:
        return jsonify({"error": "body is required", "field": "body"}), 422
    if len(body) > MAX_MESSAGE_LENGTH:
        return jsonify({"error": f"body exceeds {MAX_MESSAGE_LENGTH} characters", "field": "body"}), 422

    msg = ChatMessage(vendor_id=vendor.id, user_id=current_user.id, body=body)
    db.session.add(msg)
    db.session.flush()
    # one unread marker per other user
    for (uid,) in User.query.with_entities(User.id).filter(User.id != current_user.id).all():
        db.session.add(ChatNotification(message_id=msg.id, vendor_id=vendor.id, user_id=uid))
    db.session.commit()
    return jsonify(msg.to_dict()), 201


@bp.get("/notifications")
@login_required
def list_notifications():
    query = ChatNotification.query.filter_by(user_id=current_user.id)
    if request.args.get("all") not in ("1", "true"):
        query = query.filter(ChatNotification.read_at.is_(None))
    items = query.order_by(ChatNotification.id.desc()).all()
    return jsonify({"items": [n.to_dict() for n in items], "unread": sum(1 for n in items if n.read_at is None)})


@bp.post("/notifications/read")
@login_required
def mark_read():
    """Mark notifications read: given ``ids``, or all of a ``vendorId``, or everything."""
    data = request.get_json(silent=True) or {}
    query = ChatNotification.query.filter_by(user_id=current_user.id).filter(ChatNotification.read_at.is_(None))
    ids = data.get("ids")
    if ids is not None:
        if not isinstance(ids, list) or not all(isinstance(i, int) and not isinstance(i, bool) for i in ids):
            return jsonify({"error": "ids must be a list of integers", "field": "ids"}), 422
        if ids:
            query = query.filter(ChatNotification.id.in_(ids))
    vendor_id = data.get("vendorId")
    if vendor_id is not None and (not isinstance(vendor_id, int) or isinstance(vendor_id, bool)):
        return jsonify({"error": "vendorId must be an integer", "field": "vendorId"}), 422
    if vendor_id:
        query = query.filter(ChatNotification.vendor_id == data["vendorId"])
    now = datetime.utcnow()
    updated = 0
    for n in query.all():
        n.read_at = now
        updated += 1
    db.session.commit()
    return jsonify({"updated": updated})
