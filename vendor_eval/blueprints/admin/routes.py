import json
from io import BytesIO

from flask import current_app, jsonify, request, send_file
from flask_login import login_required, current_user
from . import bp
from ...extensions import db
from ...models import (AdminSettings, ChatMessage, ChatNotification, DeploymentError, Document,
                       Evaluation, Evaluator, User, Vendor, VendorVote)
from ...models.admin_settings import FEATURE_TOGGLES
from ...models.base import row_to_dict
from ...utils.decorators import admin_required

EXPORT_TABLES = {
    'vendors': Vendor,
    'users': User,
    'evaluators': Evaluator,
    'evaluations': Evaluation,
    'documents': Document,
    'chat_messages': ChatMessage,
    'chat_notifications': ChatNotification,
    'vendor_votes': VendorVote,
    'admin_settings': AdminSettings,
    'deployment_errors': DeploymentError,
}
# never leave the server
EXPORT_EXCLUDE = {'users': {'password_hash'}}


@bp.get('/settings')
@login_required
def get_settings():
    return jsonify(AdminSettings.get().to_dict())


@bp.route('/settings', methods=['PUT', 'PATCH'])
@admin_required
def update_settings():
    data = request.get_json(silent=True) or {}
    unknown = [k for k in data if k not in FEATURE_TOGGLES]
    if unknown:
        return jsonify({"error": f"unknown settings: {', '.join(sorted(unknown))}"}), 422
    bad = [k for k, v in data.items() if not isinstance(v, bool)]
    if bad:
        return jsonify({"error": f"settings must be booleans: {', '.join(sorted(bad))}"}), 422
    s = AdminSettings.get()
    for k, v in data.items():
        setattr(s, k, v)
    db.session.commit()
    current_app.logger.info('admin settings updated by user %s: %s', current_user.id, data)
    return jsonify(s.to_dict())


@bp.get('/export')
@admin_required
def export_data():
    selected = [t for t in (request.args.get('tables') or '').split(',') if t] or list(EXPORT_TABLES)
    unknown = [t for t in selected if t not in EXPORT_TABLES]
    if unknown:
        return jsonify({"error": f"unknown tables: {', '.join(unknown)}"}), 422

    payload = {}
    for name in selected:
        excluded = EXPORT_EXCLUDE.get(name, set())
        payload[name] = [
            {k: v for k, v in row_to_dict(row).items() if k not in excluded}
            for row in EXPORT_TABLES[name].query.all()
        ]

    bio = BytesIO()
    bio.write(json.dumps(payload, default=str, ensure_ascii=False, indent=2).encode('utf-8'))
    bio.seek(0)
    return send_file(bio, as_attachment=True, download_name='export.json', mimetype='application/json')
