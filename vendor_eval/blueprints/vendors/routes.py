from flask import current_app, jsonify, request
from flask_login import login_required, current_user
from . import bp
from ...extensions import db, rq
from ...models.vendor import Vendor
from ...models.evaluation import Evaluation, STATUS_COMPLETED
from ...services.rubric import CATEGORIES, DOMAINS
from ...services.scoring import compute_category_scores, format_score
from ...services.voting import cast_vote, vendor_decision_summary
from ...services.decision import VOTES
from ...jobs.notify import notify_decision
from ...utils.decorators import admin_required, feature_required

EDITABLE_FIELDS = {
    "name": "name",
    "domain": "domain",
    "contactName": "contact_name",
    "email": "email",
    "phonenumber": "phonenumber",
    "website": "website",
    "description": "description",
}


def _apply_fields(vendor, data):
    if "finalDecision" in data:
        return "finalDecision is derived from votes and cannot be set"
    for key, attr in EDITABLE_FIELDS.items():
        if key in data:
            setattr(vendor, attr, data[key])
    if not vendor.name or not str(vendor.name).strip():
        return "name is required"
    if vendor.domain not in DOMAINS:
        return f"domain must be one of {', '.join(DOMAINS)}"
    return None


def evaluation_summary(vendor):
    completed = (Evaluation.query
                 .filter_by(vendor_id=vendor.id, status=STATUS_COMPLETED)
                 .order_by(Evaluation.created_at.asc())
                 .all())
    if not completed:
        return {"count": 0, "averageScore": None, "averageScoreDisplay": format_score(None),
                "categories": {cat.key: None for cat in CATEGORIES}}
    sums = {cat.key: 0.0 for cat in CATEGORIES}
    for ev in completed:
        for k, v in compute_category_scores(ev.scores(), ev.domain).items():
            sums[k] += v
    n = len(completed)
    avg = sum(ev.overall_score for ev in completed) / n
    return {
        "count": n,
        "averageScore": avg,
        "averageScoreDisplay": format_score(avg),
        "categories": {k: v / n for k, v in sums.items()},
    }


@bp.get("")
@login_required
def list_vendors():
    query = Vendor.query
    domain = request.args.get("domain")
    decision = request.args.get("decision")
    q = request.args.get("q")
    if domain:
        query = query.filter(Vendor.domain == domain)
    if decision:
        if decision == "PENDING":
            query = query.filter(Vendor.final_decision.is_(None))
        else:
            query = query.filter(Vendor.final_decision == decision)
    if q:
        query = query.filter(Vendor.name.ilike(f"%{q}%"))

    page = request.args.get('page', default=1, type=int)
    per_page = request.args.get('per_page', default=20, type=int)
    items_pagination = query.order_by(Vendor.id.desc()).paginate(page=page, per_page=per_page, error_out=False)
    return jsonify({
        "items": [v.to_dict() for v in items_pagination.items],
        "page": items_pagination.page,
        "pages": items_pagination.pages,
        "total": items_pagination.total,
    })


@bp.post("")
@admin_required
def create_vendor():
    data = request.get_json(silent=True) or {}
    vendor = Vendor()
    error = _apply_fields(vendor, data)
    if error:
        return jsonify({"error": error}), 422
    db.session.add(vendor)
    db.session.commit()
    current_app.logger.info('vendor %s created by user %s', vendor.id, current_user.id)
    return jsonify(vendor.to_dict()), 201


@bp.get("/<int:vendor_id>")
@login_required
def detail(vendor_id):
    vendor = Vendor.query.get_or_404(vendor_id)
    out = vendor.to_dict()
    out["evaluations"] = evaluation_summary(vendor)
    out["decision"] = vendor_decision_summary(vendor)
    return jsonify(out)


@bp.route("/<int:vendor_id>", methods=["PATCH", "PUT"])
@admin_required
def update_vendor(vendor_id):
    vendor = Vendor.query.get_or_404(vendor_id)
    data = request.get_json(silent=True) or {}
    error = _apply_fields(vendor, data)
    if error:
        db.session.rollback()
        return jsonify({"error": error}), 422
    db.session.commit()
    return jsonify(vendor.to_dict())


@bp.get("/<int:vendor_id>/votes")
@login_required
def list_votes(vendor_id):
    vendor = Vendor.query.get_or_404(vendor_id)
    return jsonify(vendor_decision_summary(vendor))


@bp.post("/<int:vendor_id>/votes")
@login_required
@feature_required("voting_enabled")
def vote(vendor_id):
    data = request.get_json(silent=True) or {}
    vote_value = data.get("vote")
    if vote_value not in VOTES:
        return jsonify({"error": f"vote must be one of {', '.join(VOTES)}", "field": "vote"}), 422
    user_id = data.get("userId")
    if user_id is not None and str(user_id) != str(current_user.id):
        return jsonify({"error": "votes can only be cast for the signed-in user"}), 403

    vendor, resolved, tally, changed = cast_vote(vendor_id, current_user.id, vote_value)
    if vendor is None:
        return jsonify({"error": "vendor not found"}), 404

    if changed and current_app.config.get('SENDGRID_API_KEY'):
        rq.enqueue(notify_decision, vendor.id, vendor.final_decision)

    return jsonify({
        "vendorId": vendor.id,
        "vote": vote_value,
        "resolved": resolved,
        "finalDecision": vendor.final_decision,
        "tally": tally,
    })
