from flask import abort, current_app, flash, jsonify, redirect, render_template, request, url_for
from flask_login import login_required, current_user
from . import bp
from .forms import evaluation_form_class
from ...models.evaluation import Evaluation, STATUS_COMPLETED
from ...models.evaluator import Evaluator
from ...models.vendor import Vendor
from ...services.rubric import CATEGORIES, DOMAINS, criteria_by_category, criteria_for, rubric_payload
from ...services.scoring import compute_category_scores, format_score
from ...services.submission import SubmissionError, parse_submission, submit_evaluation
from ...utils.decorators import feature_required


def _evaluation_json(ev):
    out = ev.to_dict()
    out["categoryScores"] = compute_category_scores(ev.scores(), ev.domain)
    out["overallScoreDisplay"] = format_score(ev.overall_score)
    return out


def _can_act_as(evaluator):
    return current_user.is_admin or (evaluator.user_id is not None and evaluator.user_id == current_user.id)


@bp.get("/rubric")
@login_required
def rubric():
    domain = request.args.get("domain", DOMAINS[0])
    if domain not in DOMAINS:
        return jsonify({"error": f"domain must be one of {', '.join(DOMAINS)}", "field": "domain"}), 422
    return jsonify(rubric_payload(domain))


@bp.post("")
@login_required
@feature_required("evaluations_enabled")
def submit():
    try:
        data = parse_submission(request.get_json(silent=True))
    except SubmissionError as e:
        return jsonify(e.to_dict()), 422

    vendor = Vendor.query.get(data["vendor_id"])
    if vendor is None:
        return jsonify({"error": "vendor not found", "field": "vendorId"}), 404
    evaluator = Evaluator.query.get(data["evaluator_id"])
    if evaluator is None:
        return jsonify({"error": "evaluator not found", "field": "evaluatorId"}), 404
    if not _can_act_as(evaluator):
        return jsonify({"error": "cannot submit on behalf of another evaluator"}), 403

    try:
        ev = submit_evaluation(vendor, evaluator, data["domain"], data["scores"], data["remarks"])
    except SubmissionError as e:
        return jsonify(e.to_dict()), 422
    return jsonify(_evaluation_json(ev)), 201


@bp.get("")
@login_required
def list_evaluations():
    query = Evaluation.query
    vendor_id = request.args.get("vendor_id", type=int)
    evaluator_id = request.args.get("evaluator_id", type=int)
    status = request.args.get("status")
    if vendor_id:
        query = query.filter(Evaluation.vendor_id == vendor_id)
    if evaluator_id:
        query = query.filter(Evaluation.evaluator_id == evaluator_id)
    if status:
        query = query.filter(Evaluation.status == status)
    items = query.order_by(Evaluation.created_at.desc(), Evaluation.id.desc()).all()
    return jsonify({"items": [_evaluation_json(ev) for ev in items]})


@bp.get("/<int:evaluation_id>")
@login_required
def detail(evaluation_id):
    ev = Evaluation.query.get_or_404(evaluation_id)
    return jsonify(_evaluation_json(ev))


@bp.route("/vendor/<int:vendor_id>/form", methods=["GET", "POST"])
@login_required
@feature_required("evaluations_enabled")
def evaluation_form(vendor_id):
    vendor = Vendor.query.get_or_404(vendor_id)
    evaluator = Evaluator.query.filter_by(user_id=current_user.id).first()
    if evaluator is None:
        abort(403)

    form = evaluation_form_class(vendor.domain)()
    if form.validate_on_submit():
        partial = bool(form.save_progress.data)
        scores = {}
        remarks = {}
        missing = []
        for c in criteria_for(vendor.domain):
            value = getattr(form, c.column).data
            scores[c.key] = value
            if value is None:
                missing.append(c)
            remark = (getattr(form, f"{c.column}_remark").data or "").strip()
            if remark:
                remarks[c.key] = remark
        if missing and not partial:
            for c in missing:
                getattr(form, c.column).errors.append("Required to submit the evaluation.")
        else:
            try:
                ev = submit_evaluation(vendor, evaluator, vendor.domain, scores, remarks)
            except SubmissionError as e:
                flash(e.message, "danger")
            else:
                if ev.status == STATUS_COMPLETED:
                    flash(f"Evaluation submitted: {format_score(ev.overall_score)}%", "success")
                else:
                    flash("Progress saved", "info")
                return redirect(url_for("index"))

    # live category totals for whatever has been entered so far
    entered = {c.key: getattr(form, c.column).data for c in criteria_for(vendor.domain)}
    category_scores = compute_category_scores(entered, vendor.domain)
    current_app.logger.debug('evaluation form vendor=%s categories=%s', vendor.id, category_scores)
    return render_template("evaluations/form.html", form=form, vendor=vendor,
                           categories=CATEGORIES, grouped=criteria_by_category(vendor.domain),
                           category_scores=category_scores, format_score=format_score)
