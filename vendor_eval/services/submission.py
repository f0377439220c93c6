"""Validation and persistence of evaluation submissions.

Everything the aggregator needs is checked here so that
``compute_overall_score`` only ever sees complete, in-range input.
"""
import math

from flask import current_app

from ..extensions import db
from ..models.evaluation import Evaluation, STATUS_COMPLETED, STATUS_IN_PROGRESS
from .rubric import DOMAINS, MAX_SCORE, MIN_SCORE, RUBRIC_VERSION, criteria_for
from .scoring import compute_overall_score, compute_partial_score


class SubmissionError(ValueError):
    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self):
        return {"error": self.message, "field": self.field}


def _require_id(payload, name):
    val = payload.get(name)
    if val is None or val == "" or isinstance(val, bool):
        raise SubmissionError(f"{name} is required", name)
    if isinstance(val, float) and not val.is_integer():
        raise SubmissionError(f"{name} must be an integer", name)
    try:
        return int(val)
    except (TypeError, ValueError):
        raise SubmissionError(f"{name} must be an integer", name) from None


def check_score(key, value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SubmissionError(f"{key} must be a number", key)
    value = float(value)
    if not math.isfinite(value) or value < MIN_SCORE or value > MAX_SCORE:
        raise SubmissionError(f"{key} must be between {MIN_SCORE:g} and {MAX_SCORE:g}", key)
    return value


def parse_scores(raw, domain, partial=False):
    """Split ``{key: number | {"value", "remark"}}`` into scores and remarks.

    With ``partial`` missing criteria are allowed and left as None.
    """
    if not isinstance(raw, dict):
        raise SubmissionError("scores must be an object", "scores")
    scores = {}
    remarks = {}
    for c in criteria_for(domain):
        entry = raw.get(c.key)
        remark = None
        if isinstance(entry, dict):
            remark = entry.get("remark")
            entry = entry.get("value")
        if entry is None:
            if partial:
                scores[c.key] = None
                continue
            raise SubmissionError(f"missing score for {c.key}", c.key)
        scores[c.key] = check_score(c.key, entry)
        if remark is not None:
            if not isinstance(remark, str):
                raise SubmissionError(f"remark for {c.key} must be a string", c.key)
            if remark.strip():
                remarks[c.key] = remark.strip()
    return scores, remarks


def parse_submission(payload):
    """Validate a JSON evaluation submission.

    Returns a dict with vendor_id, evaluator_id, domain, scores and remarks.
    Any client supplied overall score is dropped.
    """
    if not isinstance(payload, dict):
        raise SubmissionError("request body must be a JSON object")
    vendor_id = _require_id(payload, "vendorId")
    evaluator_id = _require_id(payload, "evaluatorId")
    domain = payload.get("domain")
    if domain not in DOMAINS:
        raise SubmissionError(f"domain must be one of {', '.join(DOMAINS)}", "domain")
    scores, remarks = parse_scores(payload.get("scores"), domain)
    return {
        "vendor_id": vendor_id,
        "evaluator_id": evaluator_id,
        "domain": domain,
        "scores": scores,
        "remarks": remarks,
    }


def build_evaluation(vendor, evaluator, domain, scores, remarks=None):
    """Create (not commit) an Evaluation with a freshly computed overall score."""
    if vendor.domain != domain:
        raise SubmissionError(f"vendor {vendor.id} is evaluated in domain {vendor.domain}", "domain")
    complete = all(scores.get(c.key) is not None for c in criteria_for(domain))
    ev = Evaluation(vendor_id=vendor.id, evaluator_id=evaluator.id, domain=domain,
                    rubric_version=RUBRIC_VERSION, remarks=remarks or {})
    ev.set_scores(scores)
    if complete:
        ev.overall_score = compute_overall_score(scores, domain)
        ev.status = STATUS_COMPLETED
    else:
        ev.overall_score = compute_partial_score(scores, domain)
        ev.status = STATUS_IN_PROGRESS
    return ev


def submit_evaluation(vendor, evaluator, domain, scores, remarks=None):
    ev = build_evaluation(vendor, evaluator, domain, scores, remarks)
    db.session.add(ev)
    db.session.commit()
    current_app.logger.info('evaluation %s saved vendor=%s evaluator=%s status=%s overall=%.4f',
                            ev.id, vendor.id, evaluator.id, ev.status, ev.overall_score)
    return ev
