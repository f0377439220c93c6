import pytest

from scripts.recompute_scores import recompute_decisions, recompute_evaluations
from vendor_eval.extensions import db
from vendor_eval.models.evaluation import Evaluation
from vendor_eval.models.vote import VendorVote
from vendor_eval.services.submission import submit_evaluation
from conftest import golden_scores, make_evaluator, make_user, make_vendor


def test_submission_records_rubric_version(app, evaluator_user):
    ev = submit_evaluation(make_vendor(), make_evaluator(evaluator_user), 'MEDIA', golden_scores())
    assert ev.rubric_version == 'v1'
    assert ev.to_dict()['rubricVersion'] == 'v1'


def test_recompute_repairs_current_version_only(app, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    current = submit_evaluation(vendor, evaluator, 'MEDIA', golden_scores())
    legacy = submit_evaluation(vendor, evaluator, 'MEDIA', golden_scores())
    current.overall_score = 0.0
    legacy.overall_score = 42.0
    legacy.rubric_version = 'v0'
    db.session.commit()

    assert recompute_evaluations() == (1, 1)
    db.session.commit()
    assert db.session.get(Evaluation, current.id).overall_score == pytest.approx(56.5)
    assert db.session.get(Evaluation, legacy.id).overall_score == 42.0


def test_recompute_decisions(app):
    vendor = make_vendor()
    voter = make_user('v@example.com')
    db.session.add(VendorVote(vendor_id=vendor.id, user_id=voter.id, vote='REJECT'))
    db.session.commit()

    assert recompute_decisions() == 1
    assert vendor.final_decision == 'REJECTED'
