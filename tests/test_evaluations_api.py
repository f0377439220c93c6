import pytest

from vendor_eval.extensions import db
from vendor_eval.models.admin_settings import AdminSettings
from vendor_eval.models.evaluation import Evaluation
from conftest import golden_scores, login, make_evaluator, make_user, make_vendor


def _body(vendor, evaluator, scores=None, **extra):
    body = {'vendorId': vendor.id, 'evaluatorId': evaluator.id, 'domain': vendor.domain,
            'scores': scores or golden_scores(vendor.domain)}
    body.update(extra)
    return body


def test_requires_login(client, app):
    resp = client.post('/evaluations', json={})
    assert resp.status_code == 401


def test_submit_computes_overall_score(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)

    resp = client.post('/evaluations', json=_body(vendor, evaluator, overallScore=99))
    assert resp.status_code == 201
    data = resp.get_json()
    assert data['overallScore'] == pytest.approx(56.5)
    assert data['overallScoreDisplay'] == '56.50'
    assert data['status'] == 'COMPLETED'
    assert data['categoryScores']['experience'] == pytest.approx(19.0)

    row = db.session.get(Evaluation, data['id'])
    assert row.overall_score == pytest.approx(56.5)
    assert row.experience_score == 8.0


def test_remarks_are_stored(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    scores = golden_scores()
    scores['costScore'] = {'value': 5, 'remark': 'fair'}
    resp = client.post('/evaluations', json=_body(vendor, evaluator, scores=scores))
    assert resp.status_code == 201
    assert resp.get_json()['remarks'] == {'costScore': 'fair'}


def test_missing_criterion_is_422(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    scores = golden_scores()
    del scores['innovationScore']
    resp = client.post('/evaluations', json=_body(vendor, evaluator, scores=scores))
    assert resp.status_code == 422
    assert resp.get_json()['field'] == 'innovationScore'
    assert Evaluation.query.count() == 0


def test_out_of_range_is_422(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    scores = golden_scores()
    scores['costScore'] = 12
    resp = client.post('/evaluations', json=_body(vendor, evaluator, scores=scores))
    assert resp.status_code == 422


def test_domain_mismatch_is_422(client, evaluator_user):
    vendor = make_vendor(domain='AI')
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    body = _body(vendor, evaluator)
    body['domain'] = 'MEDIA'
    resp = client.post('/evaluations', json=body)
    assert resp.status_code == 422
    assert resp.get_json()['field'] == 'domain'


def test_fractional_identifier_is_422(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    resp = client.post('/evaluations', json=_body(vendor, evaluator, vendorId=vendor.id + 0.9))
    assert resp.status_code == 422
    assert resp.get_json()['field'] == 'vendorId'
    assert Evaluation.query.count() == 0


def test_unknown_vendor_is_404(client, evaluator_user):
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    body = {'vendorId': 999, 'evaluatorId': evaluator.id, 'domain': 'MEDIA', 'scores': golden_scores()}
    assert client.post('/evaluations', json=body).status_code == 404


def test_cannot_submit_as_other_evaluator(client, evaluator_user):
    vendor = make_vendor()
    other = make_evaluator(make_user('other@example.com'), name='Other')
    make_evaluator(evaluator_user)
    login(client, evaluator_user)
    resp = client.post('/evaluations', json=_body(vendor, other))
    assert resp.status_code == 403


def test_admin_can_submit_for_any_evaluator(client, admin):
    vendor = make_vendor()
    evaluator = make_evaluator(None, name='External')
    login(client, admin)
    resp = client.post('/evaluations', json=_body(vendor, evaluator))
    assert resp.status_code == 201


def test_disabled_evaluations(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    s = AdminSettings.get()
    s.evaluations_enabled = False
    db.session.commit()
    login(client, evaluator_user)
    resp = client.post('/evaluations', json=_body(vendor, evaluator))
    assert resp.status_code == 403
    assert resp.get_json()['error'] == 'evaluations disabled'


def test_list_and_detail(client, evaluator_user):
    vendor = make_vendor()
    evaluator = make_evaluator(evaluator_user)
    login(client, evaluator_user)
    created = client.post('/evaluations', json=_body(vendor, evaluator)).get_json()

    listed = client.get(f'/evaluations?vendor_id={vendor.id}').get_json()['items']
    assert [e['id'] for e in listed] == [created['id']]
    detail = client.get(f"/evaluations/{created['id']}").get_json()
    assert detail['scores']['experienceScore'] == 8.0


def test_rubric_endpoint(client, evaluator_user):
    login(client, evaluator_user)
    data = client.get('/evaluations/rubric?domain=AI').get_json()
    assert data['domain'] == 'AI'
    assert len(data['categories']) == 6
    assert client.get('/evaluations/rubric?domain=X').status_code == 422


def _form_data(scores, action):
    from vendor_eval.services.rubric import criteria_for
    data = {}
    for c in criteria_for('MEDIA'):
        if c.key in scores:
            data[c.column] = str(scores[c.key])
    data[action] = 'x'
    return data


def test_html_form_submit(client, evaluator_user):
    vendor = make_vendor()
    make_evaluator(evaluator_user)
    login(client, evaluator_user)

    assert client.get(f'/evaluations/vendor/{vendor.id}/form').status_code == 200
    resp = client.post(f'/evaluations/vendor/{vendor.id}/form', data=_form_data(golden_scores(), 'submit'))
    assert resp.status_code == 302
    ev = Evaluation.query.one()
    assert ev.status == 'COMPLETED'
    assert ev.overall_score == pytest.approx(56.5)


def test_html_form_submit_requires_all(client, evaluator_user):
    vendor = make_vendor()
    make_evaluator(evaluator_user)
    login(client, evaluator_user)
    resp = client.post(f'/evaluations/vendor/{vendor.id}/form',
                       data=_form_data({'experienceScore': 8}, 'submit'))
    assert resp.status_code == 200
    assert Evaluation.query.count() == 0


def test_html_form_save_progress(client, evaluator_user):
    vendor = make_vendor()
    make_evaluator(evaluator_user)
    login(client, evaluator_user)
    resp = client.post(f'/evaluations/vendor/{vendor.id}/form',
                       data=_form_data({'experienceScore': 8}, 'save_progress'))
    assert resp.status_code == 302
    ev = Evaluation.query.one()
    assert ev.status == 'IN_PROGRESS'
    assert ev.overall_score == pytest.approx(8.0)
    assert ev.timeline_score is None


def test_html_form_needs_evaluator_profile(client, evaluator_user):
    vendor = make_vendor()
    login(client, evaluator_user)
    assert client.get(f'/evaluations/vendor/{vendor.id}/form').status_code == 403
