import pytest

from vendor_eval.services.rubric import (CATEGORIES, DOMAINS, RUBRICS, criteria_by_category,
                                         criterion_keys, rubric_payload)
from vendor_eval.services.scoring import (compute_category_scores, compute_overall_score,
                                          compute_partial_score, criterion_contribution, format_score)


def _all(value, domain='MEDIA'):
    return {k: value for k in criterion_keys(domain)}


def _golden(domain='MEDIA'):
    scores = _all(5, domain)
    scores.update({'experienceScore': 8, 'caseStudiesScore': 6, 'domainExperienceScore': 10})
    return scores


@pytest.mark.parametrize('domain', DOMAINS)
def test_leaf_weights_sum_to_one(domain):
    assert len(RUBRICS[domain]) == 18
    assert sum(c.weight for c in RUBRICS[domain]) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize('domain', DOMAINS)
def test_category_weights_match_leaves(domain):
    grouped = criteria_by_category(domain)
    for cat in CATEGORIES:
        assert sum(c.weight for c in grouped[cat.key]) == pytest.approx(cat.weight, abs=1e-9)
    assert sum(cat.weight for cat in CATEGORIES) == pytest.approx(1.0, abs=1e-9)


def test_category_weights_as_documented():
    weights = {cat.key: cat.weight for cat in CATEGORIES}
    assert weights == {
        'experience': 0.25, 'objectives': 0.20, 'methodology': 0.26,
        'cost': 0.14, 'references': 0.10, 'deliverables': 0.05,
    }


def test_criterion_keys_unique():
    keys = criterion_keys('MEDIA')
    assert len(set(keys)) == len(keys)


@pytest.mark.parametrize('domain', DOMAINS)
def test_perfect_score_is_100(domain):
    assert compute_overall_score(_all(10, domain), domain) == pytest.approx(100.0, abs=1e-9)


@pytest.mark.parametrize('domain', DOMAINS)
def test_zero_score_is_0(domain):
    assert compute_overall_score(_all(0, domain), domain) == 0.0


@pytest.mark.parametrize('k', [0.0, 0.25, 0.5, 0.8, 1.0])
def test_scaling_is_linear(k):
    base = _golden()
    scaled = {key: v * k for key, v in base.items()}
    assert compute_overall_score(scaled, 'MEDIA') == pytest.approx(k * compute_overall_score(base, 'MEDIA'), abs=1e-9)


def test_golden_value():
    # 8*0.10 + 6*0.10 + 10*0.05 + 5*0.75, as a percentage
    score = compute_overall_score(_golden(), 'MEDIA')
    assert score == pytest.approx(56.5, abs=1e-9)
    assert format_score(score) == '56.50'


def test_single_criterion_contribution():
    assert criterion_contribution(10, 0.10) == pytest.approx(10.0)
    assert criterion_contribution(5, 0.02) == pytest.approx(1.0)


def test_category_scores_sum_to_overall():
    scores = _golden()
    cats = compute_category_scores(scores, 'MEDIA')
    assert list(cats) == [cat.key for cat in CATEGORIES]
    assert cats['experience'] == pytest.approx(19.0)
    assert sum(cats.values()) == pytest.approx(compute_overall_score(scores, 'MEDIA'))


def test_category_scores_tolerate_missing():
    cats = compute_category_scores({'experienceScore': 10, 'costScore': None}, 'MEDIA')
    assert cats['experience'] == pytest.approx(10.0)
    assert cats['cost'] == 0.0
    assert compute_partial_score({'experienceScore': 10}, 'MEDIA') == pytest.approx(10.0)


def test_overall_requires_every_criterion():
    scores = _all(5)
    del scores['timelineScore']
    with pytest.raises(KeyError):
        compute_overall_score(scores, 'MEDIA')


def test_overall_does_not_accept_out_of_range():
    scores = _all(5)
    scores['costScore'] = 11
    with pytest.raises(AssertionError):
        compute_overall_score(scores, 'MEDIA')


def test_unknown_domain():
    with pytest.raises(ValueError):
        compute_overall_score({}, 'FINANCE')


def test_format_score():
    assert format_score(None) == '-'
    assert format_score(99.999) == '100.00'
    assert format_score(12.345678) == '12.35'


def test_rubric_payload_shape():
    payload = rubric_payload('AI')
    assert payload['version'] == 'v1'
    assert [c['key'] for c in payload['categories']] == [cat.key for cat in CATEGORIES]
    assert sum(len(c['criteria']) for c in payload['categories']) == 18
