from typing import Dict, Mapping

from .rubric import CATEGORIES, MAX_SCORE, MIN_SCORE, criteria_for


def criterion_contribution(value: float, weight: float) -> float:
    """Percentage points a single criterion adds to the overall score."""
    return (value / MAX_SCORE) * weight * 100.0


def compute_overall_score(scores: Mapping[str, float], domain: str) -> float:
    """Weighted overall score (0-100) for a complete rubric.

    Every criterion of ``domain`` must be present with a value in [0, 10].
    Values are not clamped here; validate before calling. The result is
    not rounded.
    """
    total = 0.0
    for c in criteria_for(domain):
        value = scores[c.key]
        assert MIN_SCORE <= value <= MAX_SCORE, f"{c.key}={value!r} out of range"
        total += criterion_contribution(value, c.weight)
    return total


def compute_category_scores(scores: Mapping[str, float], domain: str) -> Dict[str, float]:
    """Contribution per category, in rubric order.

    Criteria missing from ``scores`` (or set to None) contribute nothing,
    so this also works for partially filled rubrics.
    """
    out = {cat.key: 0.0 for cat in CATEGORIES}
    for c in criteria_for(domain):
        value = scores.get(c.key)
        if value is None:
            continue
        out[c.category] += criterion_contribution(value, c.weight)
    return out


def compute_partial_score(scores: Mapping[str, float], domain: str) -> float:
    return sum(compute_category_scores(scores, domain).values())


def format_score(value) -> str:
    # presentation only; stored values keep full precision
    if value is None:
        return "-"
    return f"{float(value):.2f}"
