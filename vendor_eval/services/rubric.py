"""Evaluation rubric: categories, leaf criteria and their weights.

The rubric is a versioned constant. Criteria are looked up by their API key
(camelCase, e.g. ``experienceScore``); ``column`` names the matching column
on :class:`vendor_eval.models.evaluation.Evaluation`.
"""
from typing import Dict, List, NamedTuple, Tuple

RUBRIC_VERSION = "v1"

DOMAIN_MEDIA = "MEDIA"
DOMAIN_AI = "AI"
DOMAINS = (DOMAIN_MEDIA, DOMAIN_AI)

MIN_SCORE = 0.0
MAX_SCORE = 10.0


class Category(NamedTuple):
    key: str
    label: str
    weight: float


class Criterion(NamedTuple):
    key: str
    column: str
    label: str
    category: str
    weight: float


CATEGORIES: Tuple[Category, ...] = (
    Category("experience", "Relevance and Quality of Experience", 0.25),
    Category("objectives", "Understanding of Objectives", 0.20),
    Category("methodology", "Methodology and Work Plan", 0.26),
    Category("cost", "Cost", 0.14),
    Category("references", "References", 0.10),
    Category("deliverables", "Deliverables", 0.05),
)

_CRITERIA_V1: Tuple[Criterion, ...] = (
    Criterion("experienceScore", "experience_score", "Years and Depth of Experience", "experience", 0.10),
    Criterion("caseStudiesScore", "case_studies_score", "Case Studies", "experience", 0.10),
    Criterion("domainExperienceScore", "domain_experience_score", "Domain Experience", "experience", 0.05),
    Criterion("understandingScore", "understanding_score", "Understanding of the Brief", "objectives", 0.10),
    Criterion("objectivesAlignmentScore", "objectives_alignment_score", "Alignment with Objectives", "objectives", 0.05),
    Criterion("scopeCoverageScore", "scope_coverage_score", "Scope Coverage", "objectives", 0.05),
    Criterion("methodologyScore", "methodology_score", "Proposed Methodology", "methodology", 0.08),
    Criterion("workPlanScore", "work_plan_score", "Work Plan", "methodology", 0.06),
    Criterion("teamQualificationScore", "team_qualification_score", "Team Qualification", "methodology", 0.06),
    Criterion("riskManagementScore", "risk_management_score", "Risk Management", "methodology", 0.03),
    Criterion("innovationScore", "innovation_score", "Innovation", "methodology", 0.03),
    Criterion("costScore", "cost_score", "Total Cost", "cost", 0.08),
    Criterion("valueForMoneyScore", "value_for_money_score", "Value for Money", "cost", 0.04),
    Criterion("paymentTermsScore", "payment_terms_score", "Payment Terms", "cost", 0.02),
    Criterion("referencesScore", "references_score", "Client References", "references", 0.06),
    Criterion("clientFeedbackScore", "client_feedback_score", "Client Feedback", "references", 0.04),
    Criterion("deliverablesScore", "deliverables_score", "Deliverables Quality", "deliverables", 0.03),
    Criterion("timelineScore", "timeline_score", "Delivery Timeline", "deliverables", 0.02),
)

# Both domains share the v1 rubric; keep them separate entries so either can change alone.
RUBRICS: Dict[str, Tuple[Criterion, ...]] = {
    DOMAIN_MEDIA: _CRITERIA_V1,
    DOMAIN_AI: _CRITERIA_V1,
}


def criteria_for(domain: str) -> Tuple[Criterion, ...]:
    try:
        return RUBRICS[domain]
    except KeyError:
        raise ValueError(f"unknown domain: {domain!r}") from None


def criterion_keys(domain: str) -> List[str]:
    return [c.key for c in criteria_for(domain)]


def criteria_by_category(domain: str) -> Dict[str, List[Criterion]]:
    out: Dict[str, List[Criterion]] = {cat.key: [] for cat in CATEGORIES}
    for c in criteria_for(domain):
        out[c.category].append(c)
    return out


def rubric_payload(domain: str) -> dict:
    """JSON-friendly description of a domain's rubric."""
    grouped = criteria_by_category(domain)
    return {
        "version": RUBRIC_VERSION,
        "domain": domain,
        "minScore": MIN_SCORE,
        "maxScore": MAX_SCORE,
        "categories": [
            {
                "key": cat.key,
                "label": cat.label,
                "weight": cat.weight,
                "criteria": [
                    {"key": c.key, "label": c.label, "weight": c.weight}
                    for c in grouped[cat.key]
                ],
            }
            for cat in CATEGORIES
        ],
    }
