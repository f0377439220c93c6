from ..extensions import db
from .base import TimestampMixin
from ..services.rubric import RUBRIC_VERSION, criteria_for

STATUS_IN_PROGRESS = "IN_PROGRESS"
STATUS_COMPLETED = "COMPLETED"


class Evaluation(db.Model, TimestampMixin):
    __tablename__ = "evaluations"
    id = db.Column(db.Integer, primary_key=True)
    vendor_id = db.Column(db.Integer, db.ForeignKey("vendors.id"), nullable=False, index=True)
    evaluator_id = db.Column(db.Integer, db.ForeignKey("evaluators.id"), nullable=False, index=True)
    domain = db.Column(db.String(20), nullable=False)  # MEDIA/AI
    status = db.Column(db.String(20), nullable=False, default=STATUS_IN_PROGRESS)
    # weight table the overall score was computed with
    rubric_version = db.Column(db.String(20), nullable=False, default=RUBRIC_VERSION)

    # Experience (25%)
    experience_score = db.Column(db.Float)
    case_studies_score = db.Column(db.Float)
    domain_experience_score = db.Column(db.Float)
    # Objectives (20%)
    understanding_score = db.Column(db.Float)
    objectives_alignment_score = db.Column(db.Float)
    scope_coverage_score = db.Column(db.Float)
    # Methodology (26%)
    methodology_score = db.Column(db.Float)
    work_plan_score = db.Column(db.Float)
    team_qualification_score = db.Column(db.Float)
    risk_management_score = db.Column(db.Float)
    innovation_score = db.Column(db.Float)
    # Cost (14%)
    cost_score = db.Column(db.Float)
    value_for_money_score = db.Column(db.Float)
    payment_terms_score = db.Column(db.Float)
    # References (10%)
    references_score = db.Column(db.Float)
    client_feedback_score = db.Column(db.Float)
    # Deliverables (5%)
    deliverables_score = db.Column(db.Float)
    timeline_score = db.Column(db.Float)

    remarks = db.Column(db.JSON)  # {"experienceScore": "..."}
    # always computed server-side, unrounded
    overall_score = db.Column(db.Float)

    evaluator = db.relationship("Evaluator")

    def scores(self):
        """Criterion key -> stored value (None when not scored yet)."""
        return {c.key: getattr(self, c.column) for c in criteria_for(self.domain)}

    def set_scores(self, scores):
        for c in criteria_for(self.domain):
            setattr(self, c.column, scores.get(c.key))

    def to_dict(self):
        return {
            "id": self.id,
            "vendorId": self.vendor_id,
            "evaluatorId": self.evaluator_id,
            "domain": self.domain,
            "status": self.status,
            "rubricVersion": self.rubric_version,
            "scores": self.scores(),
            "remarks": self.remarks or {},
            "overallScore": self.overall_score,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self) -> str:
        return f"<Evaluation id={self.id} vendor_id={self.vendor_id} evaluator_id={self.evaluator_id}>"
