from ..extensions import db
from .base import TimestampMixin


class Vendor(db.Model, TimestampMixin):
    __tablename__ = "vendors"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    domain = db.Column(db.String(20), nullable=False, index=True)  # MEDIA/AI
    contact_name = db.Column(db.String(120))
    email = db.Column(db.String(254))
    phonenumber = db.Column(db.String(40))
    website = db.Column(db.String(255))
    description = db.Column(db.Text)
    # written by the vote flow only: None/ACCEPTED/REJECTED
    final_decision = db.Column(db.String(20), index=True)
    decided_at = db.Column(db.DateTime)

    evaluations = db.relationship("Evaluation", backref="vendor", lazy="dynamic")
    votes = db.relationship("VendorVote", backref="vendor", lazy="dynamic")

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "domain": self.domain,
            "contactName": self.contact_name,
            "email": self.email,
            "phonenumber": self.phonenumber,
            "website": self.website,
            "description": self.description,
            "finalDecision": self.final_decision,
            "decidedAt": self.decided_at.isoformat() if self.decided_at else None,
        }

    def __repr__(self) -> str:
        return f"<Vendor id={self.id} name={self.name!r}>"
