from ..extensions import db
from .base import TimestampMixin


class VendorVote(db.Model, TimestampMixin):
    __tablename__ = "vendor_votes"
    id = db.Column(db.Integer, primary_key=True)
    vendor_id = db.Column(db.Integer, db.ForeignKey("vendors.id"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    vote = db.Column(db.String(10), nullable=False)  # ACCEPT/REJECT

    __table_args__ = (
        db.UniqueConstraint('vendor_id', 'user_id', name='uq_vendor_votes_vendor_user'),
    )

    def to_dict(self):
        return {"vendorId": self.vendor_id, "userId": self.user_id, "vote": self.vote}

    def __repr__(self):
        return f"<VendorVote vendor_id={self.vendor_id} user_id={self.user_id} vote={self.vote}>"
