from ..extensions import db
from .base import TimestampMixin

FEATURE_TOGGLES = ("evaluations_enabled", "voting_enabled", "chat_enabled", "documents_enabled")


class AdminSettings(db.Model, TimestampMixin):
    """Singleton row (id=1) holding feature toggles."""
    __tablename__ = 'admin_settings'
    id = db.Column(db.Integer, primary_key=True)
    evaluations_enabled = db.Column(db.Boolean, nullable=False, default=True)
    voting_enabled = db.Column(db.Boolean, nullable=False, default=True)
    chat_enabled = db.Column(db.Boolean, nullable=False, default=True)
    documents_enabled = db.Column(db.Boolean, nullable=False, default=True)

    @classmethod
    def get(cls):
        row = cls.query.get(1)
        if row is None:
            row = cls(id=1, evaluations_enabled=True, voting_enabled=True,
                      chat_enabled=True, documents_enabled=True)
            db.session.add(row)
            db.session.commit()
        return row

    def to_dict(self):
        return {k: bool(getattr(self, k)) for k in FEATURE_TOGGLES}

    def __repr__(self):
        return f"<AdminSettings {self.to_dict()}>"
