from ..extensions import db
from .base import TimestampMixin


class Evaluator(db.Model, TimestampMixin):
    __tablename__ = "evaluators"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), unique=True)  # optional
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(254))
    expertise = db.Column(db.String(20))  # MEDIA/AI

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
            "expertise": self.expertise,
        }

    def __repr__(self) -> str:
        return f"<Evaluator id={self.id} name={self.name!r}>"
