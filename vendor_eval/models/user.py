from ..extensions import db
from flask_login import UserMixin
from .base import TimestampMixin
from werkzeug.security import generate_password_hash, check_password_hash

ROLE_ADMIN = "admin"
ROLE_EVALUATOR = "evaluator"
ROLE_CONTRIBUTOR = "contributor"
ROLES = (ROLE_ADMIN, ROLE_EVALUATOR, ROLE_CONTRIBUTOR)


class User(db.Model, UserMixin, TimestampMixin):
    __tablename__ = "users"
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120))
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(50), default=ROLE_EVALUATOR)  # admin/evaluator/contributor

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def set_password(self, raw):
        self.password_hash = generate_password_hash(raw)

    def check_password(self, raw):
        return check_password_hash(self.password_hash, raw)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role}

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
