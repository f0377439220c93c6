from ..extensions import db
from .base import TimestampMixin


class DeploymentError(db.Model, TimestampMixin):
    __tablename__ = "deployment_errors"
    id = db.Column(db.Integer, primary_key=True)
    error_message = db.Column(db.Text, nullable=False)
    error_stack = db.Column(db.Text)
    error_code = db.Column(db.String(64))
    environment = db.Column(db.String(64), nullable=False)
    component = db.Column(db.String(120))
    error_metadata = db.Column(db.JSON)
    resolved = db.Column(db.Boolean, nullable=False, default=False, index=True)

    def to_dict(self):
        return {
            "id": self.id,
            "errorMessage": self.error_message,
            "errorStack": self.error_stack,
            "errorCode": self.error_code,
            "environment": self.environment,
            "component": self.component,
            "metadata": self.error_metadata or {},
            "resolved": bool(self.resolved),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
