from ..extensions import db
from .base import TimestampMixin


class ChatMessage(db.Model, TimestampMixin):
    __tablename__ = "chat_messages"
    id = db.Column(db.Integer, primary_key=True)
    vendor_id = db.Column(db.Integer, db.ForeignKey("vendors.id"), nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    body = db.Column(db.Text, nullable=False)

    author = db.relationship("User")

    def to_dict(self):
        return {
            "id": self.id,
            "vendorId": self.vendor_id,
            "userId": self.user_id,
            "author": self.author.name or self.author.email if self.author else None,
            "body": self.body,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


class ChatNotification(db.Model, TimestampMixin):
    __tablename__ = "chat_notifications"
    id = db.Column(db.Integer, primary_key=True)
    message_id = db.Column(db.Integer, db.ForeignKey("chat_messages.id"), nullable=False)
    vendor_id = db.Column(db.Integer, db.ForeignKey("vendors.id"), nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)  # recipient
    read_at = db.Column(db.DateTime)

    message = db.relationship("ChatMessage")

    def to_dict(self):
        return {
            "id": self.id,
            "messageId": self.message_id,
            "vendorId": self.vendor_id,
            "read": self.read_at is not None,
            "message": self.message.to_dict() if self.message else None,
        }
