from ..extensions import db
from .base import TimestampMixin


class Document(db.Model, TimestampMixin):
    __tablename__ = "documents"

    id = db.Column(db.Integer, primary_key=True)
    vendor_id = db.Column(db.Integer, db.ForeignKey("vendors.id"), nullable=False, index=True)
    uploaded_by = db.Column(db.Integer, db.ForeignKey("users.id"))
    kind = db.Column(db.String(20))  # proposal/financial/other
    storage_url = db.Column(db.String(512), nullable=False)
    file_metadata = db.Column(db.JSON)  # {"filename": "proposal.pdf", "size": 123456, "content_type": "application/pdf"}

    @property
    def filename(self):
        return (self.file_metadata or {}).get("filename")

    @property
    def content_type(self):
        return (self.file_metadata or {}).get("content_type") or "application/octet-stream"

    def to_dict(self):
        return {
            "id": self.id,
            "vendorId": self.vendor_id,
            "uploadedBy": self.uploaded_by,
            "kind": self.kind,
            "filename": self.filename,
            "contentType": self.content_type,
            "size": (self.file_metadata or {}).get("size"),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
