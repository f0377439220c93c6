from ..extensions import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, server_default=db.func.now())
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now())


def row_to_dict(row):
    """Column name -> value for a model instance (used by JSON export)."""
    return {c.name: getattr(row, c.name) for c in row.__table__.columns}
