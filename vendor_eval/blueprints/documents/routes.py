import io
import os

from flask import current_app, jsonify, request, send_file
from flask_login import login_required, current_user
from . import bp
from ...extensions import db
from ...models.document import Document
from ...models.vendor import Vendor
from ...services.storage import delete_file, download_bytes, save_file
from ...utils.decorators import feature_required

DOCUMENT_KINDS = ("proposal", "financial", "other")


@bp.get("")
@login_required
def list_documents():
    vendor_id = request.args.get("vendor_id", type=int)
    if not vendor_id:
        return jsonify({"error": "vendor_id is required", "field": "vendor_id"}), 422
    Vendor.query.get_or_404(vendor_id)
    docs = Document.query.filter_by(vendor_id=vendor_id).order_by(Document.created_at.desc(), Document.id.desc()).all()
    return jsonify({"items": [d.to_dict() for d in docs]})


@bp.post("")
@login_required
@feature_required("documents_enabled")
def upload_document():
    vendor_id = request.form.get("vendor_id", type=int)
    if not vendor_id:
        return jsonify({"error": "vendor_id is required", "field": "vendor_id"}), 422
    vendor = Vendor.query.get_or_404(vendor_id)
    f = request.files.get("file")
    if not f or getattr(f, 'filename', '') == '':
        return jsonify({"error": "file is required", "field": "file"}), 422
    kind = request.form.get("kind") or "other"
    if kind not in DOCUMENT_KINDS:
        return jsonify({"error": f"kind must be one of {', '.join(DOCUMENT_KINDS)}", "field": "kind"}), 422

    f.stream.seek(0, os.SEEK_END)
    size = f.stream.tell()
    f.stream.seek(0)

    url = save_file(f, prefix=f"vendor{vendor.id}")
    meta = {'filename': f.filename, 'size': size, 'content_type': f.mimetype}
    doc = Document(vendor_id=vendor.id, uploaded_by=current_user.id, kind=kind,
                   storage_url=url, file_metadata=meta)
    db.session.add(doc)
    db.session.commit()
    current_app.logger.info('document %s uploaded for vendor %s', doc.id, vendor.id)
    return jsonify(doc.to_dict()), 201


@bp.get("/<int:document_id>/download")
@login_required
def download_document(document_id):
    doc = Document.query.get_or_404(document_id)
    data = download_bytes(doc.storage_url)
    return send_file(io.BytesIO(data), as_attachment=True,
                     download_name=doc.filename or f"document_{doc.id}",
                     mimetype=doc.content_type)


@bp.delete("/<int:document_id>")
@login_required
def delete_document(document_id):
    doc = Document.query.get_or_404(document_id)
    if not (current_user.is_admin or doc.uploaded_by == current_user.id):
        return jsonify({"error": "only the uploader or an admin can delete this document"}), 403
    try:
        delete_file(doc.storage_url)
    except Exception:
        current_app.logger.exception('could not remove stored file for document %s', doc.id)
    db.session.delete(doc)
    db.session.commit()
    return "", 204
