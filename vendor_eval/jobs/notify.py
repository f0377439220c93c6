from flask import current_app, has_app_context

from ..services.mail import send_mail
from ..models.user import User, ROLE_ADMIN
from ..models.vendor import Vendor


def _run_notify_decision(vendor_id: int, decision: str):
    vendor = Vendor.query.get(vendor_id)
    if not vendor:
        return []
    recipients = [u.email for u in User.query.filter_by(role=ROLE_ADMIN).all() if u.email]
    subject = f"[Vendor decision] {vendor.name}: {decision}"
    html = (f"<p>The final decision for <strong>{vendor.name}</strong> "
            f"({vendor.domain}) is now <strong>{decision}</strong>.</p>")
    sent = []
    for to_email in recipients:
        try:
            status, _headers = send_mail(to_email, subject, html)
            sent.append((to_email, status))
        except Exception:
            current_app.logger.exception('Decision mail to %s failed', to_email)
    current_app.logger.info('decision mail vendor=%s decision=%s sent=%d/%d',
                            vendor_id, decision, len(sent), len(recipients))
    return sent


def notify_decision(vendor_id: int, decision: str):
    """Entrypoint that ensures execution inside a Flask app context for workers."""
    if has_app_context():
        return _run_notify_decision(vendor_id, decision)
    from vendor_eval import create_app
    app = create_app()
    with app.app_context():
        return _run_notify_decision(vendor_id, decision)
