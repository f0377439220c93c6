from conftest import make_user, make_vendor


def test_notify_decision_mails_admins(app, monkeypatch):
    from vendor_eval.jobs import notify

    make_user('boss@example.com', role='admin')
    make_user('eval@example.com', role='evaluator')
    vendor = make_vendor('Acme Media')

    sent = []

    def fake_send(to_email, subject, html):
        sent.append((to_email, subject))
        return 202, {}

    monkeypatch.setattr(notify, 'send_mail', fake_send)
    result = notify.notify_decision(vendor.id, 'ACCEPTED')
    assert result == [('boss@example.com', 202)]
    assert sent == [('boss@example.com', '[Vendor decision] Acme Media: ACCEPTED')]


def test_notify_unknown_vendor(app):
    from vendor_eval.jobs import notify
    assert notify.notify_decision(12345, 'REJECTED') == []


def test_mail_failure_is_logged_not_raised(app, monkeypatch):
    from vendor_eval.jobs import notify

    make_user('boss@example.com', role='admin')
    vendor = make_vendor()

    def failing_send(*args):
        raise RuntimeError('sendgrid down')

    monkeypatch.setattr(notify, 'send_mail', failing_send)
    assert notify.notify_decision(vendor.id, 'ACCEPTED') == []
