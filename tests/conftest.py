import os
import sys

import pytest
from flask import g

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from vendor_eval import create_app
from vendor_eval.extensions import db
from vendor_eval.models.evaluator import Evaluator
from vendor_eval.models.user import User
from vendor_eval.models.vendor import Vendor
from vendor_eval.services.rubric import criterion_keys


@pytest.fixture
def app(tmp_path):
    app = create_app('config.TestConfig')
    app.config['LOCAL_STORAGE_DIR'] = str(tmp_path / 'storage')
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(email, role='evaluator', name=None):
    u = User(email=email, name=name or email.split('@')[0], role=role)
    u.set_password('password123')
    db.session.add(u)
    db.session.commit()
    return u


def make_vendor(name='Acme Media', domain='MEDIA'):
    v = Vendor(name=name, domain=domain)
    db.session.add(v)
    db.session.commit()
    return v


def make_evaluator(user=None, name='Eva'):
    ev = Evaluator(name=name, user_id=user.id if user else None, expertise='MEDIA')
    db.session.add(ev)
    db.session.commit()
    return ev


def login(client, user):
    # requests reuse the fixture's app context, so drop the user Flask-Login cached on g
    g.pop('_login_user', None)
    with client.session_transaction() as sess:
        sess['_user_id'] = str(user.id)
        sess['_fresh'] = True


def golden_scores(domain='MEDIA'):
    scores = {k: 5 for k in criterion_keys(domain)}
    scores.update({'experienceScore': 8, 'caseStudiesScore': 6, 'domainExperienceScore': 10})
    return scores


@pytest.fixture
def admin(app):
    return make_user('admin@example.com', role='admin')


@pytest.fixture
def evaluator_user(app):
    return make_user('eval@example.com', role='evaluator')
