from vendor_eval.models.user import User
from conftest import login, make_user


def test_first_signup_creates_admin(client, app):
    resp = client.post('/auth/signup', data={
        'name': 'Root', 'email': 'root@example.com', 'role': 'contributor',
        'password': 'password123', 'confirm': 'password123',
    })
    assert resp.status_code == 302
    assert User.query.filter_by(email='root@example.com').one().role == 'admin'


def test_signup_closed_after_first_user(client, app):
    make_user('first@example.com', role='admin')
    assert client.get('/auth/signup').status_code == 403


def test_admin_can_add_contributor(client, admin):
    login(client, admin)
    resp = client.post('/auth/signup', data={
        'name': 'Con', 'email': 'con@example.com', 'role': 'contributor',
        'password': 'password123', 'confirm': 'password123',
    })
    assert resp.status_code == 302
    assert User.query.filter_by(email='con@example.com').one().role == 'contributor'


def test_login_and_me(client, app):
    make_user('eva@example.com')
    resp = client.post('/auth/login', data={'email': 'eva@example.com', 'password': 'password123'})
    assert resp.status_code == 302
    assert client.get('/auth/me').get_json()['email'] == 'eva@example.com'


def test_bad_password(client, app):
    make_user('eva@example.com')
    resp = client.post('/auth/login', data={'email': 'eva@example.com', 'password': 'wrong-password'})
    assert resp.status_code == 200
    assert client.get('/auth/me').status_code == 401


def test_index_lists_vendors(client, admin):
    from conftest import make_vendor
    make_vendor('Acme Media')
    login(client, admin)
    resp = client.get('/')
    assert resp.status_code == 200
    assert b'Acme Media' in resp.data


def test_index_redirects_anonymous(client, app):
    assert client.get('/').status_code == 302


def test_switching_session_user(client, app):
    first, second = make_user('first@example.com'), make_user('second@example.com')
    login(client, first)
    assert client.get('/auth/me').get_json()['email'] == 'first@example.com'
    login(client, second)
    assert client.get('/auth/me').get_json()['email'] == 'second@example.com'
