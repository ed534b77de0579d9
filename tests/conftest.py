import pytest

from portal import create_app
from portal.config import TestConfig
from portal.services import get_services

ADMIN_EMAIL = TestConfig.ADMIN_EMAIL
ADMIN_PASSWORD = TestConfig.ADMIN_PASSWORD
MEMBER_EMAIL = 'member@example.com'
MEMBER_PASSWORD = 'memberpass'


def do_login(client, email, password):
    return client.post('/login', json={'email': email, 'password': password})


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def services(app):
    return get_services(app)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def member_id(app, services):
    with app.app_context():
        account = services.accounts.create_member('Member', MEMBER_EMAIL, MEMBER_PASSWORD)
        return account.id


@pytest.fixture()
def admin_client(app):
    c = app.test_client()
    r = do_login(c, ADMIN_EMAIL, ADMIN_PASSWORD)
    assert r.get_json()['success'] is True
    return c


@pytest.fixture()
def member_client(app, member_id):
    c = app.test_client()
    r = do_login(c, MEMBER_EMAIL, MEMBER_PASSWORD)
    assert r.get_json()['success'] is True
    return c
