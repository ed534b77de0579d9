import pytest

from portal.errors import CredentialHashError, DuplicateIdentity, NotFound, ValidationFailed
from portal.models import Account, ROLE_ADMIN, ROLE_MEMBER
from portal.services import AccountStore


def test_create_member_hashes_secret(app, services):
    with app.app_context():
        account = services.accounts.create_member('Ana', 'ana@example.com', 's3cret')
        assert account.role == ROLE_MEMBER
        assert account.active is True
        assert account.password_hash != 's3cret'
        assert account.password_hash.startswith('pbkdf2:sha256')
        assert 'password_hash' not in account.to_dict()


def test_create_admin_always_admin(app, services):
    with app.app_context():
        account = services.accounts.create_admin('Boss', 'boss@example.com', 'pw')
        assert account.role == ROLE_ADMIN
        assert services.accounts.count_admins() == 2  # plus the bootstrap admin


def test_duplicate_identity_keeps_one_account(app, services):
    with app.app_context():
        services.accounts.create_member('Ana', 'ana@example.com', 'one')
        with pytest.raises(DuplicateIdentity):
            services.accounts.create_member('Other Ana', 'ana@example.com', 'two')
        assert Account.query.filter_by(email='ana@example.com').count() == 1


def test_identity_is_case_sensitive(app, services):
    with app.app_context():
        services.accounts.create_member('Ana', 'ana@example.com', 'one')
        assert services.accounts.find_by_identity('ANA@example.com') is None
        assert services.accounts.find_by_identity('ana@example.com') is not None


@pytest.mark.parametrize('name,email,password', [
    ('', 'x@example.com', 'pw'),
    ('X', '   ', 'pw'),
    ('X', 'x@example.com', ''),
    ('X', 'x@example.com', None),
])
def test_create_requires_all_fields(app, services, name, email, password):
    with app.app_context():
        with pytest.raises(ValidationFailed):
            services.accounts.create_member(name, email, password)


def test_hash_failure_stores_nothing(app, services, monkeypatch):
    def broken_hash(*args, **kwargs):
        raise ValueError('hash backend unavailable')

    monkeypatch.setattr('portal.services.security.generate_password_hash', broken_hash)
    with app.app_context():
        with pytest.raises(CredentialHashError):
            services.accounts.create_member('Ana', 'ana@example.com', 'pw')
        assert services.accounts.find_by_identity('ana@example.com') is None


def test_set_active_is_idempotent(app, services, member_id):
    with app.app_context():
        services.accounts.set_active(member_id, False)
        services.accounts.set_active(member_id, False)
        assert services.accounts.get(member_id).active is False


def test_set_active_unknown_account(app, services):
    with app.app_context():
        with pytest.raises(NotFound):
            services.accounts.set_active(9999, False)


def test_list_is_ordered_by_id(app, services, member_id):
    with app.app_context():
        emails = [a.email for a in services.accounts.list()]
    assert emails == [app.config['ADMIN_EMAIL'], 'member@example.com']


def test_unique_constraint_catches_concurrent_create(app, services, monkeypatch):
    with app.app_context():
        services.accounts.create_member('Ana', 'ana@example.com', 'one')

        # A second writer that checked before the first one committed
        monkeypatch.setattr(AccountStore, 'find_by_identity', lambda self, identity: None)
        with pytest.raises(DuplicateIdentity):
            services.accounts.create_member('Other Ana', 'ana@example.com', 'two')
        monkeypatch.undo()

        assert Account.query.filter_by(email='ana@example.com').count() == 1
        later = services.accounts.create_member('Bea', 'bea@example.com', 'three')
        assert later.id is not None
        assert services.accounts.find_by_identity('bea@example.com').name == 'Bea'
