"""
Account Store

Persistent accounts table. Identity (email) is unique and matched exactly.
"""

import logging

from sqlalchemy.exc import IntegrityError

from portal.errors import DuplicateIdentity, NotFound, ValidationFailed
from portal.extensions import db
from portal.models import Account, ROLE_ADMIN, ROLE_MEMBER
from portal.services.security import DEFAULT_METHOD, hash_secret

logger = logging.getLogger(__name__)


def _clean(value):
    return value.strip() if isinstance(value, str) else ''


class AccountStore:
    """Credential store backed by the `accounts` table."""

    def __init__(self, hash_method=DEFAULT_METHOD):
        self.hash_method = hash_method

    def find_by_identity(self, identity):
        if not isinstance(identity, str) or not identity:
            return None
        return Account.query.filter_by(email=identity).first()

    def get(self, account_id):
        return db.session.get(Account, account_id)

    def list(self):
        return Account.query.order_by(Account.id).all()

    def count_admins(self):
        return Account.query.filter_by(role=ROLE_ADMIN).count()

    def create_member(self, name, identity, secret):
        return self.create(name, identity, secret, ROLE_MEMBER)

    def create_admin(self, name, identity, secret):
        return self.create(name, identity, secret, ROLE_ADMIN)

    def create(self, name, identity, secret, role):
        name = _clean(name)
        identity = _clean(identity)
        if not name or not identity or not isinstance(secret, str) or not secret:
            raise ValidationFailed('Name, email and password are required')
        if role not in (ROLE_ADMIN, ROLE_MEMBER):
            raise ValueError(f'unknown role: {role!r}')

        if self.find_by_identity(identity) is not None:
            raise DuplicateIdentity()

        # Hash before touching the session so a failure leaves nothing behind
        password_hash = hash_secret(secret, self.hash_method)
        account = Account(name=name, email=identity, password_hash=password_hash,
                          role=role, active=True)
        db.session.add(account)
        try:
            db.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent create for the same identity
            db.session.rollback()
            raise DuplicateIdentity()

        logger.info('Created %s account %s (id=%s)', role, identity, account.id)
        return account

    def set_active(self, account_id, active):
        account = self.get(account_id)
        if account is None:
            raise NotFound('Account not found')
        if account.active != active:
            account.active = active
            db.session.commit()
            logger.info('Account %s set active=%s', account.email, active)
        return account
