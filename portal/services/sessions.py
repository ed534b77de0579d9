"""
Session Authority

Server-side session table. The client only ever holds an opaque random
token; identity and role are looked up here on every request.
"""

import logging
import secrets
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta

from portal.errors import InvalidCredentials
from portal.models import ROLE_ADMIN
from portal.services.security import hash_secret, verify_secret

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """Authenticated identity bound to a token. Never mutated."""
    token: str
    account_id: int
    name: str
    role: str
    issued_at: datetime
    expires_at: datetime

    # Flask-Login protocol
    is_authenticated = True
    is_active = True
    is_anonymous = False

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def get_id(self):
        return str(self.account_id)

    def expired(self, now=None):
        return (now or datetime.utcnow()) >= self.expires_at


class SessionAuthority:
    """Issues, resolves and destroys sessions for accounts in `accounts`."""

    def __init__(self, accounts, lifetime=timedelta(hours=8), clock=datetime.utcnow):
        self.accounts = accounts
        self.lifetime = lifetime
        self._clock = clock
        self._sessions = {}
        self._lock = threading.Lock()
        # Verified against when the identity is unknown so every failure
        # path does the same amount of hashing work.
        self._decoy_hash = hash_secret(secrets.token_hex(16), accounts.hash_method)

    def login(self, identity, secret):
        account = self.accounts.find_by_identity(identity)
        if account is None:
            verify_secret(secret or '', self._decoy_hash)
            ok = False
        else:
            ok = verify_secret(secret or '', account.password_hash) and account.active

        if not ok:
            logger.info('Failed login for %s', identity)
            raise InvalidCredentials()

        now = self._clock()
        session = Session(
            token=secrets.token_urlsafe(32),
            account_id=account.id,
            name=account.name,
            role=account.role,
            issued_at=now,
            expires_at=now + self.lifetime,
        )
        with self._lock:
            self._purge_expired(now)
            self._sessions[session.token] = session
        logger.info('Login %s (%s)', account.email, account.role)
        return session

    def current_session(self, token):
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
        if session is None or session.expired(self._clock()):
            return None
        return session

    def logout(self, token):
        with self._lock:
            session = self._sessions.pop(token, None) if token else None
        if session is not None:
            logger.info('Logout account id=%s', session.account_id)

    def revoke_account(self, account_id):
        with self._lock:
            tokens = [t for t, s in self._sessions.items() if s.account_id == account_id]
            for token in tokens:
                del self._sessions[token]
        if tokens:
            logger.info('Revoked %d session(s) for account id=%s', len(tokens), account_id)
        return len(tokens)

    def __len__(self):
        with self._lock:
            return len(self._sessions)

    def _purge_expired(self, now):
        stale = [t for t, s in self._sessions.items() if s.expired(now)]
        for token in stale:
            del self._sessions[token]
