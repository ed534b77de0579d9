"""
Auth Routes

JSON login/logout. The signed cookie only carries the opaque session token.
"""

from flask import jsonify, session

from portal.auth import auth_bp
from portal.errors import InvalidCredentials, request_payload
from portal.services import get_services

SESSION_TOKEN_KEY = 'sid'


def _field(payload, *names):
    """Return the first string value found under any of `names`."""
    for name in names:
        value = payload.get(name)
        if isinstance(value, str):
            return value
    return ''


def current_token():
    return session.get(SESSION_TOKEN_KEY)


@auth_bp.route('/login', methods=['POST'])
def login():
    """Authenticate and bind a new server-side session to this client."""
    payload = request_payload(InvalidCredentials)
    identity = _field(payload, 'email', 'identity').strip()
    secret = _field(payload, 'password', 'secret')

    if not identity or not secret:
        raise InvalidCredentials()

    sessions = get_services().sessions
    new_session = sessions.login(identity, secret)

    # Drop whatever session this client held before
    sessions.logout(current_token())
    session.clear()
    session[SESSION_TOKEN_KEY] = new_session.token

    return jsonify(success=True, role=new_session.role, name=new_session.name)


@auth_bp.route('/logout', methods=['POST'])
def logout():
    get_services().sessions.logout(current_token())
    session.clear()
    return jsonify(success=True)
