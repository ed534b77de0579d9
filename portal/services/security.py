"""
Credential hashing helpers
"""

from werkzeug.security import generate_password_hash, check_password_hash

from portal.errors import CredentialHashError

DEFAULT_METHOD = 'pbkdf2:sha256'


def hash_secret(secret, method=DEFAULT_METHOD):
    """Return a salted one-way hash of `secret`.

    Raises CredentialHashError instead of ever returning the plain value.
    """
    if not isinstance(secret, str) or not secret:
        raise CredentialHashError('secret must be a non-empty string')
    try:
        hashed = generate_password_hash(secret, method=method)
    except (TypeError, ValueError) as e:
        raise CredentialHashError(str(e)) from e
    if not hashed or hashed == secret:
        raise CredentialHashError('hash function returned an unusable value')
    return hashed


def verify_secret(secret, hashed):
    if not hashed or not isinstance(secret, str):
        return False
    try:
        return check_password_hash(hashed, secret)
    except (TypeError, ValueError):
        return False
