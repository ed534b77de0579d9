"""
Auth Blueprint

Login and logout against the server-side session authority.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from portal.auth import routes  # noqa: E402, F401
