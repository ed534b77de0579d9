"""
Member Blueprint

Read-only views for any authenticated account.
"""

from flask import Blueprint

member_bp = Blueprint('member', __name__)

from portal.member import routes  # noqa: E402, F401
