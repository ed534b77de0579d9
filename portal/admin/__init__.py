"""
Admin Blueprint

Every route here requires an administrator session.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portal.admin import routes  # noqa: E402, F401
