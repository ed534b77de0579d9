"""
Access Control Gate

`login_required` is Flask-Login's: it answers 401 through the login
manager's unauthorized handler. `admin_required` runs the same check first,
so a request without a session gets 401 and never 403.
"""

from functools import wraps

from flask import abort
from flask_login import current_user, login_required


def admin_required(f):
    """Decorator to ensure the request comes from an administrator session."""
    @wraps(f)
    @login_required
    def wrapper(*args, **kwargs):
        if not current_user.is_admin:
            abort(403, description='Administrator access required')
        return f(*args, **kwargs)
    return wrapper


__all__ = ['admin_required', 'login_required']
