"""
Flask Extensions

Sessions are held server-side by the SessionAuthority; Flask-Login only
resolves `current_user` from it through a request loader.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager, fed by the session authority on every request
login_manager = LoginManager()
