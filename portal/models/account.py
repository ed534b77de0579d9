"""
Account Model
"""

from datetime import datetime

from portal.extensions import db

ROLE_ADMIN = 'admin'
ROLE_MEMBER = 'member'


class Account(db.Model):
    """Portal account. Deactivated instead of deleted."""
    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=ROLE_MEMBER)
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def to_dict(self):
        # password_hash never leaves the store
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'active': self.active,
        }

    def __repr__(self):
        return f'<Account {self.email} ({self.role})>'
