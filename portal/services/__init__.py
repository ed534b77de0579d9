"""
Services Package

Stores and the session authority are built once per application by
`init_services` and looked up by handlers through `get_services`.
"""

from dataclasses import dataclass
from datetime import timedelta

from flask import current_app

from portal.models import Event, Material
from portal.services.accounts import AccountStore
from portal.services.bootstrap import ensure_default_admin
from portal.services.resources import ResourceStore
from portal.services.sessions import Session, SessionAuthority

EXTENSION_KEY = 'portal'


@dataclass
class Services:
    accounts: AccountStore
    events: ResourceStore
    materials: ResourceStore
    sessions: SessionAuthority

    def resource(self, name):
        return getattr(self, name)


def init_services(app):
    accounts = AccountStore(hash_method=app.config['PASSWORD_HASH_METHOD'])
    services = Services(
        accounts=accounts,
        events=ResourceStore(Event, 'Event', required=('title', 'date'),
                             optional=('description',), order_by='date'),
        materials=ResourceStore(Material, 'Material', required=('title', 'link')),
        sessions=SessionAuthority(
            accounts,
            lifetime=timedelta(minutes=app.config['SESSION_LIFETIME_MINUTES'])),
    )
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services(app=None):
    return (app or current_app).extensions[EXTENSION_KEY]


__all__ = [
    'AccountStore',
    'ResourceStore',
    'Session',
    'SessionAuthority',
    'Services',
    'ensure_default_admin',
    'get_services',
    'init_services',
]
