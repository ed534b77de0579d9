"""
Models Package

Exports all models for easy importing.
"""

from portal.models.account import Account, ROLE_ADMIN, ROLE_MEMBER
from portal.models.resource import Event, Material

__all__ = ['Account', 'Event', 'Material', 'ROLE_ADMIN', 'ROLE_MEMBER']
