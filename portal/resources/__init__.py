"""
Resource API

One parameterized set of handlers, registered for each resource type.
"""

from portal.resources.api import ResourceAPI, read_active_flag

__all__ = ['ResourceAPI', 'read_active_flag']
