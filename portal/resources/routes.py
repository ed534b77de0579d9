"""
Attach the resource APIs to the admin and member blueprints.

Imported once by the application factory, before blueprints are registered.
"""

from portal.admin import admin_bp
from portal.member import member_bp
from portal.resources.api import events_api, materials_api

events_api.register(admin_bp, member_bp)
materials_api.register(admin_bp, member_bp)
