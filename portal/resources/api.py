"""
Resource API

Admin list/create/toggle and the member active-only listing for a resource
store. Instantiated once per resource type (events, materials).
"""

from flask import jsonify

from portal.auth.decorators import admin_required, login_required
from portal.errors import ValidationFailed, request_payload
from portal.services import get_services


def read_active_flag(payload):
    """Read the `active` field of a toggle request as a real boolean.

    JSON booleans are preferred; the legacy integers 0 and 1 are accepted.
    """
    value = payload.get('active')
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValidationFailed('Field "active" must be true or false')


class ResourceAPI:
    """Route handlers for one resource store.

    Args:
        name: Attribute of the services container holding the store, also
            used as the URL segment ("events" -> /admin/events)
    """

    def __init__(self, name):
        self.name = name

    @property
    def store(self):
        return get_services().resource(self.name)

    def register(self, admin_bp, member_bp):
        admin_bp.add_url_rule(f'/{self.name}', f'list_{self.name}',
                              admin_required(self.admin_list), methods=['GET'])
        admin_bp.add_url_rule(f'/{self.name}', f'create_{self.name}',
                              admin_required(self.admin_create), methods=['POST'])
        admin_bp.add_url_rule(f'/{self.name}/<int:resource_id>', f'toggle_{self.name}',
                              admin_required(self.admin_set_active), methods=['PUT'])
        member_bp.add_url_rule(f'/{self.name}', f'list_{self.name}',
                               login_required(self.member_list), methods=['GET'])

    def admin_list(self):
        return jsonify([row.to_dict() for row in self.store.list()])

    def admin_create(self):
        row = self.store.create(request_payload())
        return jsonify(success=True, id=row.id)

    def admin_set_active(self, resource_id):
        active = read_active_flag(request_payload())
        self.store.set_active(resource_id, active)
        return jsonify(success=True)

    def member_list(self):
        return jsonify([row.to_member_dict() for row in self.store.list(active_only=True)])


events_api = ResourceAPI('events')
materials_api = ResourceAPI('materials')
