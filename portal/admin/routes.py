"""
Admin Routes

Account management. Event and material routes are attached by
`portal.resources.routes`.
"""

from flask import jsonify
from flask_login import current_user

from portal.admin import admin_bp
from portal.auth.decorators import admin_required
from portal.errors import request_payload
from portal.resources import read_active_flag
from portal.services import get_services


@admin_bp.route('')
@admin_required
def admin_home():
    return jsonify(message=f'Welcome to the administration panel, {current_user.name}')


@admin_bp.route('/accounts', methods=['GET'])
@admin_required
def list_accounts():
    accounts = get_services().accounts.list()
    return jsonify([account.to_dict() for account in accounts])


@admin_bp.route('/accounts', methods=['POST'])
@admin_required
def create_account():
    """Register a member. The role is fixed server-side."""
    payload = request_payload()
    account = get_services().accounts.create_member(
        payload.get('name'),
        payload.get('email', payload.get('identity')),
        payload.get('password', payload.get('secret')),
    )
    return jsonify(success=True, id=account.id)


@admin_bp.route('/accounts/<int:account_id>', methods=['PUT'])
@admin_required
def set_account_active(account_id):
    services = get_services()
    active = read_active_flag(request_payload())
    services.accounts.set_active(account_id, active)
    if not active:
        services.sessions.revoke_account(account_id)
    return jsonify(success=True)
