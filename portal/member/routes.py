"""
Member Routes
"""

from flask import jsonify
from flask_login import current_user

from portal.auth.decorators import login_required
from portal.member import member_bp

ANNOUNCEMENTS = [
    {
        'title': 'Welcome',
        'text': 'Welcome to the members area.',
    },
    {
        'title': 'Training',
        'text': 'Check the updated training schedule.',
    },
]


@member_bp.route('')
@login_required
def member_home():
    return jsonify(message=f'Welcome to the members area, {current_user.name}')


@member_bp.route('/session-info')
@login_required
def session_info():
    """Name and role of the caller's own session"""
    return jsonify(name=current_user.name, role=current_user.role)


@member_bp.route('/announcements')
@login_required
def announcements():
    return jsonify(ANNOUNCEMENTS)
