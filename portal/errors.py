"""
Portal Errors

Business-rule failures are reported as JSON with a 200 status and
`success: false`. Only authentication failures (401/403) and server
faults (500) use status codes.
"""

import logging

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from portal.extensions import db

logger = logging.getLogger(__name__)


class PortalError(Exception):
    """Base class for business-rule failures."""
    message = 'Request could not be completed'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationFailed(PortalError):
    message = 'Incomplete data'


class DuplicateIdentity(PortalError):
    message = 'Email already registered'


class InvalidCredentials(PortalError):
    message = 'Invalid email or password'


class NotFound(PortalError):
    message = 'Record not found'


class CredentialHashError(Exception):
    """Raised when a secret cannot be hashed. Nothing is stored."""


def request_payload(error_cls=ValidationFailed):
    """Return the JSON body as a dict. Other JSON values raise `error_cls`."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise error_cls()
    return payload


def failure(message, status=200):
    return jsonify(success=False, message=message), status


def register_error_handlers(app):
    """Attach JSON error handlers to the application."""

    @app.errorhandler(PortalError)
    def handle_portal_error(error):
        return failure(error.message)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return failure(error.description, error.code)

    @app.errorhandler(SQLAlchemyError)
    def handle_store_fault(error):
        db.session.rollback()
        logger.exception('Store fault: %s', error)
        return failure('Internal server error', 500)

    @app.errorhandler(CredentialHashError)
    def handle_hash_fault(error):
        logger.exception('Could not hash credential')
        return failure('Internal server error', 500)
