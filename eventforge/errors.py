"""
API Errors

Error taxonomy for the HTTP layer and the handlers that turn every failure
into a JSON body with at least a ``message`` field.
"""

import logging

from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException

from eventforge.storage.errors import ConflictError, StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None, errors=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.errors = errors

    def to_dict(self):
        body = {'message': self.message}
        if self.errors is not None:
            body['errors'] = self.errors
        return body


class ValidationError(ApiError):
    status_code = 400
    default_message = 'Invalid request data'


class AuthenticationError(ApiError):
    status_code = 401
    default_message = 'Authentication required'


class AuthorizationError(ApiError):
    """Authenticated, but the action itself is not allowed."""
    status_code = 400
    default_message = 'This action is not allowed'


class NotFoundError(ApiError):
    status_code = 404
    default_message = 'Resource not found'


class ServiceUnavailableError(ApiError):
    status_code = 503
    default_message = 'Service temporarily unavailable'


def _json_error(status_code, message, **extra):
    body = {'message': message}
    body.update(extra)
    return jsonify(body), status_code


def register_error_handlers(app):
    """Attach JSON error handlers for the whole taxonomy to ``app``."""

    @app.errorhandler(ApiError)
    def handle_api_error(exc):
        response = jsonify(exc.to_dict())
        response.status_code = exc.status_code
        if exc.status_code == 401:
            response.headers['WWW-Authenticate'] = 'Bearer'
        return response

    @app.errorhandler(ConflictError)
    def handle_conflict(exc):
        return _json_error(409, exc.message)

    @app.errorhandler(StoreUnavailableError)
    def handle_store_unavailable(exc):
        logger.warning('Store unavailable: %s', exc.message)
        return _json_error(503, ServiceUnavailableError.default_message)

    @app.errorhandler(StoreError)
    def handle_store_error(exc):
        logger.error('Storage failure: %s', exc.message)
        return _internal_error(exc)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc):
        return _json_error(exc.code or 500, exc.description or exc.name)

    @app.errorhandler(Exception)
    def handle_unexpected(exc):
        logger.error('Unhandled exception: %s', exc, exc_info=exc)
        return _internal_error(exc)


def _internal_error(exc):
    if current_app.config.get('ENV_NAME') == 'production':
        return _json_error(500, 'Internal server error')
    return _json_error(500, 'Internal server error', detail=str(exc))
