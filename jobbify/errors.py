"""
API error types and the app-wide handlers that render them.

Every failure leaves the API as the same JSON envelope:

    {"status": false, "message": "...", "error": "<kind>", "errors": {...}}

Internal exception text is logged, never returned.
"""
import enum

from flask import jsonify, current_app
from sqlalchemy.exc import IntegrityError
from werkzeug.exceptions import HTTPException

from jobbify.extensions import db


class ErrorKind(enum.Enum):
    VALIDATION = 'validation'
    UNAUTHENTICATED = 'unauthenticated'
    NOT_FOUND = 'not_found'
    CONFLICT = 'conflict'
    INTERNAL = 'internal'


DEFAULT_STATUS = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.UNAUTHENTICATED: 401,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.INTERNAL: 500,
}

GENERIC_ERROR_MESSAGE = 'An unexpected error occurred.'


class ApiError(Exception):
    """
    Raised by services and views for any expected failure.

    Attributes:
        kind (ErrorKind): Stable, client-facing error category
        message (str): Human readable message, safe to show to callers
        status_code (int): HTTP status, defaults per kind
        errors (dict): Optional field-level errors ({field: [messages]})
    """

    def __init__(self, kind, message, status_code=None, errors=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code or DEFAULT_STATUS[kind]
        self.errors = errors

    def to_dict(self):
        body = {
            "status": False,
            "message": self.message,
            "error": self.kind.value,
        }
        if self.errors:
            body["errors"] = self.errors
        return body


def error_response(kind, message, status_code=None, errors=None):
    err = ApiError(kind, message, status_code=status_code, errors=errors)
    return jsonify(err.to_dict()), err.status_code


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(err):
        db.session.rollback()
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(IntegrityError)
    def handle_integrity_error(err):
        # A unique constraint fired after the pre-check passed (concurrent writers)
        db.session.rollback()
        current_app.logger.warning(f"Integrity error: {err.orig}")
        return error_response(ErrorKind.CONFLICT, "The record conflicts with an existing one.")

    @app.errorhandler(HTTPException)
    def handle_http_error(err):
        kind = {
            401: ErrorKind.UNAUTHENTICATED,
            404: ErrorKind.NOT_FOUND,
        }.get(err.code, ErrorKind.VALIDATION if err.code < 500 else ErrorKind.INTERNAL)
        return error_response(kind, err.description, status_code=err.code)

    @app.errorhandler(Exception)
    def handle_unexpected_error(err):
        db.session.rollback()
        current_app.logger.exception(f"Unhandled error: {str(err)}")
        return error_response(ErrorKind.INTERNAL, GENERIC_ERROR_MESSAGE)
