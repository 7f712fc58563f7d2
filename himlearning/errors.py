# himlearning/errors.py
"""
Errores de la API.

Los handlers lanzan estas excepciones y ``register_error_handlers`` las
convierte en respuestas JSON ``{"message": ..., "error": ...}`` con su
código HTTP.
"""
from flask import jsonify, current_app
from werkzeug.exceptions import HTTPException

from himlearning.extensions import db


class APIError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message=None, error=None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.error = error

    def to_dict(self):
        data = {"message": self.message}
        if self.error:
            data["error"] = self.error
        return data


class ValidationError(APIError):
    status_code = 400
    message = "Invalid request"


class Unauthenticated(APIError):
    status_code = 401
    message = "Authentication required"


class Forbidden(APIError):
    status_code = 403
    message = "Not authorized"


class NotFound(APIError):
    status_code = 404
    message = "Not found"


class UnexpectedError(APIError):
    """Fallo de la base de datos o de un servicio externo; el detalle llega al cliente."""
    status_code = 500
    message = "Server error"


def register_error_handlers(app):
    @app.errorhandler(APIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"message": error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        db.session.rollback()
        current_app.logger.exception("❌ Error inesperado")
        return jsonify(UnexpectedError(error=str(error)).to_dict()), 500
