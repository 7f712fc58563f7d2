# himlearning/auth/decorators.py
from functools import wraps
from flask import request, g, current_app

from himlearning.extensions import db
from himlearning.models import User
from himlearning.errors import Unauthenticated, Forbidden
from himlearning.auth.tokens import decode_token


def load_current_user():
    """Resuelve la cookie de sesión a un User; cualquier fallo es Unauthenticated."""
    token = request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])
    user_id = decode_token(token)

    user = db.session.get(User, user_id)
    if user is None:
        current_app.logger.debug("⚠️ Token de un usuario inexistente: %s", user_id)
        raise Unauthenticated()
    return user


def jwt_required_local(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        g.current_user = load_current_user()
        return f(*args, **kwargs)
    return decorated


def admin_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        user = load_current_user()
        if not user.is_admin:
            current_app.logger.warning("🛑 Acceso admin denegado a usuario %s", user.id)
            raise Forbidden("Admin access required")
        g.current_user = user
        return f(*args, **kwargs)
    return decorated
