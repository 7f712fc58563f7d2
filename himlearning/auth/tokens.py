# himlearning/auth/tokens.py
from datetime import datetime, timedelta
from flask import current_app
import jwt

from himlearning.errors import Unauthenticated

ALGORITHM = "HS256"


def issue_token(user):
    """Genera el JWT de sesión con el id del usuario y expiración."""
    now = datetime.utcnow()
    payload = {
        "sub": str(user.id),
        "iat": now,
        "exp": now + timedelta(days=current_app.config["JWT_EXPIRES_DAYS"]),
    }
    return jwt.encode(payload, current_app.config["JWT_SECRET_KEY"], algorithm=ALGORITHM)


def decode_token(token):
    """Devuelve el id de usuario del token o lanza Unauthenticated."""
    if not token:
        raise Unauthenticated()
    try:
        payload = jwt.decode(token, current_app.config["JWT_SECRET_KEY"], algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        current_app.logger.debug("⚠️ Token expirado")
        raise Unauthenticated()
    except jwt.InvalidTokenError as e:
        current_app.logger.debug("❌ Token inválido: %s", e)
        raise Unauthenticated()

    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        current_app.logger.debug("❌ Token sin sujeto válido")
        raise Unauthenticated()


def set_auth_cookie(response, token):
    response.set_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        token,
        max_age=current_app.config["JWT_EXPIRES_DAYS"] * 24 * 60 * 60,
        httponly=True,
        secure=current_app.config["COOKIE_SECURE"],
        samesite="Lax",
    )
    return response


def clear_auth_cookie(response):
    response.delete_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        httponly=True,
        secure=current_app.config["COOKIE_SECURE"],
        samesite="Lax",
    )
    return response
