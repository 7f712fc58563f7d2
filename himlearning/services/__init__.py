# himlearning/services/__init__.py
from sqlalchemy.exc import SQLAlchemyError
from flask import current_app

from himlearning.extensions import db
from himlearning.errors import UnexpectedError


def commit():
    """Confirma la sesión; un fallo del store se reporta como UnexpectedError."""
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error("❌ Error al guardar en la base de datos: %s", e)
        raise UnexpectedError(error=str(e))
