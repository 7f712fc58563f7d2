# himlearning/utils/body.py
from flask import request

from himlearning.errors import ValidationError


def json_body():
    """Body JSON como dict; vacío si no llega, 400 si no es un objeto."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
