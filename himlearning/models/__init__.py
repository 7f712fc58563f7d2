# himlearning/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from himlearning.models import Blog
"""
from .user import User, ROLES, ROLE_USER, ROLE_ADMIN
from .blog import Blog, new_comment, PLACEHOLDER_IMAGE

__all__ = ["User", "Blog", "ROLES", "ROLE_USER", "ROLE_ADMIN", "new_comment", "PLACEHOLDER_IMAGE"]
