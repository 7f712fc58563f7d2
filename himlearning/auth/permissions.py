# himlearning/auth/permissions.py
"""
Reglas de autorización.

Dos roles planos (``user`` y ``admin``); cada punto de mutación consulta
aquí una regla booleana. La propiedad del blog no da derecho a borrar
comentarios ajenos.
"""
from himlearning.models import ROLES, ROLE_ADMIN


def is_admin(actor):
    return actor is not None and actor.role == ROLE_ADMIN


def can_edit_blog(actor, blog):
    return actor.id == blog.author_id or is_admin(actor)


can_delete_blog = can_edit_blog


def can_delete_comment(actor, comment):
    return actor.id == comment.get("user") or is_admin(actor)


def can_delete_user(target):
    # Ningún admin se borra por esta vía, ni siquiera por otro admin
    return target.role != ROLE_ADMIN


def apply_role(user, role):
    """Asigna el rol sólo si es uno de los conocidos; lo demás se ignora."""
    if role in ROLES:
        user.role = role
    return user


def is_admin_bootstrap(email, password, config):
    admin_email = config.get("ADMIN_EMAIL")
    admin_password = config.get("ADMIN_PASSWORD")
    if not admin_email or not admin_password:
        return False
    return email == admin_email and password == admin_password
