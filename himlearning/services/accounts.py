# himlearning/services/accounts.py
from flask import current_app
from sqlalchemy import func, or_

from himlearning.extensions import db
from himlearning.models import User, Blog, ROLE_USER, ROLE_ADMIN
from himlearning.errors import ValidationError, NotFound, Forbidden
from himlearning.auth.permissions import apply_role, can_delete_user, is_admin_bootstrap
from himlearning.services import commit

MIN_PASSWORD_LENGTH = 6


def _validate_password(password, message="Password must be at least 6 characters"):
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(message)


def _optional_str(data, field):
    """Valor de texto opcional del body; otro tipo JSON es un 400."""
    value = data.get(field)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value


def find_by_email(email):
    return User.query.filter_by(email=email).first()


def get_user_or_404(user_id):
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def signup(name, email, password):
    if not all(isinstance(v, str) and v for v in (name, email, password)):
        raise ValidationError("Name, email and password are required")
    if find_by_email(email):
        raise ValidationError("User already exists")
    _validate_password(password)

    user = User(name=name, email=email, role=ROLE_USER)
    user.set_password(password)
    db.session.add(user)
    commit()
    current_app.logger.info("✅ Usuario registrado: %s", user.id)
    return user


def authenticate(email, password):
    """Login normal; email inexistente y contraseña errónea dan el mismo error."""
    if not isinstance(email, str) or not isinstance(password, str):
        raise ValidationError("Invalid credentials")
    user = find_by_email(email) if email else None
    if user is None or not user.check_password(password):
        raise ValidationError("Invalid credentials")
    return user


def admin_login(email, password):
    """
    Arranque del admin con las credenciales configuradas.

    Si no existe una cuenta con ese email se crea como admin; si existe se
    promueve. Repetir la llamada nunca crea una segunda cuenta.
    """
    if not is_admin_bootstrap(email, password, current_app.config):
        raise ValidationError("Invalid admin credentials")

    admin = find_by_email(email)
    if admin is None:
        admin = User(name="Admin", email=email, role=ROLE_ADMIN)
        admin.set_password(password)
        db.session.add(admin)
        commit()
        current_app.logger.info("👑 Cuenta admin creada: %s", admin.id)
    elif admin.role != ROLE_ADMIN:
        admin.role = ROLE_ADMIN
        commit()
        current_app.logger.info("👑 Usuario %s promovido a admin", admin.id)
    return admin


def _change_email(user, email):
    other = find_by_email(email)
    if other is not None and other.id != user.id:
        raise ValidationError("Email already in use")
    user.email = email


def update_profile(user, data):
    name = _optional_str(data, "name")
    email = _optional_str(data, "email")
    bio = _optional_str(data, "bio")
    avatar = _optional_str(data, "avatar")
    if name:
        user.name = name
    if email:
        _change_email(user, email)
    if "bio" in data:
        user.bio = bio
    if "avatar" in data:
        user.avatar = avatar
    commit()
    return user


def change_password(user, current_password, new_password):
    if not current_password or not new_password:
        raise ValidationError("Current and new password are required")
    if not isinstance(current_password, str) or not isinstance(new_password, str):
        raise ValidationError("Passwords must be strings")
    if not user.check_password(current_password):
        raise ValidationError("Current password is incorrect")
    _validate_password(new_password, "New password must be at least 6 characters")
    user.set_password(new_password)
    commit()


def admin_update_user(user_id, data):
    user = get_user_or_404(user_id)
    name = _optional_str(data, "name")
    email = _optional_str(data, "email")
    if name:
        user.name = name
    if email:
        _change_email(user, email)
    if data.get("role"):
        apply_role(user, data["role"])
    commit()
    return user


def reset_password(user_id, new_password):
    _validate_password(new_password, "New password must be at least 6 characters")
    user = get_user_or_404(user_id)
    user.set_password(new_password)
    commit()


def search_users(search=None):
    query = User.query
    if search:
        needle = search.lower()
        query = query.filter(or_(
            func.lower(User.name).contains(needle, autoescape=True),
            func.lower(User.email).contains(needle, autoescape=True),
        ))
    return query.order_by(User.created_at.desc(), User.id.desc()).all()


def delete_user(user_id):
    """
    Borra un usuario no-admin y en cascada todos sus blogs (con los
    comentarios de cualquiera que tengan dentro).

    Son dos operaciones seguidas sin transacción común: primero los blogs,
    después el usuario.
    """
    user = db.session.get(User, user_id)
    if user is None:
        current_app.logger.warning("Delete user error: User not found %s", user_id)
        raise NotFound("User not found")

    if not can_delete_user(user):
        current_app.logger.warning("Delete user error: Attempt to delete admin user %s", user_id)
        raise Forbidden("Cannot delete admin user")

    Blog.query.filter_by(author_id=user.id).delete(synchronize_session=False)
    commit()

    db.session.delete(user)
    commit()
    current_app.logger.info("🗑️ Usuario %s y sus blogs eliminados", user_id)


def dashboard_stats():
    total_users = User.query.filter_by(role=ROLE_USER).count()
    total_blogs = Blog.query.count()
    total_comments = sum(len(comments or []) for (comments,) in db.session.query(Blog.comments))
    return {
        "totalUsers": total_users,
        "totalBlogs": total_blogs,
        "totalComments": total_comments,
    }
