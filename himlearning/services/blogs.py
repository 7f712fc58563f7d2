# himlearning/services/blogs.py
from flask import current_app

from himlearning.extensions import db
from himlearning.models import Blog, new_comment, PLACEHOLDER_IMAGE
from himlearning.errors import ValidationError, NotFound, Forbidden
from himlearning.auth.permissions import can_edit_blog, can_delete_blog, can_delete_comment
from himlearning.services import commit


def get_blog_or_404(blog_id):
    blog = db.session.get(Blog, blog_id)
    if blog is None:
        raise NotFound("Blog not found")
    return blog


def list_blogs(author_id=None):
    query = Blog.query
    if author_id is not None:
        query = query.filter_by(author_id=author_id)
    return query.order_by(Blog.created_at.desc(), Blog.id.desc()).all()


def _check_text(*values):
    for value in values:
        if value is not None and not isinstance(value, str):
            raise ValidationError("Title and description must be strings")


def create_blog(author, title, description, image_url=None):
    _check_text(title, description)
    title = (title or "").strip()
    description = description or ""
    if not title or not description.strip():
        raise ValidationError("Title and description are required")

    blog = Blog(
        title=title,
        description=description,
        image=image_url or PLACEHOLDER_IMAGE,
        author_id=author.id,
        author_name=author.name,
        likes=[],
        comments=[],
    )
    db.session.add(blog)
    commit()
    current_app.logger.info("✅ Blog %s creado por %s", blog.id, author.id)
    return blog


def update_blog(blog, title=None, description=None):
    _check_text(title, description)
    # Sólo reemplaza los campos que llegan con valor
    blog.title = title or blog.title
    blog.description = description or blog.description
    commit()
    return blog


def edit_blog(actor, blog_id, title=None, description=None):
    blog = get_blog_or_404(blog_id)
    if not can_edit_blog(actor, blog):
        current_app.logger.warning("🛑 Usuario %s no puede editar blog %s", actor.id, blog.id)
        raise Forbidden()
    return update_blog(blog, title, description)


def remove_blog(blog):
    db.session.delete(blog)
    commit()


def delete_blog(actor, blog_id):
    blog = get_blog_or_404(blog_id)
    if not can_delete_blog(actor, blog):
        current_app.logger.warning("🛑 Usuario %s no puede borrar blog %s", actor.id, blog.id)
        raise Forbidden()
    remove_blog(blog)


def toggle_like(user, blog_id):
    """Alterna el like del usuario; lectura-modificación-escritura sin bloqueo."""
    blog = get_blog_or_404(blog_id)
    likes = list(blog.likes or [])
    if user.id in likes:
        likes.remove(user.id)
    else:
        likes.append(user.id)
    # Se asigna una lista nueva para que SQLAlchemy detecte el cambio en el JSON
    blog.likes = likes
    commit()
    return blog


def add_comment(user, blog_id, content):
    if not isinstance(content, str) or not content.strip():
        raise ValidationError("Comment content is required")

    blog = get_blog_or_404(blog_id)
    blog.comments = list(blog.comments or []) + [new_comment(user, content.strip())]
    commit()
    return blog


def delete_comment(user, blog_id, comment_id):
    blog = get_blog_or_404(blog_id)

    comment = blog.find_comment(comment_id)
    if comment is None:
        current_app.logger.warning("Delete comment error: Comment not found %s", comment_id)
        raise NotFound("Comment not found")

    if not can_delete_comment(user, comment):
        current_app.logger.warning(
            "Delete comment error: Not authorized %s %s", user.id, comment.get("user")
        )
        raise Forbidden()

    blog.comments = [c for c in blog.comments if c.get("id") != comment_id]
    commit()
    return blog
