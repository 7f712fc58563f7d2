# himlearning/utils/uploads.py
import os

import cloudinary.uploader
from flask import current_app

from himlearning.errors import ValidationError, UnexpectedError

# Configuración
ALLOWED_EXTENSIONS = ["jpg", "jpeg", "png", "webp"]
AVATAR_MAX_SIZE = 20 * 1024  # 20 KB
BLOG_IMAGE_MAX_SIZE = 5 * 1024 * 1024  # 5 MB
AVATAR_ERROR = "No file uploaded or file is too large (max 20 KB)"

BLOG_IMAGE_OPTIONS = {
    "folder": "him-learning/blogs",
    "transformation": [{"width": 800, "height": 600, "crop": "limit"}],
}
AVATAR_OPTIONS = {
    "folder": "him-learning/avatars",
    "transformation": [{"width": 200, "height": 200, "crop": "thumb", "gravity": "face"}],
}


def file_size(file):
    file.stream.seek(0, 2)  # mover al final
    size = file.stream.tell()
    file.stream.seek(0)     # volver al inicio
    return size


def is_allowed_image(file):
    if not file.mimetype or not file.mimetype.startswith("image/"):
        return False
    ext = os.path.splitext(file.filename or "")[1].lstrip(".").lower()
    return ext in ALLOWED_EXTENSIONS


def upload_image(file, options, max_size, error_message):
    """Valida y sube la imagen a Cloudinary; devuelve la URL segura."""
    if file is None or not file.filename:
        raise ValidationError(error_message)
    if file_size(file) > max_size:
        raise ValidationError(error_message)
    if not is_allowed_image(file):
        raise ValidationError("Only image files are allowed!")

    try:
        result = cloudinary.uploader.upload(
            file,
            folder=options["folder"],
            transformation=options["transformation"],
            allowed_formats=ALLOWED_EXTENSIONS,
            resource_type="image",
        )
    except Exception as e:
        current_app.logger.error("❌ Error al subir imagen a Cloudinary: %s", e)
        raise UnexpectedError("Error uploading image", error=str(e))

    url = result.get("secure_url")
    if not url:
        raise UnexpectedError("Error uploading image", error="Cloudinary returned no URL")
    return url


def upload_blog_image(file):
    return upload_image(file, BLOG_IMAGE_OPTIONS, BLOG_IMAGE_MAX_SIZE, "Image is too large (max 5 MB)")


def upload_avatar(file):
    return upload_image(
        file, AVATAR_OPTIONS, AVATAR_MAX_SIZE, AVATAR_ERROR
    )
