# himlearning/config.py
import os


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "supersecret")

    # 🛡️ JWT / cookie de sesión
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "supersecret")
    JWT_EXPIRES_DAYS = int(os.environ.get("JWT_EXPIRES_DAYS", 7))
    AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "token")
    COOKIE_SECURE = _env_flag("COOKIE_SECURE", os.environ.get("FLASK_ENV") == "production")

    # 🗄️ Base de datos
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///himlearning.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # 🖼️ Cloudinary
    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")

    # 👑 Credenciales de arranque del admin
    ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL")
    ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD")

    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Imágenes de blogs hasta 5 MB
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-secret"
    COOKIE_SECURE = False
    ADMIN_EMAIL = "admin@himlearning.test"
    ADMIN_PASSWORD = "admin-secret"
    LOG_LEVEL = "DEBUG"
