# himlearning/__init__.py
import logging

import cloudinary
from flask import Flask

from himlearning.config import Config
from himlearning.extensions import db, migrate, cors
from himlearning.errors import register_error_handlers
from himlearning.routes import register_routes


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))

    cloudinary.config(
        cloud_name=app.config.get("CLOUDINARY_CLOUD_NAME"),
        api_key=app.config.get("CLOUDINARY_API_KEY"),
        api_secret=app.config.get("CLOUDINARY_API_SECRET"),
        secure=True,
    )

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
        allow_headers=["Content-Type", "Authorization"]
    )

    # Registrar blueprints centralizado
    register_routes(app)
    register_error_handlers(app)

    @app.cli.command("init-db")
    def init_db_command():
        """Crea las tablas de la base de datos."""
        db.create_all()
        app.logger.info("Base de datos inicializada")

    return app
