# himlearning/routes/__init__.py
from flask import Flask

def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes.
    Llamá a register_routes(app) desde himlearning.create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .auth import auth_bp
    from .blog_routes import blog_bp
    from .admin_routes import admin_bp
    app.register_blueprint(auth_bp, url_prefix="/auth")
    app.register_blueprint(blog_bp, url_prefix="/blogs")
    app.register_blueprint(admin_bp, url_prefix="/admin")
