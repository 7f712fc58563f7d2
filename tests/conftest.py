import pytest

from himlearning import create_app
from himlearning.config import TestingConfig
from himlearning.extensions import db


@pytest.fixture()
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_client(app):
    """Fábrica de clientes independientes, cada uno con su propia cookie."""
    return app.test_client


