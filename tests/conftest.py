import pytest

from borrow_return import create_app
from borrow_return.config import TestConfig
from borrow_return.extensions import db
from borrow_return.cli import seed_demo_data


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Örnek veri: 3 öğrenci, 3 eşya (Calculator x5, Projector Remote x1 ...)."""
    seed_demo_data()
    return app
