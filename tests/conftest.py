import pytest

from storefront import create_app, db


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin123'


class OfflineConfig(TestConfig):
    # A path SQLite can never open
    SQLALCHEMY_DATABASE_URI = 'sqlite:////nonexistent-dir/missing/aurax.db'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def offline_client():
    return create_app(OfflineConfig).test_client()


def cart_post(client, action, **fields):
    return client.post('/', data={'action': action, **fields})


def login(client, username='admin', password='admin123'):
    return client.post('/', data={'action': 'login', 'username': username, 'password': password})
