# tests/conftest.py
import os, sys
import pytest
import mongomock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ.setdefault("APP_ENV", "test")

from noteful import create_app
from noteful.extensions import mongo
from noteful.seed import insert_seed


@pytest.fixture()
def app():
    # fresh in-memory MongoDB per test; indexes are created by create_app
    app = create_app(mongo_client=mongomock.MongoClient(tz_aware=True))
    app.config.update(TESTING=True)
    with app.app_context():
        insert_seed(mongo.db)
    yield app
    mongo.drop_database()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db(app):
    return mongo.db
