import pytest

from config import Config
from expenses import create_app, db
from expenses.models.expense_type import Type
from expenses.models.location import Location
from expenses.store import Store


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    WTF_CSRF_ENABLED = False
    SECRET_KEY = 'test'


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def store(app):
    return Store(db.session)


@pytest.fixture()
def lookups(store):
    """Two types and two locations, committed."""
    types = [Type.create(store, {'description': d}).unwrap() for d in ('Groceries', 'Rent')]
    locations = [Location.create(store, {'description': d}).unwrap() for d in ('Tesco', 'Online')]
    store.commit()
    return types, locations


class FakeStore:
    """Store double that records every call and reports a chosen row count."""

    def __init__(self, rowcount=1, new_id=1, row=None, error=None):
        self.rowcount = rowcount
        self.new_id = new_id
        self.row = row
        self.error = error
        self.calls = []

    def insert(self, table, values):
        self.calls.append(('insert', table.name, values))
        if self.error is not None:
            raise self.error
        return self.rowcount, self.new_id

    def fetch(self, table, id_column, record_id):
        self.calls.append(('fetch', table.name, record_id))
        return self.row

    def fetch_all(self, table, order_by):
        self.calls.append(('fetch_all', table.name))
        return []


@pytest.fixture()
def fake_store():
    return FakeStore
