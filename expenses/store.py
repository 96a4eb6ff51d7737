"""Request-scoped access to the relational store."""
from flask import g
from sqlalchemy import select

from expenses import db


class Store:
    """Executes parameterized statements through a SQLAlchemy session."""

    def __init__(self, session):
        self.session = session

    def insert(self, table, values):
        result = self.session.execute(table.insert().values(**values))
        pk = result.inserted_primary_key
        return result.rowcount, (pk[0] if pk else None)

    def fetch(self, table, id_column, record_id):
        stmt = select(table).where(table.c[id_column] == record_id)
        return self.session.execute(stmt).mappings().first()

    def fetch_all(self, table, order_by):
        stmt = select(table).order_by(*order_by)
        return list(self.session.execute(stmt).mappings())

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()


def get_store():
    if 'store' not in g:
        g.store = Store(db.session)
    return g.store
