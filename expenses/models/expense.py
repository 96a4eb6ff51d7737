from datetime import datetime

from config import Config
from expenses import db
from expenses.models.record import Field, FieldType, RecordEntity, Schema
from expenses.models.expense_type import Type, TypeRow
from expenses.models.location import Location, LocationRow
from expenses.utils.validators import (
    validate_amount, validate_comment, validate_date_string, validate_id
)


class ExpenseRow(db.Model):
    __tablename__ = Config.TABLE_PREFIX + 'expenses'

    expenseid = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.DateTime, index=True, nullable=False, default=datetime.now)
    typeid = db.Column(db.Integer, db.ForeignKey(TypeRow.__table__.c.typeid), nullable=False)
    locationid = db.Column(db.Integer, db.ForeignKey(LocationRow.__table__.c.locationid), nullable=False)
    amount = db.Column(db.Numeric(10, 2), nullable=False)
    comment = db.Column(db.String(255), nullable=False, default='')

    def __repr__(self):
        return f'<ExpenseRow {self.expenseid}: {self.amount}>'


def _now():
    return datetime.now().strftime(Config.DB_DATE_FORMAT)


# Field order is validation order
EXPENSE_SCHEMA = Schema(
    name='Expense',
    table=ExpenseRow.__table__,
    id_column='expenseid',
    fields={
        'typeid': Field(FieldType.REFERENCE, validate_id, required=True),
        'locationid': Field(FieldType.REFERENCE, validate_id, required=True),
        'amount': Field(FieldType.DECIMAL, validate_amount, required=True),
        'comment': Field(FieldType.STRING, validate_comment, default=str),
        'date': Field(FieldType.TIMESTAMP, validate_date_string, default=_now),
    },
)


class Expense(RecordEntity):
    """A single financial transaction.

    Built with ``Expense.create(store, fields)``, which returns a
    :class:`~expenses.models.record.Result`, or bound to an existing row with
    ``Expense(store, expense_id).load()``.
    """

    schema = EXPENSE_SCHEMA

    @classmethod
    def ordering(cls):
        columns = ExpenseRow.__table__.c
        return [columns.date.desc(), columns.expenseid.desc()]

    @property
    def date(self):
        return self.record.get('date')

    @property
    def typeid(self):
        return self.record.get('typeid')

    @property
    def locationid(self):
        return self.record.get('locationid')

    @property
    def amount(self):
        return self.record.get('amount')

    @property
    def comment(self):
        return self.record.get('comment')

    def get_date(self, formatter, descriptive=True):
        return formatter.format_date(self.date, descriptive)

    def get_type(self):
        return Type(self.record.store, self.typeid).load()

    def get_location(self):
        return Location(self.record.store, self.locationid).load()
