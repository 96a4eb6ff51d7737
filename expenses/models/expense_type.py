from config import Config
from expenses import db
from expenses.models.record import Field, FieldType, RecordEntity, Schema
from expenses.utils.validators import validate_description


class TypeRow(db.Model):
    __tablename__ = Config.TABLE_PREFIX + 'types'

    typeid = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(255), nullable=False)

    def __repr__(self):
        return f'<TypeRow {self.typeid}: {self.description}>'


TYPE_SCHEMA = Schema(
    name='Type',
    table=TypeRow.__table__,
    id_column='typeid',
    fields={
        'description': Field(FieldType.STRING, validate_description, required=True),
    },
)


class Type(RecordEntity):
    """Category of an expense (groceries, rent, ...)."""

    schema = TYPE_SCHEMA

    @classmethod
    def ordering(cls):
        return [TypeRow.__table__.c.description]

    @property
    def description(self):
        return self.record.get('description')
