from config import Config
from expenses import db
from expenses.models.record import Field, FieldType, RecordEntity, Schema
from expenses.utils.validators import validate_description


class LocationRow(db.Model):
    __tablename__ = Config.TABLE_PREFIX + 'locations'

    locationid = db.Column(db.Integer, primary_key=True)
    description = db.Column(db.String(255), nullable=False)

    def __repr__(self):
        return f'<LocationRow {self.locationid}: {self.description}>'


LOCATION_SCHEMA = Schema(
    name='Location',
    table=LocationRow.__table__,
    id_column='locationid',
    fields={
        'description': Field(FieldType.STRING, validate_description, required=True),
    },
)


class Location(RecordEntity):
    """Place where money was spent."""

    schema = LOCATION_SCHEMA

    @classmethod
    def ordering(cls):
        return [LocationRow.__table__.c.description]

    @property
    def description(self):
        return self.record.get('description')
