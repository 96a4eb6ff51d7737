"""Generic store-backed records.

An entity is described by a :class:`Schema` (backing table, id column and an
ordered set of typed, validated fields). :func:`create_record` validates a
field mapping against the schema, inserts one row and reloads it through a
:class:`Record` bound to the new identifier.

Creation never raises for bad input: it returns a :class:`Result` holding
either the loaded record or one of the errors from :mod:`expenses.errors`.
"""
import enum
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Mapping, Optional

from sqlalchemy.exc import SQLAlchemyError

from config import Config
from expenses.errors import (
    InvalidReference, InvalidValue, MissingField, NotFound, PersistenceError, RecordError
)

logger = logging.getLogger(__name__)


class FieldType(enum.Enum):
    INTEGER = 'integer'
    REFERENCE = 'reference'
    DECIMAL = 'decimal'
    STRING = 'string'
    TIMESTAMP = 'timestamp'

    def bind(self, value):
        """Convert a validated input value into a typed store parameter."""
        if self in (FieldType.INTEGER, FieldType.REFERENCE):
            return int(str(value).strip())
        if self is FieldType.DECIMAL:
            return Decimal(str(value).strip())
        if self is FieldType.TIMESTAMP:
            return datetime.strptime(value, Config.DB_DATE_FORMAT)
        return str(value)

    def read(self, value):
        """Convert a store value into the attribute representation."""
        if value is None:
            return '' if self is FieldType.STRING else None
        if self in (FieldType.INTEGER, FieldType.REFERENCE):
            return int(value)
        if self is FieldType.DECIMAL:
            return str(value if isinstance(value, Decimal) else Decimal(str(value)))
        if self is FieldType.TIMESTAMP and isinstance(value, datetime):
            return value.strftime(Config.DB_DATE_FORMAT)
        return str(value)


@dataclass(frozen=True)
class Field:
    type: FieldType
    validator: Optional[Callable[[Any], bool]] = None
    required: bool = False
    default: Optional[Callable[[], Any]] = None


@dataclass(frozen=True)
class Schema:
    name: str
    table: Any
    id_column: str
    fields: Mapping[str, Field] = field(default_factory=dict)


@dataclass(frozen=True)
class Result:
    value: Any = None
    error: Optional[RecordError] = None

    @classmethod
    def success(cls, value):
        return cls(value=value)

    @classmethod
    def failure(cls, error):
        return cls(error=error)

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        if self.error is not None:
            raise self.error
        return self.value

    def map(self, fn):
        if self.error is not None:
            return self
        return Result.success(fn(self.value))


class Record:
    """A single row of ``schema.table`` identified by ``record_id``."""

    def __init__(self, schema, store, record_id):
        self.schema = schema
        self.store = store
        self.id = int(record_id)
        self._attributes = {}

    @classmethod
    def from_row(cls, schema, store, row):
        record = cls(schema, store, row[schema.id_column])
        record._populate(row)
        return record

    @property
    def attributes(self):
        return dict(self._attributes)

    def get(self, name):
        if name not in self.schema.fields:
            raise KeyError(name)
        if not self._attributes:
            self.load()
        return self._attributes[name]

    def load(self):
        row = self.store.fetch(self.schema.table, self.schema.id_column, self.id)
        if row is None:
            raise NotFound(f'{self.schema.name} {self.id} not found')
        self._populate(row)
        return self

    def _populate(self, row):
        self._attributes = {
            name: definition.type.read(row[name]) for name, definition in self.schema.fields.items()
        }

    def __repr__(self):
        return f'<Record {self.schema.name} {self.id}>'


def validate_fields(schema, data):
    """Return the complete field mapping for an insert, or the first error found."""
    for name, definition in schema.fields.items():
        if definition.required and name not in data:
            return MissingField(f'Field {name} is required.', field=name)

    values = {}
    for name, definition in schema.fields.items():
        if name in data:
            value = data[name]
            if definition.validator is not None and not definition.validator(value):
                if definition.type is FieldType.REFERENCE:
                    return InvalidReference(f'Invalid {name} specified.', field=name)
                return InvalidValue(f'Invalid {name} specified.', field=name)
            values[name] = value
        elif definition.default is not None:
            values[name] = definition.default()
    return values


def create_record(schema, store, data):
    checked = validate_fields(schema, data)
    if isinstance(checked, RecordError):
        logger.debug('Rejected new %s: %s', schema.name, checked)
        return Result.failure(checked)

    params = {name: schema.fields[name].type.bind(value) for name, value in checked.items()}
    try:
        rowcount, new_id = store.insert(schema.table, params)
    except SQLAlchemyError as exc:
        logger.error('Insert into %s failed: %s', schema.name, exc)
        return Result.failure(PersistenceError(f'{schema.name} entry not inserted.'))
    if rowcount != 1 or new_id is None:
        logger.error('Insert into %s affected %s rows', schema.name, rowcount)
        return Result.failure(PersistenceError(f'{schema.name} entry not inserted.'))

    record = Record(schema, store, new_id)
    try:
        record.load()
    except NotFound as exc:
        return Result.failure(PersistenceError(str(exc)))
    logger.info('Created %s %s', schema.name, record.id)
    return Result.success(record)


def fetch_records(schema, store, order_by):
    return [Record.from_row(schema, store, row) for row in store.fetch_all(schema.table, order_by)]


class RecordEntity:
    """Plumbing shared by the entities; each one holds its own :class:`Record`.

    Subclasses set ``schema`` and may override :meth:`ordering`.
    """

    schema = None

    def __init__(self, store, record_id):
        self.record = Record(self.schema, store, record_id)

    @classmethod
    def _wrap(cls, record):
        entity = cls.__new__(cls)
        entity.record = record
        return entity

    @classmethod
    def ordering(cls):
        return [cls.schema.table.c[cls.schema.id_column]]

    @classmethod
    def create(cls, store, data):
        return create_record(cls.schema, store, data).map(cls._wrap)

    @classmethod
    def all(cls, store):
        return [cls._wrap(r) for r in fetch_records(cls.schema, store, cls.ordering())]

    def load(self):
        self.record.load()
        return self

    @property
    def id(self):
        return self.record.id

    def __repr__(self):
        return f'<{type(self).__name__} {self.id}>'
