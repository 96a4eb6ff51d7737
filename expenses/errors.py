"""Error kinds shared by every record entity."""


class RecordError(Exception):
    """Base class for failures of a record operation."""

    kind = 'record_error'

    def __init__(self, message, field=None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(RecordError):
    """Input rejected before any store access."""

    kind = 'validation_error'


class MissingField(ValidationError):
    kind = 'missing_field'


class InvalidReference(ValidationError):
    kind = 'invalid_reference'


class InvalidValue(ValidationError):
    kind = 'invalid_value'


class PersistenceError(RecordError):
    """The store did not accept the write."""

    kind = 'persistence_error'


class NotFound(RecordError):
    """No row matches the requested identifier."""

    kind = 'not_found'
