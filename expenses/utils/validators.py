import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from config import Config

MAX_TEXT_LENGTH = 255  # database-defined maximum length

_DIGITS = re.compile(r'^[0-9]+$')

# amount column is Numeric(10, 2)
AMOUNT_STEP = Decimal('0.01')
MAX_AMOUNT = Decimal('100000000')


def validate_id(value):
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, str):
        value = value.strip()
        return bool(_DIGITS.match(value)) and int(value) > 0
    return False


def validate_amount(value):
    if isinstance(value, bool) or value is None:
        return False
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        return False
    if not amount.is_finite() or amount < 0 or amount >= MAX_AMOUNT:
        return False
    return amount == amount.quantize(AMOUNT_STEP)


def validate_comment(value):
    return isinstance(value, str) and len(value) <= MAX_TEXT_LENGTH


def validate_description(value):
    return isinstance(value, str) and 0 < len(value.strip()) and len(value) <= MAX_TEXT_LENGTH


def validate_date_string(value, fmt=Config.DB_DATE_FORMAT):
    if not isinstance(value, str):
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True
