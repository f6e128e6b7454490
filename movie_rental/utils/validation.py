import re
from decimal import Decimal, InvalidOperation

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
BOOL_STRINGS = {"true": True, "false": False}


def require_object(data, name="value"):
    # a JSON body of 5 or "x" parses fine but has no keys to look up
    if not isinstance(data, dict):
        raise ValueError(f'"{name}" must be an object')
    return data


def require_str(data: dict, key: str, min_len: int = 1, max_len: int = 255) -> str:
    if key not in data or data[key] is None:
        raise ValueError(f'"{key}" is required')
    value = str(data[key]).strip()
    if len(value) < min_len:
        raise ValueError(f'"{key}" length must be at least {min_len} characters long')
    if len(value) > max_len:
        raise ValueError(f'"{key}" length must be less than or equal to {max_len} characters long')
    return value


def require_int(data: dict, key: str, min_value=None, max_value=None) -> int:
    if key not in data or data[key] is None:
        raise ValueError(f'"{key}" is required')
    value = data[key]
    # bool is an int subclass; True must not pass as an id
    if isinstance(value, bool):
        raise ValueError(f'"{key}" must be a number')
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f'"{key}" must be an integer')
    try:
        value = int(value)
    except (TypeError, ValueError):
        raise ValueError(f'"{key}" must be a number')
    _check_range(key, value, min_value, max_value)
    return value


def require_decimal(data: dict, key: str, min_value=None, max_value=None) -> Decimal:
    if key not in data or data[key] is None or isinstance(data[key], bool):
        raise ValueError(f'"{key}" is required')
    try:
        value = Decimal(str(data[key]))
    except InvalidOperation:
        raise ValueError(f'"{key}" must be a number')
    if not value.is_finite():
        raise ValueError(f'"{key}" must be a number')
    _check_range(key, value, min_value, max_value)
    return value


def require_email(data: dict, key: str = "email") -> str:
    value = require_str(data, key, 5, 255)
    if not EMAIL_RE.match(value):
        raise ValueError(f'"{key}" must be a valid email')
    return value.lower()


def _check_range(key, value, min_value, max_value):
    if min_value is not None and value < min_value:
        raise ValueError(f'"{key}" must be greater than or equal to {min_value}')
    if max_value is not None and value > max_value:
        raise ValueError(f'"{key}" must be less than or equal to {max_value}')


def require_bool(data: dict, key: str, default=None) -> bool:
    """Accepts JSON booleans and the strings "true"/"false" (any case)."""
    if key not in data or data[key] is None:
        if default is None:
            raise ValueError(f'"{key}" is required')
        return default
    value = data[key]
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in BOOL_STRINGS:
        return BOOL_STRINGS[value.strip().lower()]
    raise ValueError(f'"{key}" must be a boolean')
