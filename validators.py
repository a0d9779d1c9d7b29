import math

from errors import InputError

INVALID_VALUES = "Invalid input. Please enter valid values."
INVALID_QUANTITY = "Invalid quantity input. Please enter a number."
QUANTITY_NOT_POSITIVE = "Quantity must be greater than zero."


def _to_int(value):
    # bools are ints in Python but never a valid count
    if isinstance(value, bool):
        raise ValueError(f"not an integer: {value!r}")
    if isinstance(value, int):
        return value
    return int(str(value).strip())


def parse_price(value):
    """Parse a unit price: any finite real number >= 0."""
    try:
        price = float(value)
    except (TypeError, ValueError) as exc:
        raise InputError(INVALID_VALUES) from exc
    if not math.isfinite(price) or price < 0:
        raise InputError(INVALID_VALUES)
    return price


def parse_count(value):
    """Parse any integer, negative included (stock can go below zero after a checkout)."""
    try:
        return _to_int(value)
    except (TypeError, ValueError) as exc:
        raise InputError(INVALID_VALUES) from exc


def parse_stock(value):
    """Parse a stock level: an integer >= 0."""
    stock = parse_count(value)
    if stock < 0:
        raise InputError(INVALID_VALUES)
    return stock


def parse_quantity(value):
    """Parse a cart quantity: an integer > 0."""
    try:
        quantity = _to_int(value)
    except (TypeError, ValueError) as exc:
        raise InputError(INVALID_QUANTITY) from exc
    if quantity <= 0:
        raise InputError(QUANTITY_NOT_POSITIVE)
    return quantity
