"""Coercion helpers for loosely typed client input."""

# Largest value a 64-bit signed INTEGER column can store
MAX_INTEGER = 2**63 - 1


def whole_number(value) -> int | None:
    """Return ``value`` as an int if it denotes a whole number, else None.

    Accepts ints, integral floats and numeric strings. Booleans are rejected
    even though they are ints, and so is anything whose magnitude exceeds
    ``MAX_INTEGER``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if abs(number) <= MAX_INTEGER else None
