import math
import re


class ArrayInputError(ValueError):
    """Rejected user input; ``str(exc)`` is the message shown to the user."""


def parse_array_size(text, config):
    text = str(text).strip()
    try:
        size = None if "_" in text else int(text)
    except ValueError:
        size = None
    if size is None or not config.MIN_ARRAY_SIZE <= size <= config.MAX_ARRAY_SIZE:
        raise ArrayInputError(
            f"Array size must be between {config.MIN_ARRAY_SIZE} "
            f"and {config.MAX_ARRAY_SIZE}."
        )
    return size


def parse_manual_array(text, config):
    """
    Parse a comma-separated list of numbers. Blank tokens count as 0 and
    tokens that are not numbers are skipped; what remains must hold 2–50
    values inside the value bounds.
    """
    values = []
    for token in re.split(r"[,，]", text or ""):
        value = _coerce_number(token.strip())
        if value is not None:
            values.append(value)

    if len(values) < config.MIN_ARRAY_SIZE:
        raise ArrayInputError(
            "Please enter at least 2 valid numbers, separated by commas."
        )
    if len(values) > config.MAX_ARRAY_SIZE:
        raise ArrayInputError(
            f"Maximum array length is {config.MAX_ARRAY_SIZE}."
        )
    if any(v < config.min_value or v > config.max_value for v in values):
        raise ArrayInputError(
            f"All values must be between {config.min_value} and {config.max_value}."
        )
    return values


def _coerce_number(token):
    if not token:
        return 0
    if "_" in token:
        return None
    try:
        return int(token)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value
