import re

from ..core.errors import ValidationError

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_id(raw: str) -> int:
    """Parse a base-10 signed 64-bit id taken from a URL path."""
    if not _INT_RE.fullmatch(raw):
        raise ValidationError(f'parsing "{raw}": invalid syntax')
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValidationError(f'parsing "{raw}": value out of range')
    return value
