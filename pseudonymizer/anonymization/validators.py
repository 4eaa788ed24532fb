import re

_IDENTIFIER_RE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")


def is_valid_identifier(value: str) -> bool:
    """Check the PAN shape: five uppercase letters, four digits, one uppercase letter.

    Surrounding whitespace is ignored; case is not.
    """
    return _IDENTIFIER_RE.fullmatch(value.strip()) is not None
