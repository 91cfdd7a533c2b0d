"""Small string helpers."""

_C_WHITESPACE = frozenset(" \t\n\v\f\r")


def split_string(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter; a trailing empty field is dropped."""
    parts = text.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def remove_whitespace(text: str) -> str:
    return "".join(ch for ch in text if ch not in _C_WHITESPACE)


def to_lowercase(text: str) -> str:
    return text.lower()


def bool_to_string(value: bool) -> str:
    """Render a truth value as "true" or "false"."""
    return str(bool(value)).lower()


def string_to_bool(text: str) -> bool:
    return to_lowercase(text) == "true"