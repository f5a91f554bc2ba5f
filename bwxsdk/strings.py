"""Small string helpers: splitting, joining, trimming, replacing and formatting."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "simple_explode",
    "simple_join",
    "trim",
    "replace_all",
    "remove_chars",
    "reverse",
    "to_lower_case",
    "to_upper_case",
    "starts_with",
    "ends_with",
    "format_string",
    "string_to_wstring",
]


def simple_explode(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``.

    An empty text or separator gives an empty list. A trailing empty piece
    (text ending with the separator) is dropped; leading and inner empty
    pieces are kept.
    """
    if not separator or not text:
        return []
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def simple_join(items: Iterable[str | bytes], separator: str) -> str:
    """Join ``items`` with ``separator``; byte items are decoded as UTF-8."""
    return separator.join(
        item.decode("utf-8") if isinstance(item, bytes) else item for item in items
    )


def trim(text: str, from_right: bool = True, from_left: bool = True) -> str:
    """Strip whitespace from the chosen ends of ``text``."""
    if from_left:
        text = text.lstrip()
    if from_right:
        text = text.rstrip()
    return text


def _replace(text: str, old: str, new: str) -> str:
    if not old:
        return text
    return text.replace(old, new)


def replace_all(text: str, old: str | Sequence[str], new: str | Sequence[str]) -> str:
    """Replace every occurrence of ``old`` with ``new``.

    When ``old`` and ``new`` are sequences, each pair is applied in turn.
    An empty search string leaves the text unchanged.
    """
    if isinstance(old, str):
        if not isinstance(new, str):
            raise TypeError("replacement must be a string when the search is a string")
        return _replace(text, old, new)
    if isinstance(new, str):
        raise TypeError("replacements must be a sequence when searches are a sequence")
    if len(new) < len(old):
        raise ValueError("fewer replacements than search strings")
    for search, replacement in zip(old, new):
        text = _replace(text, search, replacement)
    return text


def remove_chars(text: str, chars: str | Iterable[str]) -> str:
    """Drop from ``text`` every character found in ``chars``.

    ``chars`` is either one string or several strings whose characters
    are all removed.
    """
    if isinstance(chars, str):
        banned = set(chars)
    else:
        banned = {ch for group in chars for ch in group}
    return "".join(ch for ch in text if ch not in banned)


def reverse(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def to_lower_case(text: str) -> str:
    """Return ``text`` in lower case."""
    return text.lower()


def to_upper_case(text: str) -> str:
    """Return ``text`` in upper case."""
    return text.upper()


def starts_with(text: str, prefix: str) -> bool:
    """Tell whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Tell whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def format_string(fmt: str, *args: object) -> str:
    """Format ``args`` with a printf-style ``fmt``."""
    return fmt % args


def string_to_wstring(data: bytes | str) -> str:
    """Decode UTF-8 bytes into text; raises ``UnicodeDecodeError`` on bad input."""
    if isinstance(data, str):
        return data
    return bytes(data).decode("utf-8")