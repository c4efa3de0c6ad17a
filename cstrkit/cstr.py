"""String routines with C semantics: text ends at the first NUL character.

Functions that locate something return its index, or ``None`` where C
would return a null pointer. Functions that write into a buffer take the
buffer's contents and return them as they would be after the write.
"""

from __future__ import annotations

from typing import Optional, Union

_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

Char = Union[str, int]


def _cstr(text: str) -> str:
    """Return ``text`` up to, not including, its first NUL."""
    return text.split("\0", 1)[0]


def _char(char: Char) -> str:
    if isinstance(char, int):
        return chr(char)
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def strlen(text: str) -> int:
    """Number of characters before the first NUL."""
    return len(_cstr(text))


def strchr(text: str, char: Char) -> Optional[int]:
    """Index of the first ``char`` in ``text``, or ``None``.

    The terminating NUL is never matched.
    """
    index = _cstr(text).find(_char(char))
    return None if index < 0 else index


def strrchr(text: str, char: Char) -> Optional[int]:
    """Index of the last ``char`` in ``text``, or ``None``."""
    index = _cstr(text).rfind(_char(char))
    return None if index < 0 else index


def strcpy(src: str) -> str:
    """Return the string that copying ``src`` produces."""
    return _cstr(src)


def strncpy(dest: str, src: str, n: int) -> str:
    """Copy at most ``n`` characters of ``src`` over the start of ``dest``.

    Copying stops at the end of ``src``; the rest of ``dest`` is kept and
    nothing is padded or terminated.
    """
    copied = _cstr(src)[:max(n, 0)]
    return copied + dest[len(copied):]


def strncat(dest: str, src: str, n: int) -> str:
    """Append at most ``n`` characters of ``src`` at the end of ``dest``.

    The appended characters overwrite whatever followed the terminator of
    ``dest``; no new terminator is written.
    """
    end = strlen(dest)
    added = _cstr(src)[:max(n, 0)]
    return dest[:end] + added + dest[end + len(added):]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare up to ``n`` characters; return the first code difference.

    Positions past the end of either string count as NUL.
    """
    for i in range(max(n, 0)):
        a = ord(first[i]) if i < len(first) else 0
        b = ord(second[i]) if i < len(second) else 0
        if a != b:
            return a - b
    return 0


def strcspn(text: str, reject: str) -> int:
    """Length of the leading part of ``text`` holding no character of ``reject``."""
    rejected = set(_cstr(reject))
    text = _cstr(text)
    return next(
        (i for i, ch in enumerate(text) if ch in rejected), len(text)
    )


def strpbrk(text: str, accept: str) -> Optional[int]:
    """Index of the first character of ``text`` found in ``accept``, or ``None``."""
    accepted = set(_cstr(accept))
    return next(
        (i for i, ch in enumerate(_cstr(text)) if ch in accepted), None
    )


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle`` in ``haystack``, or ``None``.

    An empty needle is found at index 0.
    """
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


def to_upper(text: Optional[str]) -> Optional[str]:
    """Copy of ``text`` with ASCII letters in upper case; ``None`` stays ``None``."""
    if text is None:
        return None
    return _cstr(text).translate(_UPPER)


def to_lower(text: Optional[str]) -> Optional[str]:
    """Copy of ``text`` with ASCII letters in lower case; ``None`` stays ``None``."""
    if text is None:
        return None
    return _cstr(text).translate(_LOWER)


def trim(text: Optional[str], trim_chars: Optional[str]) -> Optional[str]:
    """Remove leading and trailing characters found in ``trim_chars``.

    Returns ``None`` if either argument is ``None``. An empty
    ``trim_chars`` removes nothing.
    """
    if text is None or trim_chars is None:
        return None
    text = _cstr(text)
    chars = _cstr(trim_chars)
    if not chars:
        return text
    return text.strip(chars)