"""Character classification, case mapping and UTF-8 helpers for player-facing text."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]
Utf8 = Union[bytes, bytearray, memoryview, str]

_C_SPACE = frozenset(" \t\n\v\f\r")


def _code(wchar: Char) -> int:
    if isinstance(wchar, str):
        if len(wchar) != 1:
            raise TypeError(f"expected a single character, got {wchar!r}")
        return ord(wchar)
    if isinstance(wchar, int):
        return wchar
    raise TypeError(f"expected a character or code point, got {type(wchar).__name__}")


def _like(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def _raw(data: Utf8) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogatepass")
    return bytes(data)


# -- classification -----------------------------------------------------

def is_basic_latin_character(wchar: Char) -> bool:
    """Whether the character is an ASCII letter."""
    code = _code(wchar)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_extended_latin_character(wchar: Char) -> bool:
    """Whether the character is a basic or accented Latin letter."""
    code = _code(wchar)
    if is_basic_latin_character(code):
        return True
    return (
        0x00C0 <= code <= 0x00D6
        or 0x00D8 <= code <= 0x00DF
        or 0x00E0 <= code <= 0x00F6
        or 0x00F8 <= code <= 0x00FE
        or 0x0100 <= code <= 0x012F
        or code == 0x1E9E
    )


def is_cyrillic_character(wchar: Char) -> bool:
    """Whether the character is a Russian Cyrillic letter."""
    code = _code(wchar)
    return 0x0410 <= code <= 0x044F or code in (0x0401, 0x0451)


def is_east_asian_character(wchar: Char) -> bool:
    """Whether the character is Hangul, kana, a CJK ideograph or a halfwidth form."""
    code = _code(wchar)
    return (
        0x1100 <= code <= 0x11F9
        or 0x3041 <= code <= 0x30FF
        or 0x3131 <= code <= 0x318E
        or 0x31F0 <= code <= 0x31FF
        or 0x3400 <= code <= 0x4DB5
        or 0x4E00 <= code <= 0x9FC3
        or 0xAC00 <= code <= 0xD7A3
        or 0xFF01 <= code <= 0xFFEE
    )


def is_white_space(c: Char) -> bool:
    """Whether the character is space, tab, newline, vertical tab, form feed or CR."""
    code = _code(c)
    return 0 <= code < 0x110000 and chr(code) in _C_SPACE


def is_numeric(value: Char) -> bool:
    """Whether a character, or every character of a string, is a digit 0-9."""
    if isinstance(value, int):
        return ord("0") <= value <= ord("9")
    if isinstance(value, str):
        return all("0" <= ch <= "9" for ch in value)
    raise TypeError(f"expected a string or code point, got {type(value).__name__}")


def is_numeric_or_space(wchar: Char) -> bool:
    """Whether the character is a digit or a plain space."""
    code = _code(wchar)
    return is_numeric(code) or code == ord(" ")


def _all_match(wstr: str, predicate, numeric_or_space: bool) -> bool:
    return all(
        predicate(ch) or (numeric_or_space and is_numeric_or_space(ch))
        for ch in wstr
    )


def is_basic_latin_string(wstr: str, numeric_or_space: bool) -> bool:
    """Whether every character is an ASCII letter (or digit/space if allowed)."""
    return _all_match(wstr, is_basic_latin_character, numeric_or_space)


def is_extended_latin_string(wstr: str, numeric_or_space: bool) -> bool:
    """Whether every character is a Latin letter (or digit/space if allowed)."""
    return _all_match(wstr, is_extended_latin_character, numeric_or_space)


def is_cyrillic_string(wstr: str, numeric_or_space: bool) -> bool:
    """Whether every character is a Cyrillic letter (or digit/space if allowed)."""
    return _all_match(wstr, is_cyrillic_character, numeric_or_space)


def is_east_asian_string(wstr: str, numeric_or_space: bool) -> bool:
    """Whether every character is East Asian (or digit/space if allowed)."""
    return _all_match(wstr, is_east_asian_character, numeric_or_space)


# -- case mapping -------------------------------------------------------

_ASCII_UPPER = str.maketrans("abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_LOWER = str.maketrans("ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz")


def str_to_upper(text: str) -> str:
    """Upper-case ASCII letters only; other characters are left alone."""
    return text.translate(_ASCII_UPPER)


def str_to_lower(text: str) -> str:
    """Lower-case ASCII letters only; other characters are left alone."""
    return text.translate(_ASCII_LOWER)


def wchar_to_upper(wchar: Char) -> Char:
    """Upper-case Latin and Cyrillic letters; returns the same kind it was given."""
    code = _code(wchar)
    if ord("a") <= code <= ord("z"):
        result = code - 0x20
    elif code == 0x00DF:
        result = 0x1E9E
    elif 0x00E0 <= code <= 0x00F6 or 0x00F8 <= code <= 0x00FE:
        result = code - 0x20
    elif 0x0101 <= code <= 0x012F and code % 2 == 1:
        result = code - 1
    elif 0x0430 <= code <= 0x044F:
        result = code - 0x20
    elif code == 0x0451:
        result = 0x0401
    else:
        result = code
    return _like(wchar, result)


def wchar_to_upper_only_latin(wchar: Char) -> Char:
    """Upper-case ASCII letters, leaving every other character as it is."""
    return wchar_to_upper(wchar) if is_basic_latin_character(wchar) else wchar


def wchar_to_lower(wchar: Char) -> Char:
    """Lower-case Latin and Cyrillic letters; returns the same kind it was given."""
    code = _code(wchar)
    if ord("A") <= code <= ord("Z"):
        result = code + 0x20
    elif 0x00C0 <= code <= 0x00D6 or 0x00D8 <= code <= 0x00DE:
        result = code + 0x20
    elif 0x0100 <= code <= 0x012E and code % 2 == 0:
        result = code + 1
    elif code == 0x1E9E:
        result = 0x00DF
    elif code == 0x0401:
        result = 0x0451
    elif 0x0410 <= code <= 0x042F:
        result = code + 0x20
    else:
        result = code
    return _like(wchar, result)


def wstr_to_upper(wstr: str) -> str:
    """Apply wchar_to_upper to every character."""
    return "".join(wchar_to_upper(ch) for ch in wstr)


def wstr_to_lower(wstr: str) -> str:
    """Apply wchar_to_lower to every character."""
    return "".join(wchar_to_lower(ch) for ch in wstr)


# -- UTF-8 --------------------------------------------------------------

def utf8_length(data: Utf8) -> int:
    """Number of characters in UTF-8 *data*; 0 if it is not valid UTF-8."""
    try:
        return len(_raw(data).decode("utf-8"))
    except UnicodeDecodeError:
        return 0


def utf8_truncate(data: Utf8, length: int) -> bytes:
    """Cut UTF-8 *data* to at most *length* characters; empty if invalid."""
    raw = _raw(data)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        return b""
    if len(text) <= length:
        return raw
    return text[:length].encode("utf-8")


def utf8_to_wstr(data: Utf8) -> str:
    """Decode UTF-8 *data*; raises UnicodeDecodeError when it is invalid."""
    return _raw(data).decode("utf-8")


def wstr_to_utf8(wstr: str) -> bytes:
    """Encode text as UTF-8; raises UnicodeEncodeError on lone surrogates."""
    return wstr.encode("utf-8")


def utf8_fit_to(data: Utf8, search: str) -> bool:
    """Whether the lower-cased text of *data* contains *search*."""
    try:
        text = utf8_to_wstr(data)
    except UnicodeDecodeError:
        return False
    return search in wstr_to_lower(text)


def utf8_to_console(data: Utf8) -> Utf8:
    """Text as written to the console; the console takes UTF-8 unchanged."""
    return data


def console_to_utf8(data: Utf8) -> Utf8:
    """Text as read from the console; the console gives UTF-8 unchanged."""
    return data