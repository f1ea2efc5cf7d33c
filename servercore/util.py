"""String, time, network and hex helpers used across the server."""

from __future__ import annotations

import ipaddress
import os
import struct
import time
from typing import Sequence, Union

_UINT32 = 0xFFFFFFFF

MINUTE = 60
HOUR = MINUTE * 60
DAY = HOUR * 24

_INVISIBLE_CHARS = frozenset(" \t\a\n")
_C_SPACE = frozenset(" \t\n\v\f\r")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

IPv4Like = Union[str, int, ipaddress.IPv4Address]
BytesLike = Union[bytes, bytearray, memoryview, Sequence[int]]


# -- tokens -------------------------------------------------------------

def str_split(src: str, sep: str) -> list[str]:
    """Split *src* at any character of *sep*, dropping empty tokens."""
    tokens: list[str] = []
    current: list[str] = []
    for ch in src:
        if ch in sep:
            if current:
                tokens.append("".join(current))
            current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def _atoi(text: str) -> int:
    """Parse like C atoi: optional leading space and sign, then digits."""
    pos = 0
    while pos < len(text) and text[pos] in _C_SPACE:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return -value if negative else value


def get_uint32_value_from_array(data: Sequence[str], index: int) -> int:
    """The token at *index* read as an unsigned 32-bit number; 0 if absent."""
    if index >= len(data):
        return 0
    return _atoi(data[index]) & _UINT32


def get_float_value_from_array(data: Sequence[str], index: int) -> float:
    """The token at *index* read as the bit pattern of a 32-bit float."""
    bits = get_uint32_value_from_array(data, index)
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def strip_line_invisible_chars(text: str) -> str:
    """Collapse each run of spaces, tabs, bells and newlines into one space."""
    out: list[str] = []
    in_space = False
    for ch in text:
        if ch in _INVISIBLE_CHARS:
            if not in_space:
                out.append(" ")
                in_space = True
        else:
            out.append(ch)
            in_space = False
    return "".join(out)


# -- time ---------------------------------------------------------------

def _c_divmod(a: int, b: int) -> tuple[int, int]:
    """Division and remainder truncating toward zero."""
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def secs_to_time_string(time_in_secs: int, short_text: bool = False, hours_only: bool = False) -> str:
    """Render a duration as days, hours, minutes and seconds."""
    secs = _c_divmod(time_in_secs, MINUTE)[1]
    minutes = _c_divmod(_c_divmod(time_in_secs, HOUR)[1], MINUTE)[0]
    hours = _c_divmod(_c_divmod(time_in_secs, DAY)[1], HOUR)[0]
    days = _c_divmod(time_in_secs, DAY)[0]

    parts: list[str] = []
    if days:
        parts.append(f"{days}{'d' if short_text else ' Day(s) '}")
    if hours or hours_only:
        parts.append(f"{hours}{'h' if short_text else ' Hour(s) '}")
    if not hours_only:
        if minutes:
            parts.append(f"{minutes}{'m' if short_text else ' Minute(s) '}")
        if secs or (not days and not hours and not minutes):
            parts.append(f"{secs}{'s' if short_text else ' Second(s).'}")
    return "".join(parts)


_UNIT_SECONDS = {"d": DAY, "h": HOUR, "m": MINUTE, "s": 1}


def time_string_to_secs(timestring: str) -> int:
    """Parse text such as '1d2h30m' into seconds; 0 on an unknown unit.

    Digits not followed by a unit are ignored.
    """
    secs = 0
    buffer = 0
    for ch in timestring:
        if "0" <= ch <= "9":
            buffer = (buffer * 10 + ord(ch) - ord("0")) & _UINT32
        else:
            multiplier = _UNIT_SECONDS.get(ch)
            if multiplier is None:
                return 0
            secs = (secs + buffer * multiplier) & _UINT32
            buffer = 0
    return secs


def time_to_timestamp_str(t: float) -> str:
    """Local time of *t* as YYYY-MM-DD_HH-MM-SS."""
    return time.strftime("%Y-%m-%d_%H-%M-%S", time.localtime(t))


def secs_to_time_bit_fields(secs: float) -> int:
    """Pack the local time of *secs* into the client's 32-bit date format."""
    lt = time.localtime(secs)
    year = lt.tm_year - 2000
    month = lt.tm_mon - 1
    weekday = (lt.tm_wday + 1) % 7  # Sunday is 0
    packed = (
        year << 24
        | month << 20
        | (lt.tm_mday - 1) << 14
        | weekday << 11
        | lt.tm_hour << 6
        | lt.tm_min
    )
    return packed & _UINT32


# -- value modifiers ----------------------------------------------------

def apply_mod_uint32_var(var: int, val: int, apply: bool) -> int:
    """Add or remove *val* from *var*, never going below zero."""
    result = var + (val if apply else -val)
    return max(result, 0)


def apply_mod_float_var(var: float, val: float, apply: bool) -> float:
    """Add or remove *val* from *var*, never going below zero."""
    result = var + (val if apply else -val)
    return 0.0 if result < 0 else result


def apply_percent_mod_float_var(var: float, val: float, apply: bool) -> float:
    """Apply or remove a percentage change of *val* to *var*."""
    if val == -100.0:  # keep the value from collapsing to zero
        val = -99.99
    factor = (100.0 + val) / 100.0 if apply else 100.0 / (100.0 + val)
    return var * factor


# -- network ------------------------------------------------------------

def _parse_inet_part(part: str) -> int | None:
    if not part or not ("0" <= part[0] <= "9"):
        return None
    if part[:2] in ("0x", "0X"):
        digits = part[2:]
        if any(ch not in _HEX_DIGITS for ch in digits):
            return None
        return int(digits, 16) if digits else 0
    if part[0] == "0":
        if any(not "0" <= ch <= "7" for ch in part):
            return None
        return int(part, 8)
    if not part.isascii() or not part.isdigit():
        return None
    return int(part)


def _inet_addr(text: str) -> int | None:
    """Parse an IPv4 address in any classic numeric form."""
    for index, ch in enumerate(text):
        if ch in _C_SPACE:
            text = text[:index]
            break
    pieces = text.split(".")
    if not 1 <= len(pieces) <= 4:
        return None
    values = [_parse_inet_part(piece) for piece in pieces]
    if any(value is None for value in values):
        return None
    *head, last = values
    if any(value > 0xFF for value in head):
        return None
    last_bits = 8 * (4 - len(head))
    if last >= 1 << last_bits:
        return None
    result = 0
    for position, value in enumerate(head):
        result |= value << (24 - 8 * position)
    return result | last


def is_ip_address(ipaddress: str | None) -> bool:
    """Whether the text is an IPv4 address, including short numeric forms.

    The broadcast address 255.255.255.255 is not recognised.
    """
    if not ipaddress:
        return False
    value = _inet_addr(ipaddress)
    return value is not None and value != _UINT32


def get_address_string(host: str, port: int) -> str:
    """Format an address as 'ip:port'."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _ip_int(value: IPv4Like) -> int:
    return int(ipaddress.IPv4Address(value))


def is_ip_addr_in_network(net: IPv4Like, addr: IPv4Like, subnet_mask: IPv4Like) -> bool:
    """Whether *addr* lies in the network *net* under *subnet_mask*."""
    mask = _ip_int(subnet_mask)
    return (_ip_int(net) & mask) == (_ip_int(addr) & mask)


# -- files --------------------------------------------------------------

def create_pid_file(filename: Union[str, os.PathLike]) -> int:
    """Write the current process id to *filename* and return it."""
    pid = os.getpid()
    with open(filename, "w", encoding="ascii") as handle:
        handle.write(str(pid))
    return pid


# -- hex ----------------------------------------------------------------

def hex_encode_byte_array(data: BytesLike) -> str:
    """Upper-case hex of every byte, in order."""
    return bytes(data).hex().upper()


def byte_array_to_hex_str(data: BytesLike, reverse: bool = False) -> str:
    """Upper-case hex of the bytes, last byte first when *reverse*."""
    raw = bytes(data)
    return (raw[::-1] if reverse else raw).hex().upper()


def _strtoul_byte(pair: str) -> int:
    """Value of the leading hex digits of *pair*, as C strtoul would read them."""
    digits = []
    for ch in pair:
        if ch not in _HEX_DIGITS:
            break
        digits.append(ch)
    return int("".join(digits), 16) & 0xFF if digits else 0


def hex_str_to_byte_array(text: str, reverse: bool = False) -> bytes:
    """Bytes from pairs of hex digits, last pair first when *reverse*."""
    if len(text) % 2:
        raise ValueError("hex string must have an even number of characters")
    pairs = [text[i:i + 2] for i in range(0, len(text), 2)]
    if reverse:
        pairs.reverse()
    return bytes(_strtoul_byte(pair) for pair in pairs)