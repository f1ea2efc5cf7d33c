"""Debug text renderings of raw byte storage."""

from __future__ import annotations

_TIME_PAD = "         "


def _header(data: bytes, include_time: bool) -> str:
    return f"STORAGE_SIZE: {len(data)}\n" + (_TIME_PAD if include_time else "")


def storage_dump(data: bytes, include_time: bool = False) -> str:
    """Render every byte as a decimal number followed by ' - '."""
    return _header(data, include_time) + "".join(f"{b} - " for b in data)


def text_dump(data: bytes, include_time: bool = False) -> str:
    """Render the bytes as raw characters."""
    return _header(data, include_time) + bytes(data).decode("latin-1")


def hex_dump(data: bytes, include_time: bool = False) -> str:
    """Render the bytes as hex, 16 per line with a bar after every 8."""
    parts = [_header(data, include_time)]
    j = k = 1
    for i, byte in enumerate(data):
        if i == j * 8 and i != k * 16:
            parts.append("| ")
            j += 1
        elif i == k * 16:
            parts.append("\n")
            if include_time:
                parts.append(_TIME_PAD)
            k += 1
            j += 1
        parts.append(f"{byte:02X} ")
    return "".join(parts)