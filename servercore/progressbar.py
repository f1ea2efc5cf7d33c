"""Text progress bar drawn on a console stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_EMPTY = " "
_FULL = "*"
_INDICATOR_LENGTH = 50

_show_output = True


def set_output_state(on: bool) -> None:
    """Turn drawing of every progress bar on or off."""
    global _show_output
    _show_output = bool(on)


class ProgressBar:
    """Bar of fixed width that fills as rows are stepped through."""

    def __init__(self, row_count: int, stream: Optional[TextIO] = None) -> None:
        self._stream = stream if stream is not None else sys.stdout
        self._rec_no = 0
        self._rec_pos = 0
        self._num_rec = row_count
        self._closed = False
        if not _show_output:
            return
        self._write("[" + _EMPTY * _INDICATOR_LENGTH + "] 0%\r[")

    def _write(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def step(self) -> None:
        """Advance by one row, redrawing when the bar grows."""
        if not _show_output or self._num_rec == 0:
            return
        self._rec_no += 1
        n = int(self._rec_no * _INDICATOR_LENGTH / self._num_rec)
        if n == self._rec_pos:
            return
        filled = _FULL * max(n, 0)
        empty = _EMPTY * max(_INDICATOR_LENGTH - n, 0)
        percent = n * 100 // _INDICATOR_LENGTH
        self._write(f"\r[{filled}{empty}] {percent}%  \r[")
        self._rec_pos = n

    def close(self) -> None:
        """Finish the bar with a newline."""
        if self._closed:
            return
        self._closed = True
        if _show_output:
            self._write("\n")

    def __enter__(self) -> ProgressBar:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()