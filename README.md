# servercore

Small building blocks shared by the parts of a game server. The package
provides millisecond clocks and countdown timers, an intrusive doubly
linked list, debug renderings of raw bytes, a console progress bar, text
helpers for Latin, Cyrillic and East Asian names, and assorted string,
time, network and hex utilities. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `servercore.timer`: `get_ms_time_diff` gives the difference between two
  32-bit millisecond stamps and copes with wrap-around. `WorldTimer` counts
  milliseconds since its creation and records world ticks
  (`tick`, `tick_time`, `tick_prev_time`, `get_ms_time`).
  `IntervalTimer` and `ShortIntervalTimer` accumulate time until an
  interval has passed. `TimeTracker` and `ShortTimeTracker` count down to
  an expiry. All of them have `update`, `passed` and `reset`.
- `servercore.linkedlist`: `LinkedListHead` and `LinkedListElement` form an
  intrusive doubly linked list with sentinel nodes. A head can be iterated
  forwards and with `reversed()`.
- `servercore.dump`: `storage_dump`, `text_dump` and `hex_dump` turn raw
  bytes into debug text. Each starts with a `STORAGE_SIZE:` header.
- `servercore.progressbar`: `ProgressBar` draws a 50-column bar on a text
  stream (standard output by default). It is a context manager that ends
  the bar with a newline. `set_output_state` turns drawing on or off for
  every bar.
- `servercore.text`: character classes (`is_basic_latin_character`,
  `is_extended_latin_character`, `is_cyrillic_character`,
  `is_east_asian_character`, `is_numeric`, `is_white_space`, and the
  matching `*_string` checks), and case mapping for Latin and Cyrillic
  letters (`wchar_to_upper`, `wchar_to_lower`, `wstr_to_upper`,
  `wstr_to_lower`, `str_to_upper`, `str_to_lower`). The UTF-8 helpers are
  `utf8_length`, `utf8_truncate`, `utf8_to_wstr`, `wstr_to_utf8` and
  `utf8_fit_to`. `utf8_to_console` and `console_to_utf8` return their
  input unchanged.
- `servercore.util`: `str_split`, `strip_line_invisible_chars`,
  `get_uint32_value_from_array` and `get_float_value_from_array` work on
  strings and tokens. `secs_to_time_string`, `time_string_to_secs`,
  `time_to_timestamp_str` and `secs_to_time_bit_fields` convert times.
  `apply_mod_uint32_var`, `apply_mod_float_var` and
  `apply_percent_mod_float_var` apply value modifiers. `is_ip_address`,
  `is_ip_addr_in_network` and `get_address_string` handle IPv4 addresses.
  `create_pid_file` writes a PID file. `hex_encode_byte_array`,
  `byte_array_to_hex_str` and `hex_str_to_byte_array` convert between
  bytes and hex.
- `servercore.revision`: `REVISION_NR` and the `DatabaseVersion` records
  `REALMD_DB`, `CHAR_DB` and `WORLD_DB`.

## Examples

```python
from servercore.util import secs_to_time_string, time_string_to_secs, str_split

assert secs_to_time_string(3725, True) == "1h2m5s"
assert time_string_to_secs("1d2h30m") == 95400
assert str_split("a,,b c", ", ") == ["a", "b", "c"]
```

```python
from servercore.timer import IntervalTimer, get_ms_time_diff

timer = IntervalTimer(interval=1000)
timer.update(1500)
assert timer.passed()
timer.reset()
assert timer.current == 500

assert get_ms_time_diff(0xFFFFFFF0, 0x10) == 31
```

```python
from servercore.text import wstr_to_upper, utf8_truncate
from servercore.dump import hex_dump

assert wstr_to_upper("привет") == "ПРИВЕТ"
assert utf8_truncate("héllo".encode(), 2) == "hé".encode()
assert hex_dump(b"\x01\x02") == "STORAGE_SIZE: 2\n01 02 "
```

## What the package does not do

It has no binary packet buffer for reading and writing typed values, and
no opcode-carrying packet type. It has no scheduler that runs events at
set times and no back-reference links between objects. It has no random
number helpers and no assertion helpers. It also offers no command, no
server and no storage. It is a library of helpers only.