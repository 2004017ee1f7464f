# mithril

Small helpers for everyday development work: levelled console logging, hex formatting, mathematical constants, simple profiling and stack traces.

## Modules

### `mithril.log`

This module writes levelled messages to standard output. A format string holds `{}` placeholders, one for each argument.

- `Level` is an `IntEnum` with the members `DEBUG`, `INFO`, `WARNING`, `ERROR` and `OFF`. The default level is `INFO`.
- `set_level(level)` sets the minimum level that is written, and `get_level()` returns it.
- `level_name(level)` returns `"Debug"`, `"Info"`, `"Warning"` or `"Error"`. It returns `"?"` for `OFF`.
- `count_placeholders(fmt)` counts the `{}` placeholders in `fmt`.
- `format_message(fmt, *args)` fills the placeholders in order and appends a newline. It raises `ValueError` when the number of placeholders differs from the number of arguments.
- `debug`, `info`, `warning` and `error` write lines that begin with `[Debug] `, `[Info] `, `[Warning] ` or `[Error] `. Warnings are wrapped in the ANSI colour code for yellow and errors in the code for red.

### `mithril.hex`

- `hex_string(value)` renders an integer as lower-case hex. For example, `hex_string(255)` gives `"0xff"`. A negative value gets a leading minus sign, so `-255` gives `"-0xff"`. A value that is not an integer raises `TypeError`.
- `hex_string_vector(data)` renders a sequence of bytes. For example, `hex_string_vector(b"\x01\xab")` gives `"[0x1, 0xab]"`. The bytes are not zero-padded. An item outside 0 to 255 raises `ValueError`, and an item that is not an integer raises `TypeError`.

### `mithril.numbers`

This module holds mathematical constants as Python floats. The names are upper case, for example `PI`, `E`, `PHI`, `EULER`, `CATALAN`, `ROOT_TWO`, `LN_TWO`, `DEGREE` and `FIRST_FEIGENBAUM`.

### `mithril.profile`

This module times named sections of code.

- `Profiler(clock=time.monotonic_ns)` keeps a set of running timers. It supports `in` and `len()`.
- `Profiler.start(name)` starts a timer. If a timer with that name is already running, it logs an error instead.
- `Profiler.stop(name)` logs the elapsed time in µs, ms or sec, depending on its size, and returns it in microseconds. If nothing is running, or the name is unknown, it logs an error and returns `None`.
- The module-level `start(name)` and `stop(name)` use one shared profiler.

### `mithril.stacktrace`

- `stacktrace()` returns the current Python call stack, innermost frame first. It returns at most 64 frames after any skipped ones. Each line has the form `#0 function at file.py:12`. If every frame would be skipped, it exits the process with status 1.
- `skip_frames(n)` leaves out the `n` innermost frames.
- `signal_name(signum)` describes SIGILL, SIGABRT, SIGFPE and SIGSEGV. It returns `"?"` for any other signal.
- `signal_handler(signum, frame)` logs the signal, prints the stack trace and exits with status 1.
- `setup_signal_handlers(handler)` installs `handler` for those four signals and returns the previous handlers, keyed by signal number.

The traces cover Python frames only. They do not resolve native addresses to source lines.

## Example

```python
from mithril import log, hex, profile

log.set_level(log.Level.DEBUG)
log.info("loaded {} items from {}", 3, "cache")
print(hex.hex_string_vector(b"\x01\xab"))  # [0x1, 0xab]

profile.start("work")
sum(range(1_000_000))
micros = profile.stop("work")
```

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```