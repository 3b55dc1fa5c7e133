# trackerkit

Pure-Python building blocks for the firmware side of a GPS tracker. The package depends only on the
standard library.

## Modules

- `trackerkit.adler32`: `adler32(data)` and `adler32_continue(checksum, data)`, which extends a
  checksum with more data.
- `trackerkit.crc`: `CrcSpec` describes a CRC standard (width, polynomial, initial remainder,
  final XOR, reflection). `crc_slow(spec, message)` computes it one bit at a time, and
  `CrcTable(spec).compute(message)` does the same work with a lookup table. `reflect(data, n_bits)`
  reverses the order of bits.
- `trackerkit.textutil`: `trim_left`, `trim_right`, `bypass(text, token)`, `ascii_to_ucs2` and
  `ucs2_to_ascii`.
- `trackerkit.json_node`: `JsonNode` and `JsonType` form a JSON tree. Object members are looked up
  by name ignoring ASCII case through `get`, `detach_named`, `delete_named` and `replace_named`.
  The tree has the constructors `create_null`, `create_bool`, `create_number`, `create_string`,
  `create_array`, `create_object`, `create_int_array`, `create_double_array` and
  `create_string_array`.
- `trackerkit.json_text`: `parse(text)` and `parse_with_opts(text, require_null_terminated)`.
  Both raise `JsonParseError` (a `ValueError` with a `position`) on malformed input.
  `render(node, formatted=True)` writes a tree as text, tab-indented when `formatted` is true.
  The module also has `format_number` and `minify`, which strips whitespace and `//` and `/* */`
  comments.
- `trackerkit.data`:
  - `Gps` and `LocalGps` hold position records.
  - `GpsQueue(capacity)` is a bounded FIFO that keeps one slot free, so it holds `capacity - 1`
    fixes. It raises `queue.Full` when full and `queue.Empty` when empty.
  - `BatteryMonitor` averages raw ADC voltage samples into a charge percentage from 0 to 100.
  - `DeviceState` holds the last position, a vibration-seconds counter and the itinerary flag.
- `trackerkit.commands`: `CommandRegistry(max_commands)` matches a line against command names by
  prefix, in registration order. A built-in `debug` command is registered first.
  `register(name, action)` raises `CommandError` when the registry is full. `dispatch(line)`
  returns the action's result, or `None` when no command matches.
- `trackerkit.logfile`:
  - `LogFile(directory, max_size)` appends CR LF-terminated lines to `log.txt`. Once the file
    reaches `max_size`, it is moved to `log.old`.
  - `read_chunks` yields the file's content in chunks.
  - `register(registry, output)` adds a `catlog` command.
  - `format_hex(data)` renders a hex dump.
- `trackerkit.settings`:
  - `Settings` holds the server address (`AddrType.IP` or `AddrType.DOMAIN`), the port, the timer
    periods and the autolock values.
  - `to_json` and `from_json` write and read the stored part. `change_server("host:port")` parses
    a server given as an IPv4 address or a domain. Malformed input raises `SettingsError`.
  - `load_settings(path)` returns the defaults when the file is missing. `save_settings` writes
    the file.
- `trackerkit.modem`:
  - `Modem(writer)` sends AT commands (`switch_engineering_mode`, `read_cell_info`, `read_ccid`,
    `gnss`) through a callable that returns the number of bytes written. It raises `ModemError` on
    a short write.
  - `is_call_ready`, `is_ccid_ok` and `engineering_mode_command` are standalone helpers.
- `trackerkit.rtc`:
  - `parse_gps_time(20150327014838)` gives an `RtcTime`, and `RtcTime.timestamp()` converts it to
    Unix seconds (UTC).
  - `RtcClock.update(value)` stores the time and marks the clock synced. Times with a year of 1984
    or earlier are treated as a receiver's default and ignored.
- `trackerkit.fsshell`: `FileShell(root, output)` provides `ls`, `rm`, `cat` and `tail` over a
  directory. `tail` prints the last 1024 bytes. `free_size()` gives the free disk space.
  `register(registry)` adds these commands to a `CommandRegistry`.

## Example

```python
from trackerkit.adler32 import adler32
from trackerkit.json_text import parse, render
from trackerkit.commands import CommandRegistry

assert adler32(b"Wikipedia") == 0x11E60398

node = parse('{"SERVER": {"PORT": 9880}}')
print(render(node, formatted=False))

registry = CommandRegistry(32)
registry.register("hello", lambda line: 0)
registry.dispatch("  hello world")
```

## What it does not do

The package does not talk to any hardware or network:

- It reads no serial port, GPS receiver or ADC.
- `Modem` only hands bytes to the writer you give it.
- `RtcClock` keeps the time in memory and sets no system clock.
- Nothing here connects to the configured server.
- There is no command-line program. Commands run only through `CommandRegistry.dispatch`, with
  whatever input you feed it.

## Installing and testing

```
pip install .[test]
pytest
```