# avrcore

Pure-Python models of some runtime pieces of a small 8-bit microcontroller
core. They let you check firmware-side logic on a host machine without any
hardware. You can build USB descriptors, answer CDC-ACM class requests, work
out tone timer settings, or get the string and character rules the firmware
uses.

## Installation

```
pip install avrcore
```

To run the test suite:

```
pip install "avrcore[test]"
pytest
```

## Modules

- `avrcore.wstring`: `WString` is a mutable string that can be invalid.
  An invalid string is falsy, for example `WString(None)`. It has
  `concat`, `+` and `+=`, `compare_to` and the comparison operators,
  `equals_ignore_case`, `starts_with` and `ends_with`. For character access
  it has `char_at` and `set_char_at`, which are also available as indexing.
  The remaining methods are `index_of`, `last_index_of`, `substring`,
  `replace`, `remove`, `to_lower_case`, `to_upper_case`, `trim`, `to_int`,
  `to_double` and `to_float`. `to_float` rounds to single precision.
- `avrcore.wstring_ops`: the plain functions behind `WString`.
  - `format_integer` and `format_float` convert numbers to text.
  - `index_of`, `last_index_of`, `substring`, `remove_range` and `trim`
    search and edit text.
  - `parse_long` reads a leading integer and clamps it to 32 bits.
    `parse_double` reads a leading float.
- `avrcore.wcharacter`: C-locale ASCII classification and case helpers:
  - `is_alpha`, `is_digit`, `is_alpha_numeric`
  - `is_ascii`, `is_whitespace` (space or tab), `is_space`
  - `is_control`, `is_graph`, `is_printable`, `is_punct`
  - `is_lower_case`, `is_upper_case`, `is_hexadecimal_digit`
  - `to_ascii`, `to_lower_case`, `to_upper_case`

  They accept a one-character string or an integer code. The conversions
  return the same kind they were given.
- `avrcore.wmath`:
  - `map_range` maps a value linearly with truncating division.
  - `make_word` builds a word from bytes.
  - `random_seed` seeds the generator. A seed of 0 is ignored.
  - `random_below` and `random_range` return random values.
- `avrcore.usb_descriptors`: the USB request and descriptor constants.
  - `SetupPacket` has `unpack` and `pack`, plus a `w_value` property.
  - The descriptor records are `DeviceDescriptor`, `ConfigDescriptor`,
    `InterfaceDescriptor`, `EndpointDescriptor`, `IADDescriptor` and
    `CDCCSInterfaceDescriptor`. Each one has `pack()`.
  - `endpoint_in`, `endpoint_out` and `config_power_ma` are helper
    functions.
- `avrcore.cdc`: `CdcSerial` models the state of a CDC-ACM virtual serial
  port.
  - `interface_descriptor()` returns the function's descriptor bytes.
  - `handle_setup` answers GET/SET_LINE_CODING, SET_CONTROL_LINE_STATE and
    SEND_BREAK.
  - `read_break`, `baud`, `dtr`, `rts` and `is_open` report the port's
    state.
  - `bootloader_reset_pending` is set when a port opened at 1200 baud drops
    DTR.
  - `LineInfo` is the 7-byte line-coding record.
- `avrcore.tone`:
  - `timer_settings` picks the compare value and prescaler bits for a
    frequency.
  - `toggle_count` converts a duration to pin toggles.
  - `ToneGenerator` assigns pins to tone timers. Its `tick` method models
    one compare-match interrupt, and `pin_level` reads a pin's output
    level.

## Examples

Strings:

```python
from avrcore.wstring import WString

s = WString("hello")
s.concat(" world")      # True
s.index_of("o")         # 4
s.to_upper_case()
str(s)                  # "HELLO WORLD"
bool(WString(None))     # False
```

String helpers:

```python
from avrcore.wstring_ops import format_integer, format_float, parse_long

format_integer(255, 16)   # "ff"
format_integer(-1, 16)    # "ffffffff"
format_float(3.14159, 3)  # "3.142"
parse_long("  42abc")     # 42
```

Math helpers:

```python
from avrcore.wmath import map_range, make_word

map_range(512, 0, 1023, 0, 255)  # 127
make_word(0x12, 0x34)            # 0x1234
```

USB descriptors and the CDC function:

```python
from avrcore.usb_descriptors import SetupPacket, endpoint_in
from avrcore.cdc import CdcSerial

endpoint_in(1)                          # 0x81

port = CdcSerial()
len(port.interface_descriptor())        # 66
port.handle_setup(SetupPacket(0xA1, 0x21, w_length=7))  # 7-byte line coding
port.handle_setup(SetupPacket(0x21, 0x22, w_value_l=3))
port.is_open(), port.dtr(), port.rts()  # (True, True, True)
```

Tone timing:

```python
from avrcore.tone import ToneGenerator, timer_settings, toggle_count

timer_settings(2, 440)   # TimerSettings(ocr=141, prescaler_bits=5)
toggle_count(440, 1000)  # 880

gen = ToneGenerator()    # one tone slot on timer 3
gen.tone(5, 440, 10)     # 3
gen.tick(3)
gen.pin_level(5)         # 1
```

## What it does not do

This package does not model a whole device. It has no UART and no byte
stream reading or parsing. It has no formatted output sink and no IP
address type. It has no chaining of extra USB functions into a composite
device. On the USB side it covers only the descriptor layouts and the
CDC-ACM class requests. It does not handle standard control requests or
drive endpoints. Nothing here touches real hardware or starts other
programs, and it provides no command-line tool.