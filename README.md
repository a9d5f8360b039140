# daikin_ir

Build, encode and decode the infrared command frames that Daikin air-conditioner remote controls use.

The package works with pulse timings and does not drive hardware itself. To send, you give `IRSender` a callable. Each time a packet is sent, it calls that callable with the list of `Pulse` objects and the carrier frequency in kHz. The output can then go to a GPIO driver, an IR blaster or a list in a test. To receive, you feed in the low/high duration pairs measured from an IR detector, and the decoder rebuilds the frame bytes.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

### `daikin_ir.protocol`

This module holds the timing constants in microseconds:
- `HDR_MARK` and `HDR_SPACE`
- `ONE_MARK` and `ONE_SPACE`
- `ZERO_MARK` and `ZERO_SPACE`
- `FREQUENCY_KHZ`, which is 38

It also provides:
- `Level`, an enum with the members `MARK` and `SPACE`.
- `byte_sum(data)`, the 8-bit wrapping sum of the bytes.
- `carrier_half_periods(khz)`, which returns the high and low microseconds of one carrier cycle. It raises `ValueError` for a frequency of zero or below, or one too high to give a whole period.

### `daikin_ir.sender`

- `Pulse` is a frozen dataclass with these fields:
  - `level`, a `Level`.
  - `duration`, in µs.
  - `modulated`.
  - `is_mark`, a property.
- `encode_frame(data)` returns the pulses for a whole frame: a header, then each byte least significant bit first, then a trailer. A value outside 0–255 raises `ValueError`.
- `wake_pattern()` returns the wake-up preamble.
- `raw_pulses(durations)` turns alternating durations, starting with a mark, into pulses and closes them with an empty space.
- `IRSender(transmit=None, frequency_khz=38)` has these methods:
  - `send_daikin(data, length=None, start=0)` prepends a short unmodulated warm-up pulse, then sends a slice of `data` as a single frame.
  - `send_daikin_wake()` sends the wake-up preamble.
  - `send_raw(durations, frequency_khz=None)` sends raw durations.

  Each method returns the pulses it produced. When a `transmit` callable was given, the method also calls `transmit(pulses, khz)`.

### `daikin_ir.receiver`

Durations here are counted in samples of 10 µs. `low` is the time the detector output stays low, which is while the carrier is present. `high` is the time it stays high afterwards.

- `is_one`, `is_zero`, `is_start` and `is_stop` classify a `(low, high)` pair.
- `verify_checksum(data)` checks that the last byte is the 8-bit sum of the bytes before it.
- `DaikinReceiver(buffer_size=25)` is the decoder. It raises `ValueError` for a `buffer_size` below 24. It has these methods:
  - `decode(pairs)` runs `(low, high)` pairs through the decoder. A pair whose `high` exceeds 600 samples ends a packet. The method returns the bytes of the last packet of the first complete frame, or `None`. A frame is two packets, or three if a wake-up preamble was seen.
  - `feed(low, high)` and `end_of_signal(low, high)` let you drive the decoder pair by pair. `feed` returns a `Pattern` flag. `end_of_signal` returns the frame bytes, or `None` while more packets are expected. It raises `ReceiveError` on a checksum mismatch, a packet that is too short or too long, or a timeout outside a trailer.
  - `reset()` discards any partly received state.
- `describe_arc(data, packet_length=2)` reads an ARC data packet of at least 17 bytes into an `ArcState`. The result holds:
  - power, mode, fan, temperature and both swings
  - the timer flags and their values
  - econo
  - the current time, which is read only when `packet_length` is 3

  `str()` of an `ArcState` lists power, mode, fan, temperature and swing on separate lines.

### `daikin_ir.arc`

`DaikinARC(sender=None, receiver=None)` holds the state of an ARC-series remote as its 27-byte frame. If no sender or receiver is given, it creates a default `IRSender` or `DaikinReceiver`.

Methods and properties:
- `on()` and `off()` switch the unit on and off.
- These properties can be read and set:
  - `power`, 0 or 1.
  - `swing`, 0 or 1.
  - `swing_lr`, 0 or 1.
  - `mode`, a `Mode`: `FAN`, `COOL`, `DRY`, `HEAT` or `AUTO`.
  - `fan`: 0–4 for fixed speeds, 5 for auto, 6 for quiet.
  - `temperature`, in °C.
- `frame` gives the frame as bytes.
- `dump()` returns the bytes as upper-case hex, with each byte followed by `-`.
- `send_command()` sends the 8-byte header packet, waits 29 ms, then sends the 19-byte data packet. It returns both pulse lists.
- `description()` returns the current settings as an `ArcState`.
- `decode(pairs)` decodes received pairs. If a data packet longer than 10 bytes arrives, it takes over that packet's settings and returns `True`.
- `update_from_received(data)` takes over the settings of a received data packet. Any value the frame cannot hold in the resulting mode is skipped.

Checksums are recomputed after every change. If you set a value that is out of range, the setter raises `ValueError`. Temperature limits depend on the mode:

| Mode | Temperature range |
|------|-------------------|
| COOL | 18–32 |
| HEAT | 10–30 |
| AUTO | 18–30 |

In `FAN` and `DRY` mode, setting the temperature raises `ValueError`.

### `daikin_ir.brc`

`DaikinBRC(sender=None)` holds the state of a BRC-series remote as its 22-byte frame. It has these methods and properties:
- `on()` and `off()`.
- `power`, a read-only property.
- `set_swing(state)`.
- `set_mode(mode)`: 0 for fan, 1 for cool, 2 for dry.
- `set_fan(speed)`: 0 for high, 1 for low.
- `set_temperature(temp)`: 18–36 °C.
- `frame` and `dump()`.
- `send_command()` sends a 7-byte header packet, waits 29 ms, then sends a 15-byte data packet.

Values out of range raise `ValueError`.

## Example

```python
from daikin_ir.sender import IRSender
from daikin_ir.arc import DaikinARC, Mode

sent = []

def transmit(pulses, khz):
    sent.append((khz, pulses))

remote = DaikinARC(IRSender(transmit))
remote.on()
remote.mode = Mode.COOL
remote.fan = 3
remote.temperature = 25
remote.swing = 1

print(remote.dump())                 # the 27-byte frame as hex
header, data = remote.send_command() # both packets also passed to transmit()
```

## What the package does not do

The package does not drive hardware. It neither sets GPIO pins nor produces the carrier wave, and it does not sample an IR detector. The caller sends the pulses and measures the received durations. There is no command-line tool.

## Running the tests

```
pytest
```