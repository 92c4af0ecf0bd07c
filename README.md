# iats

Building blocks for antenna-tracker logic, usable from plain Python.
The package uses only the standard library.

## What is inside

Data and protocol helpers:

- `iats.crc`: XOR checksums and CRC-8/DVB-S2 (`crc_xor`, `crc_xor_bytes`,
  `crc8_dvb_s2`, `crc8_dvb_s2_bytes`).
- `iats.fec`: a nibble-to-byte, mostly DC-free forward error correction code
  (`encode`, `decode`, `encoded_size`, `decoded_size`). `decode` raises
  `ValueError` on odd-length input.
- `iats.uvarint`: unsigned varints limited to 16 or 32 bits (`encode16`,
  `encode32`, `decode16`, `decode32`). Decoding returns `(value, bytes_used)`;
  values or data that do not fit raise `ValueError`.
- `iats.stringutil`: `strput`, which returns the bytes a bounded buffer would
  hold after a NUL-terminated copy.
- `iats.ringbuffer.RingBuffer`: a fixed-capacity FIFO with `push`,
  `force_push`, `pop`, `peek`, `discard` and `empty`. `pop` and `peek` raise
  `IndexError` when it is empty.
- `iats.uniquelist.UniqueList`: an ordered collection that holds each object
  once, compared by identity.
- `iats.data_state.DataState`: tracks dirtiness, send times and
  acknowledgements for a telemetry value, and gives a send-priority `score`.
- `iats.io_port`: `IO`, a byte endpoint built from read, write and flags
  callables, and `IOFlags`. A missing read or write callable raises
  `io.UnsupportedOperation`.
- `iats.macros`: `constrain`, `constrain_to_i8`, `has_prefix`.

Maths and filters:

- `iats.calc`: great-circle `distance_between`, `course_to`, `tilt_to` and
  the rhumb-line `distance_move_to`.
- `iats.ease`: easing curves (`easing`, `ease_out_quad`, `ease_out_quart`,
  `ease_out_circ`, `ease_out_expo`, `ease_out_cubic`), plus `EaseOut` and
  `EaseConfig`.
- `iats.kalman`: one- and two-dimensional Kalman filters (`Kalman1`,
  `Kalman2`).
- `iats.lpf.LowPassFilter`: a first-order RC low-pass filter over microsecond
  timestamps.
- `iats.timeutil`: tick, millisecond and microsecond conversions,
  `ticks_elapsed`, `cycle_every_ms`, `micros_now` and `micros_delay`.
- `iats.version`: `software_version` and `FIRMWARE_NAME`.

Peripheral models:

- `iats.errors`: `HalError` and its subclasses (`NoMemoryError`,
  `InvalidArgError`, `InvalidStateError`, `NotFoundError`,
  `NotSupportedError`), plus `check`, which raises the one matching an error
  code.
- `iats.gpio`: pin masks (`gpio_mask`, `mask_count`, `user_index`),
  `gpio_toa`, and `GpioBank`, an in-memory bank of lines whose level changes
  fire installed interrupt handlers.
- `iats.pins`: `GpioTag`, `get_configurable_at` and `get_by_tag`.
- `iats.serial_config`: `SerialPortConfig`, along with `Parity`, `StopBits`
  and `HalfDuplexMode`.
- `iats.adc`: `Adc`, which averages ten readings from a `read_raw` callable and
  converts them with a `raw_to_voltage` callable.
- `iats.md5`: `Md5`.
- `iats.mutex`: `Mutex`, whose `lock` never waits; it also works as a context
  manager.
- `iats.rand`: `rand_u32`.
- `iats.storage`: `Storage`, a namespaced key/blob store that lives in memory
  and, given a path, is written to a JSON file on `commit`.
- `iats.pwm`: `Pwm`, which allocates channels and timers on top of an
  `LedcDriver`. `MemoryLedcDriver` is an in-memory driver.
- `iats.ws2812`: `Color` and named colors, `pulse_word`, `color_bytes` and
  `encode_pulses`.
- `iats.p2p`: raw broadcast framing (`build_frame`, `extract_payload`) and
  `P2PLink`, which sends through a function you supply.
- `iats.i2c`: `write_addr`, `read_addr`, `I2CCommand` for building and
  executing command lists through a transport you supply, `I2CBusConfig`, and
  `I2CBuses` for per-bus locking.
- `iats.spi`: `SpiBusConfig`, `SpiDeviceConfig`, `SpiTransaction` and
  `SpiDevice`, whose transactions run through a transfer function you supply.

## Examples

```python
from iats.crc import crc8_dvb_s2_bytes
from iats.fec import encode, decode
from iats.uvarint import encode32, decode32
from iats.ringbuffer import RingBuffer
from iats.calc import distance_between, course_to

checksum = crc8_dvb_s2_bytes(b"\x01\x02\x03", 0)

payload = b"hello"
assert decode(encode(payload)) == payload

raw = encode32(300, 5)
value, used = decode32(raw)

rb = RingBuffer(2)
rb.push(1)
rb.push(2)
rb.force_push(3)       # drops the oldest item
assert list(rb) == [2, 3]

meters = distance_between(52.0, 4.0, 52.1, 4.1)
heading = course_to(52.0, 4.0, 52.1, 4.1)
```

## What it does not do

The package does not talk to real hardware. GPIO, PWM and storage are kept
in memory (or in a JSON file), and ADC, I2C, SPI and the raw radio link only
work through callables you pass in. There is no serial port implementation
beyond `SerialPortConfig`, and no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```