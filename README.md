# msimkit

Small, self-contained building blocks for messaging servers and similar
network services: byte buffers and pools, a background delivery pipeline,
slot bitmaps, rate limiters, cryptographic helpers and a handful of utilities.

## Modules

- `msimkit.ring` – `Buffer`, a circular byte buffer that grows when a write
  does not fit. It offers `peek`, `peek_from_pos`, `discard`, `read`,
  `read_byte`, `write`, `write_byte`, `write_string`, `to_bytes`,
  `read_from` (fills from an object with `readinto`), `write_to` (drains into
  an object with `write`), `copy_from_fd` and `rewind`. Reading an empty
  buffer raises `RingBufferEmptyError`; a writer that accepts fewer bytes than
  offered makes `write_to` raise `ShortWriteError`. `ceil_to_power_of_two`
  is exported as well.
- `msimkit.byteslice` – `BytePool`, which keeps `bytearray` buffers in
  power-of-two size classes, plus the shared-pool functions `get` and `put`.
- `msimkit.bufferpool` – `RingBufferPool`, a pool of ring buffers that
  recalibrates its default and maximum sizes from usage, plus the shared-pool
  functions `get_buffer` and `put_buffer`.
- `msimkit.elastic` – `ElasticRingBuffer`, which takes a ring buffer from the
  shared pool on first write and gives it back once it has been drained
  (or when `done()` is called).
- `msimkit.pipeline` – `DataPipeline`, a worker thread that hands buffered
  bytes to a delivery callback in batches of at most `max_peek_bytes`.
  Delivered bytes are dropped; if the callback raises they are kept and
  offered again. A callback can raise `DataNotEnoughError` to ask for more
  data before anything is consumed.
- `msimkit.fifo` – `FIFO`, a bounded queue of integers that drops the oldest
  value when full; `pop()` on an empty queue returns 0.
- `msimkit.waitgroup` – `WaitGroupWrapper`: `wrap(cb)` runs a callback on a
  thread, `wait()` blocks until all have returned, `thread_count()` reports
  how many are still running.
- `msimkit.aes` – AES-CBC encryption and decryption with PKCS#5/PKCS#7
  padding (`aes_encrypt`, `aes_decrypt` and the `_pkcs5`, `_pkcs7`,
  `_pkcs7_base64` and `_simple` variants), and the padding functions.
- `msimkit.digest` – `md5`, `md5_bytes`, `hash_crc32`, `gen_uuid` (32 hex
  characters) and Curve25519 key agreement (`curve25519_key_pair`,
  `curve25519_key`).
- `msimkit.bitmap` – `SlotBitMap` for tracking which hash slots are owned,
  with a compact `"0-3,7"` text format (`from_format`, `format_slots`), slot
  export/clean/merge operations, and the functions `slots_contains`,
  `get_slot_num` (CRC-32 modulo slot count) and `get_slot_fill_format`.
- `msimkit.channel` – `channel_to_key` / `channel_from_key` for keys of the
  form `<type>&<id>`.
- `msimkit.rate` – `RateLimiter` (size against a maximum) and
  `InMemRateLimiter`, which also weighs recent follower sizes, lifts a limit
  only below 70% of the maximum, and changes state at most once per
  `CHANGE_TICK_THRESHOLD` ticks.
- `msimkit.common` – JSON helpers (`to_json`, `read_json`, `json_to_map`),
  base conversion (`decimal_to_any`, `any_to_decimal`), `random_string`,
  `remove_repeated`, `uints_to_strings`, `base64_decode` and small list
  helpers.
- `msimkit.parse` – lenient parsing (`parse_int`, `parse_uint8`,
  `parse_uint32`, `parse_uint64`, `parse_int64`, `parse_float64`,
  `parse_bool`, `string_to_uint8`): invalid text gives a zero value and
  out-of-range integers are clamped.
- `msimkit.timefmt` – fixed-layout date formatting and parsing of
  `YYYYMMDD` and `YYYY-MM-DD` (parsed as midnight UTC).
- `msimkit.fileutil` – `copy_file`, `write_file`, `read_file`,
  `file_exists`, `remove_file`.
- `msimkit.ip` – `get_external_ip` (asks an echo service over HTTPS),
  `get_intranet_ips` and `is_intranet`.
- `msimkit.encode` – `encode_to_bytes` / `decode_from_bytes`, a pickle-based
  round trip for trusted, local data only.
- `msimkit.network` – thin `requests` wrappers: `post`, `put`, `get`,
  `get_json`, `post_for_query_params`, form posts (`post_form`,
  `post_form_bytes`, `post_form_all`, `post_form_xml`) and the generic
  `request_body` / `request_for_query_params`.

## Installation

```
pip install msimkit
```

## Examples

Ring buffer:

```python
from msimkit.ring import Buffer

buf = Buffer(8)
buf.write(b"hello world")        # grows as needed
head, tail = buf.peek(5)
print(head + tail)               # b'hello'
buf.discard(6)
print(buf.to_bytes())            # b'world'
```

Slot bitmap:

```python
from msimkit.bitmap import SlotBitMap, get_slot_num

slots = SlotBitMap.from_format("0-3,7", 16)
print(slots.valid_slots())       # [0, 1, 2, 3, 7]
print(slots.format_slots())      # '0-3,7'
print(get_slot_num(64, "user-1"))
```

AES:

```python
import os
from msimkit.aes import aes_encrypt_pkcs7_base64, aes_decrypt_pkcs7_base64

key = os.urandom(16)
iv = os.urandom(16)
sealed = aes_encrypt_pkcs7_base64(b"message", key, iv)
print(aes_decrypt_pkcs7_base64(sealed, key, iv))  # b'message'
```

Data pipeline:

```python
import time
from msimkit.pipeline import DataPipeline

received = []
pipeline = DataPipeline(1024, received.append)
pipeline.start()
pipeline.append(b"payload")
time.sleep(0.2)                  # give the worker a moment to deliver
pipeline.stop()
print(received)                  # [b'payload']
```

`stop()` ends the worker without a final flush: bytes still buffered at that
moment are not delivered.

## What it does not do

This is a library only. It provides no server, no network protocol, no
command-line program and no persistent storage; it supplies pieces from which
such programs can be built. `Buffer.copy_from_fd` relies on `os.readv` and is
therefore only available on POSIX systems.

## Running the tests

```
pip install -e ".[test]"
pytest
```