# seqwrap

TCP sequence numbers are 32 bits wide and begin at an arbitrary initial
sequence number (ISN). Inside a program it is usually simpler to count bytes
with a 64-bit "absolute" sequence number that starts at zero. `seqwrap`
converts between the two.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

# Absolute sequence number -> 32-bit wire value
seqno = wrap(3 * 2**32 + 17, isn)
print(seqno)                 # 32

# 32-bit wire value -> the absolute sequence number nearest a checkpoint
absolute = unwrap(seqno, isn, 3 * 2**32)
print(absolute)              # 12884901905
```

### `WrappingInt32`

An immutable, hashable value holding a raw 32-bit integer in `raw_value`.
Any integer given to the constructor is reduced modulo 2**32; anything other
than an `int` (including `bool`) raises `TypeError`.

- `a + k` and `a - k` step forward or back by an integer `k`, wrapping
  modulo 2**32, and give a new `WrappingInt32`.
- `a - b` for two `WrappingInt32` values gives the signed 32-bit offset from
  `b` to `a`, an `int` in the range -2**31 to 2**31 - 1.
- `a == b` and `a != b` compare raw values; `str(a)` shows the raw value.

### `wrap(n, isn)`

Turns the absolute sequence number `n` into the `WrappingInt32` that goes on
the wire for a stream that began at `isn`.

### `unwrap(n, isn, checkpoint)`

Returns the absolute sequence number that wraps to `n` and lies closest to
`checkpoint`, which is usually the most recently seen absolute sequence
number. Each direction of a TCP connection has its own ISN, so use the ISN
that belongs to the stream whose numbers you are converting.

Both functions take absolute sequence numbers as unsigned 64-bit values: a
value below zero or at or above 2**64 raises `ValueError`, and a non-`int`
raises `TypeError`.

## Scope

`seqwrap` only does sequence-number arithmetic. It does not build, parse or
send TCP segments, and it keeps no connection state such as windows or
retransmission timers.

## Running the tests

```
pip install "seqwrap[test]"
pytest
```