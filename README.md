# tcpseq

A TCP sequence number is 32 bits wide. It starts at an arbitrary initial
sequence number (ISN) and wraps around at 2**32. `tcpseq` provides that
value type, `WrappingInt32`. It also provides two functions, `wrap` and
`unwrap`, that convert between a sequence number and the 64-bit,
zero-based "absolute" position of a byte in a stream.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Everything lives in the module `tcpseq.wrapping_integers`.

```python
from tcpseq.wrapping_integers import WrappingInt32, wrap, unwrap

isn = WrappingInt32(2**32 - 2)

# absolute position -> 32-bit sequence number
seqno = wrap(5, isn)
int(seqno)             # 3

# 32-bit sequence number -> absolute position closest to a checkpoint
unwrap(seqno, isn, 0)  # 5

# adding or subtracting an int wraps modulo 2**32
WrappingInt32(2**32 - 1) + 1   # WrappingInt32(raw_value=0)
WrappingInt32(0) - 1           # WrappingInt32(raw_value=4294967295)

# the difference of two sequence numbers is a signed 32-bit offset
WrappingInt32(1) - WrappingInt32(2**32 - 1)   # 2
```

### `WrappingInt32`

An immutable, hashable value holding `raw_value`, an integer in
`0 <= raw_value < 2**32`.

- `a + n` and `a - n` with an `int` `n` give a new `WrappingInt32`, reduced
  modulo 2**32.
- `a - b` with two `WrappingInt32` values gives an `int` in
  `[-2**31, 2**31)`: the number of steps from `b` to `a`. It is negative when
  reaching `a` from `b` takes no more decrements than increments.
- Two values compare equal when their raw values are equal.
- `int(a)` and `str(a)` give the raw value, as an integer and in decimal.

Building one with a value that is not an `int` (a `bool` does not count)
raises `TypeError`. A value outside 32 bits raises `ValueError`.

### `wrap(n, isn)`

Returns the sequence number for absolute position `n`: `isn + n` modulo
2**32.

### `unwrap(n, isn, checkpoint)`

Returns the absolute sequence number that wraps to `n` and lies closest to
`checkpoint`. The checkpoint is usually the most recent absolute sequence
number seen. A result that would be negative has 2**32 added to it. The two
directions of a TCP connection each have their own ISN.

`wrap` and `unwrap` raise `TypeError` when `n` (for `wrap`) or `checkpoint`
(for `unwrap`) is not an `int`. They raise `ValueError` when that value lies
outside the unsigned 64-bit range.

## What this package does not do

`tcpseq` only does sequence-number arithmetic. It does not include a TCP
implementation: there is no segment parsing, no byte stream or reassembler,
no sender, receiver or connection state machine, no sockets, and no
command-line tool.