# vinac

Building blocks for a simple file archiver, and a small player movement
model.

- `vinac.lz` is a byte-oriented LZ77 block coder.
- `vinac.member` describes one file stored in an archive.
- `vinac.memberlist` holds an ordered list of members that you edit by
  position.
- `vinac.player` models a player that moves on a plane. Pressed keys or
  joystick flags drive it.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To also install the test dependencies (pytest, hypothesis):

```
pip install .[test]
```

## Compression

```python
from vinac.lz import compress, compress_fast, decompress

data = b"abcabcabcabcabcabc" * 10
packed = compress(data)            # searches the whole history window
packed_fast = compress_fast(data)  # follows a jump table of earlier byte pairs
assert decompress(packed) == data
assert decompress(packed_fast) == data
```

Both compressors accept `bytes`, `bytearray` or `memoryview` and return
`bytes`. Their output format is the same:

- The first byte is the marker. It is the least common byte value in the
  input, and the lowest such value on ties.
- Each marker byte in the data is written as the marker followed by `0`.
- A back-reference is the marker followed by a length and then an offset.
  Both are big-endian groups of seven bits, with the high bit set on every
  byte except the last.

A reference reaches back at most `vinac.lz.MAX_OFFSET` (100000) bytes. Short
matches are coded as references only when the reference is smaller than the
bytes it replaces. An empty input compresses to empty output, and
`decompress(b"")` returns `b""`.

`decompress` raises `ValueError` in these cases:

- the data is truncated, for example it ends after a marker or inside a
  reference;
- the data holds only a marker;
- a reference points before the start of the bytes decoded so far.

## Archive members

```python
from vinac.member import Member
from vinac.memberlist import MemberList

members = MemberList()
members.insert(Member.from_path("notes.txt", 0), -1)   # -1 or past the end appends
first = members.get(0)
print(members.find(first), len(members))
print(members.format())   # user ids separated by single spaces
```

`Member` is a dataclass with these fields:

- `name`
- `uid`
- `original_size`
- `current_size`
- `mtime`
- `offset`
- `stat`, which holds the `os.stat_result` and is excluded from comparison
  and repr

`Member.from_path(path, offset)` fills these fields from `os.stat`. A name
longer than 1023 bytes in UTF-8 raises `ValueError`.

`MemberList` takes an optional iterable of members and supports `len()` and
iteration. Its methods:

- `insert(member, pos)` inserts at `pos`. A negative position or one past
  the end appends. It returns the new length.
- `remove(pos)` takes out and returns the member at `pos`. A negative
  position or one past the end means the last member. It raises
  `IndexError` on an empty list.
- `get(pos)` returns the member at `pos` without removing it. A negative
  position means the last member. It raises `IndexError` on an empty list
  or for a position past the end.
- `find(member)` returns the position of that very object, not of an equal
  copy, or `-1` if it is absent.
- `format()` returns the members' `uid` values, separated by single spaces.

## Player movement

```python
from vinac.player import Player

p = Player()              # x=30.0, y=220.0, vel=2.0, life=10
p.move({"d", "s"}, 220)   # keys held down, case-insensitive
p.joystick.right = True
p.apply_joystick(220)
```

`Player.move(keys, y_limit)` moves the player by `vel` for each held key:

- `w` moves up.
- `a` moves left.
- `d` moves right.
- `s` moves down, but only while `y` is below `y_limit`.

`Player.apply_joystick(y_limit)` does the same from the flags of the
player's `Joystick`: `right`, `left`, `up` and `down`. The `fire` and `run`
flags are stored but do not affect movement.

## What this package does not do

There is no command-line archiver. Nothing here reads or writes archive
files: you lay out members, directory and content on disk yourself, using
the pieces above. The player model has no window, drawing, sprites or event
loop. It only keeps and updates state.

## Running the tests

```
pytest
```