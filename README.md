# ymbase

A small library of basic building blocks. It has no command-line program.

## Modules

- `ymbase.json_value`: `JsonValue`, an immutable JSON value built from
  Python data (`None`, `bool`, `int`, `float`, `str`, mappings with string
  keys, other sequences). It offers kind checks (`is_null()`, `is_string()`,
  `is_number()`, `is_int()`, `is_float()`, `is_bool()`, `is_object()`,
  `is_array()`), typed accessors (`get_string()`, `get_int()`,
  `get_float()`, `get_bool()`), `has_key()`, `key_list()`, `item_list()`,
  `get()` (null for a missing key), indexing by key or by position
  (negative positions count from the end), `len()`, iteration, equality and
  `to_json(indent)`. Integers must fit a signed 32-bit integer
  (`OverflowError` otherwise). A wrong kind raises `TypeError`; a missing key
  or an index out of range raises `ValueError`. `JsonType` names the kinds.
- `ymbase.json_io`: `parse(json_str)`, `read(filename)` and
  `write(value, filename, indent=False)`. Malformed text, `NaN`/`Infinity`,
  out-of-range integers and files that cannot be opened raise `ValueError`.
- `ymbase.binio`: `BinEnc` and `BinDec`, a little-endian binary encoder and
  decoder over byte streams: `write_bool`/`read_bool`, `write_8`..`write_64`
  and `read_8`..`read_64` (unsigned), `write_float`/`read_float`,
  `write_double`/`read_double`, length-prefixed strings
  (`write_string`/`read_string`), raw blocks (`write_block`/`read_block`) and
  signatures without a length prefix (`write_signature`/`read_signature`,
  which returns whether the bytes match). A short read raises `EOFError`.
- `ymbase.mt19937`: `Mt19937`, the 32-bit Mersenne Twister giving the same
  sequence as the standard `mt19937` engine. `Mt19937(seed)` (default or
  `-1` selects the default seed 5489), `seed(value)` and `eval()`.
- `ymbase.msgtype`: the `MsgType` enumeration (`Error`, `Warning`,
  `Failure`, `Info`, `Debug`, `End`) whose `str()` is a fixed-width label
  such as `(ERROR  )`, `conv2bitmask()` and the masks `MSG_MASK_ERROR`,
  `MSG_MASK_WARNING`, `MSG_MASK_FAILURE`, `MSG_MASK_INFO`, `MSG_MASK_DEBUG`,
  `MSG_MASK_ALL` and `MSG_MASK_NONE`.
- `ymbase.location`: `FileInfo` (a 16-bit file id; `0xFFFF` means invalid),
  `FileLineColumn` (line and column packed into 32 bits), `FileLoc` and
  `FileRegion` (with `from_loc()` and `span()`).
- `ymbase.binder`: `Binder` (abstract `event_proc(*args)`) and `BindMgr`
  (`reg_binder`, `unreg_binder`, `unreg_all_binders`, `prop_event(*args)`),
  a simple observer mechanism; a binder belongs to one manager at a time.
- `ymbase.interval_timer`: `IntervalTimer(interval, periodic=False)` calls a
  function from a background thread after `interval` seconds, once or
  repeatedly, until `stop()`. It also has `join()`, `running` and can be used
  as a context manager that stops it on exit.

## Install

```
pip install .
```

## Examples

```python
from ymbase.json_io import parse
from ymbase.json_value import JsonValue

value = parse('{"a": 1, "b": [true, null, 2.5]}')
assert value["a"].get_int() == 1
assert value["b"][-1].get_float() == 2.5
print(JsonValue({"x": "y"}).to_json())  # {"x": "y"}
```

```python
import io
from ymbase.binio import BinDec, BinEnc

buf = io.BytesIO()
enc = BinEnc(buf)
enc.write_32(123456)
enc.write_string("hello")
buf.seek(0)
dec = BinDec(buf)
assert dec.read_32() == 123456
assert dec.read_string() == "hello"
```

```python
from ymbase.mt19937 import Mt19937

gen = Mt19937()
print(gen.eval())  # 3499211612, the first output of the default seed
```

## What it does not do

- `FileInfo` holds only a numeric id. There is no registry of file names or
  include chains, so a location cannot be turned back into a file name.
- There is no command-line program and no interactive shell.

## Tests

```
pip install .[test]
pytest
```