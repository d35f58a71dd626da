# ymbase

A collection of small, dependency-free utilities.

## Modules

- `ymbase.json_value.JsonValue`: a JSON value of any kind, including null.
  It is built from `None`, `str`, `int`, `float`, `bool`, lists, tuples,
  mappings with string keys and other `JsonValue` objects. It has kind tests
  (`is_null`, `is_string`, `is_number`, `is_int`, `is_float`, `is_bool`,
  `is_object`, `is_array`), typed accessors (`get_string`, `get_int`,
  `get_float`, `get_bool`), container access (`size`, `has_key`, `key_list`,
  `item_list`, `at`, `get`, `value[key]`) and `to_json`. Asking a value for
  something of the wrong kind raises `TypeError`; a missing key raises
  `ValueError` (except with `get`, which returns null) and a position outside
  an array raises `IndexError`.
- `ymbase.json_obj`: the node classes behind `JsonValue` (`JsonObj`,
  `JsonDict`, `JsonArray`, `JsonString`, `JsonInt`, `JsonFloat`, `JsonTrue`,
  `JsonFalse`) and `escaped_string`.
- `ymbase.union_find.UnionFindSet`: disjoint sets over `0 .. n-1` with path
  halving and union by rank. Ids out of range raise `IndexError`.
- `ymbase.option_parser.OptionParser`: splits strings such as
  `"a: x, b :2, c"` into `(key, value)` pairs. A backslash escapes the
  following character when looking for delimiters.
- `ymbase.str_pool`: `StrPool`, a pool holding one shared copy of each
  registered string, and `ShString`, a string handle backed by a global pool.
- `ymbase.scanner.Scanner`: reads a text stream one character at a time,
  folds `\r` and `\r\n` into `\n`, and tracks line and column. End of input
  reads as the empty string.
- `ymbase.region`: `Loc` (a line and column) and `Region` (a span between two
  `Loc`s), with the textual form used in messages.
- `ymbase.dot_writer.DotWriter`: writes Graphviz DOT text (graphs, nodes,
  edges, rank groups) to a stream.
- `ymbase.msg`: `MsgType`, `MsgHandler`, `StreamMsgHandler`,
  `StrListMsgHandler` and `MsgMgr`, for counting messages by kind and routing
  them to handlers filtered by a `MsgType` mask.
- `ymbase.read_line.get_line`: writes a prompt to standard error and reads
  one line from standard input; returns `None` at end of input.

## JSON output

`to_json()` gives compact text; `to_json(True)` lays it out over lines with a
four-space indent and ends with a newline. Object keys are written in sorted
order. Floating point numbers are written with up to six significant digits.
A string is put in double quotes unless it contains a double quote, in which
case single quotes are used; if it contains both, it is put in double quotes
with each double quote escaped. Text containing such single-quoted strings is
therefore not always standard JSON.

## Installing

```
pip install .
```

## Examples

```python
from ymbase.json_value import JsonValue

value = JsonValue({"key": [1, 2, 3], "flag": True, "none": None})
assert value["key"][1].get_int() == 2
assert value.get("missing").is_null()
assert value.to_json() == '{"flag":true,"key":[1,2,3],"none":null}'
print(value.to_json(True))
```

```python
from ymbase.union_find import UnionFindSet

sets = UnionFindSet(5)
sets.merge(1, 2)
assert sets.find(2) == sets.find(1)
```

```python
from ymbase.option_parser import OptionParser

parser = OptionParser(",", ":")
assert parser.parse("a: x, b :2, c") == [("a", "x"), ("b", "2"), ("c", "")]
```

```python
import io
from ymbase.msg import MsgMgr, MsgType, StrListMsgHandler
from ymbase.region import Loc, Region

mgr = MsgMgr()
handler = StrListMsgHandler(MsgType.ERROR | MsgType.WARNING)
mgr.attach_handler(handler)
mgr.put_msg("main.py", 10, Region(Loc(3, 5)), MsgType.ERROR, "E01", "bad input")
mgr.put_msg("main.py", 11, None, MsgType.INFO, "I01", "not shown")
assert handler.msg_list == ["line 3, column = 5: Error [E01]: bad input\n"]
assert mgr.msg_num() == 2 and mgr.error_num() == 1
```

## What it does not do

- It does not read JSON text: there is no parser and no function that loads a
  JSON file. `JsonValue` objects are built from Python values and can only be
  written out as text.
- It has no command-line program and no command-line option handling.
- `get_line` offers no line editing or input history; it reads a plain line
  from standard input.

## Running the tests

```
pip install .[test]
pytest
```