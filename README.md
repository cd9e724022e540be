# cerealize

A small JSON writer. You put named fields into an `Object` and get a
compact JSON string back from `serialize_json`.

## What a value can be

- an `int`, `float`, `bool` or `str`
- any object with a `serialize()` method that returns an `Object`
- a `list`, `tuple` or `range` of such values, which becomes a JSON array
- an `Object`, an `Array`, or an `AnyValue` wrapping one of the above

## Usage

```python
from cerealize.serialize import Object, serialize_json

class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def serialize(self):
        obj = Object()
        obj.append("x", self.x)
        obj.append("y", self.y)
        return obj

doc = Object()
doc.append("name", "origin")
doc.append("point", Point(0, 0))
doc.append("ints", [1, 2, 3])
print(serialize_json(doc))
# {"name":"origin","point":{"x":0,"y":0},"ints":[1,2,3]}
```

`serialize_json` also accepts a single value or a sequence directly,
for example `serialize_json([1, 2])` gives `[1,2]`.

## Output format

- No whitespace between tokens.
- Fields keep the order in which they were appended.
- Floats are written with six digits after the decimal point, so `2.5`
  becomes `2.500000`.
- In strings, `\` and `"` are backslash-escaped and control characters
  (code points below 0x20) are written as `\u00XX` with upper-case hex
  digits. Other characters, including non-ASCII ones, are written as they are.

## Errors

- `serialize_json` raises `SerializationError` (a `ValueError`) when a float
  is NaN or infinite.
- A value of an unsupported type raises `TypeError`, as does a `serialize()`
  method that does not return an `Object`, and `Object.append` with a field
  name that is not a `str`.

`is_base_value(value)` returns `True` for `int`, `float`, `str` and `bool`.
`is_serializable(value)` returns `True` for base values and for objects with
a callable `serialize` attribute; it does not look at sequences.

## Demo

`cerealize.demo` defines two sample records, `Smaller` and `Composite`, and
`build_document(count)`, which builds an `Object` with an `ints` array, a
`big` array of `count` `Composite` records and a single `garbage` record.
The command prints that document as JSON:

```
cerealize-demo
cerealize-demo --count 3
```

`--count` defaults to 10000 and must not be negative.

## What it does not do

The package only writes JSON. It does not read or parse JSON text, and it
has no pretty-printing or indentation options.

## Tests

```
pip install -e .[test]
pytest
```