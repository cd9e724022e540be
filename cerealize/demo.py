"""A sample document built from nested self-describing objects."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from cerealize.serialize import Object, serialize_json

DEFAULT_COUNT = 10000


@dataclass
class Smaller:
    """A small record holding a float, a flag and an awkward string."""

    sub_double: float = 123.456
    is_annoying: bool = True
    annoying: str = "this is a string with \n\nannoying\v\tchars\u1234"

    def serialize(self) -> Object:
        obj = Object()
        obj.append("sub_double", self.sub_double)
        obj.append("is_annoying", self.is_annoying)
        obj.append("annoying", self.annoying)
        return obj


@dataclass
class Composite:
    """A record with numeric fields and a nested Smaller."""

    foo: int = 3
    bar: int = 314
    baz: float = 2324.234
    asdf: Smaller = field(default_factory=Smaller)

    def serialize(self) -> Object:
        obj = Object()
        obj.append("foo", self.foo)
        obj.append("bar", self.bar)
        obj.append("baz", self.baz)
        obj.append("asdf", self.asdf)
        return obj


def build_document(count: int) -> Object:
    """Build the sample document with ``count`` Composite records under "big"."""
    if count < 0:
        raise ValueError("count must not be negative")
    document = Object()
    document.append("ints", [11, 22, 33, 44, 55])
    document.append("big", [Composite() for _ in range(count)])
    document.append("garbage", Composite())
    return document


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the sample JSON document.")
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_COUNT,
        help="number of records in the 'big' array",
    )
    args = parser.parse_args(argv)
    if args.count < 0:
        parser.error("--count must not be negative")
    print(serialize_json(build_document(args.count)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())