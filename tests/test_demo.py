import json

import pytest

from cerealize.demo import Composite, Smaller, build_document, main
from cerealize.serialize import serialize_json


def test_smaller_fields():
    obj = Smaller().serialize()
    assert [name for name, _ in obj.fields] == ["sub_double", "is_annoying", "annoying"]


def test_smaller_round_trip():
    decoded = json.loads(serialize_json(Smaller()))
    assert decoded["sub_double"] == pytest.approx(123.456)
    assert decoded["is_annoying"] is True
    assert decoded["annoying"] == Smaller().annoying


def test_composite_round_trip():
    decoded = json.loads(serialize_json(Composite()))
    assert list(decoded) == ["foo", "bar", "baz", "asdf"]
    assert decoded["foo"] == 3
    assert decoded["bar"] == 314
    assert decoded["baz"] == pytest.approx(2324.234)
    assert decoded["asdf"]["annoying"] == Smaller().annoying


def test_build_document_shape():
    decoded = json.loads(serialize_json(build_document(3)))
    assert list(decoded) == ["ints", "big", "garbage"]
    assert decoded["ints"] == [11, 22, 33, 44, 55]
    assert len(decoded["big"]) == 3
    assert all(item == decoded["garbage"] for item in decoded["big"])


def test_build_document_empty_big():
    decoded = json.loads(serialize_json(build_document(0)))
    assert decoded["big"] == []


def test_build_document_negative_count():
    with pytest.raises(ValueError):
        build_document(-1)


def test_main_prints_document(capsys):
    assert main(["--count", "2"]) == 0
    decoded = json.loads(capsys.readouterr().out)
    assert len(decoded["big"]) == 2
    assert decoded["garbage"]["foo"] == 3


def test_main_rejects_negative_count():
    with pytest.raises(SystemExit) as excinfo:
        main(["--count", "-5"])
    assert excinfo.value.code == 2