from dataclasses import dataclass
from enum import Enum

import pytest

from srkube.hashing import Fnv1a32, dump_object, hash_object, write_hash_object


@dataclass
class _Person:
    name: str
    age: int | None = None


@dataclass
class _OtherPerson:
    name: str
    age: int | None = None


class _Colour(Enum):
    RED = "red"


def test_empty_input_gives_offset_basis():
    assert Fnv1a32().intdigest() == 2166136261


def test_known_vector_single_letter():
    hasher = Fnv1a32()
    hasher.update(b"a")
    assert hasher.intdigest() == 0xE40C292C


def test_known_vector_foobar():
    hasher = Fnv1a32()
    hasher.update(b"foobar")
    assert hasher.intdigest() == 0xBF9CF968


def test_incremental_update_matches_single_update():
    whole = Fnv1a32()
    whole.update(b"foobar")
    parts = Fnv1a32()
    parts.update(b"foo")
    parts.update(b"bar")
    assert parts.intdigest() == whole.intdigest()


def test_hash_object_equals_hash_of_dump():
    obj = _Person("jack", 10)
    hasher = Fnv1a32()
    hasher.update(dump_object(obj).encode("utf-8"))
    assert hash_object(obj) == str(hasher.intdigest())


def test_write_hash_object_matches_hash_object():
    hasher = Fnv1a32()
    write_hash_object(hasher, {"a": [1, 2]})
    assert str(hasher.intdigest()) == hash_object({"a": [1, 2]})


def test_equal_objects_hash_equal():
    first = hash_object(_Person("test", 10))
    second = hash_object(_Person("test", 10))
    assert first == second
    assert first.isdigit()
    assert 0 <= int(first) < 2**32
    assert dump_object(_Person("test", 10)) == dump_object(_Person("test", 10))


def test_different_values_hash_differently():
    assert hash_object(_Person("test", 10)) != hash_object(_Person("test"))


def test_type_name_is_part_of_the_hash():
    assert hash_object(_Person("test", 10)) != hash_object(_OtherPerson("test", 10))


def test_mapping_order_does_not_matter():
    assert hash_object({"a": 1, "b": 2}) == hash_object({"b": 2, "a": 1})
    assert dump_object({"b": 2, "a": 1}) == dump_object({"a": 1, "b": 2})


def test_set_order_does_not_matter():
    assert dump_object({"x", "y", "z"}) == dump_object({"z", "x", "y"})


def test_list_order_matters():
    assert hash_object([1, 2]) != hash_object([2, 1])


def test_string_and_number_are_distinguished():
    assert dump_object("1") != dump_object(1)


def test_enum_dump_contains_type_and_value():
    text = dump_object(_Colour.RED)
    assert "_Colour" in text and '"red"' in text


def test_nested_dataclass_dump_contains_fields():
    text = dump_object(_Person("jack"))
    assert text.startswith("_Person{")
    assert 'name: "jack"' in text


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        dump_object(object())