import pytest

from content_undo.serialization import DecodeError, deserialize, serialize


def test_deserialize_sequential_array():
    assert deserialize('a:3:{i:0;s:1:"a";i:1;s:1:"b";i:2;s:1:"c";}') == ["a", "b", "c"]


def test_deserialize_associative_array():
    value = 'a:2:{s:4:"unit";s:2:"h1";s:5:"value";s:5:"Hello";}'
    assert deserialize(value) == {"unit": "h1", "value": "Hello"}


def test_deserialize_nested_and_bytes():
    encoded = serialize([["x", "y"], ["p", "q"]])
    assert deserialize(encoded) == [["x", "y"], ["p", "q"]]
    assert deserialize(encoded.encode("utf-8")) == [["x", "y"], ["p", "q"]]


def test_deserialize_non_sequential_keys():
    assert deserialize('a:2:{i:1;s:1:"a";i:3;s:1:"b";}') == {1: "a", 3: "b"}


def test_deserialize_multibyte():
    assert deserialize(serialize({"value": "Über uns"})) == {"value": "Über uns"}


@pytest.mark.parametrize("value", [None, "", "plain text", 42, ["a"], {"a": 1}])
def test_passthrough(value):
    assert deserialize(value) == value


@pytest.mark.parametrize(
    "value",
    [
        'a:2:{i:0;s:1:"a";',
        'a:1:{i:0;s:10:"a";}',
        "a:x",
        'a:1:{i:0;O:8:"stdClass":0:{}}',
        'a:1:{i:0;C:3:"Foo":0:{}}',
    ],
)
def test_malformed(value):
    with pytest.raises(DecodeError):
        deserialize(value)


def test_decode_error_is_value_error():
    assert issubclass(DecodeError, ValueError)


def test_object_like_text_in_strings():
    items = ['Video:1:"Intro"', 'Chapter C:2:"b"']
    assert deserialize(serialize(items)) == items
