import pytest
from xml.etree import ElementTree as ET

from dialogtree.core import MalformedDataError
from dialogtree.serialization import DialogCodec, from_xml, to_xml
from dialogtree.serialization.xml_codec import decode_value, encode_value


def test_xml_mirrors_json_shape(cat_dialog):
    data = DialogCodec().to_dict(cat_dialog)
    text = to_xml(data)

    assert text.startswith('<?xml version="1.0" encoding="utf-8"?>')
    root = ET.fromstring(text)
    assert root.tag == "dialog"
    assert root.get("name") == "cat"

    start = root.find("start")
    first_line = start.find("lines/line")
    assert first_line.attrib == {"id": "Cat", "content": "Meow"}
    assert len(start.findall("children/branch")) == 3
    assert start.find("children/branch/children") is None

    assert from_xml(text) == data


@pytest.mark.parametrize("value", [
    "text",
    "",
    None,
    True,
    False,
    3,
    -2.5,
    [1, "two", None],
    {},
    {"id": "A", "content": "multi\nline"},
    {"count": 2, "tags": ["a", "b"]},
    {"kind": "angry", "id": "A"},
    {"speaker": {"name": "Cat", "mood": "calm"}},
])
def test_value_encoding(value):
    element = encode_value("line", value)
    reparsed = ET.fromstring(ET.tostring(element, encoding="unicode"))
    assert decode_value(reparsed) == value


def test_unknown_root_element():
    with pytest.raises(MalformedDataError):
        from_xml("<story><start/></story>")


def test_missing_start():
    with pytest.raises(MalformedDataError):
        from_xml('<dialog name="x"/>')


def test_unexpected_branch_element():
    with pytest.raises(MalformedDataError):
        from_xml("<dialog><start><parent/></start></dialog>")


def test_wrong_child_tag():
    with pytest.raises(MalformedDataError):
        from_xml("<dialog><start><children><line/></children></start></dialog>")


def test_invalid_xml_carries_path(tmp_path):
    path = tmp_path / "bad.xml"
    with pytest.raises(MalformedDataError) as info:
        from_xml("<dialog><start>", path)
    assert info.value.path == path


def test_structure_error_carries_path(tmp_path):
    path = tmp_path / "bad.xml"
    with pytest.raises(MalformedDataError) as info:
        from_xml("<dialog/>", path)
    assert info.value.path == path


def test_bad_number():
    with pytest.raises(MalformedDataError):
        decode_value(ET.fromstring('<line kind="number">many</line>'))


@pytest.mark.parametrize("value", ["a\x01b", "a\rb", {"id": "A", "content": "bell\x07"}, ["\x1b[0m"]])
def test_control_characters_survive_parsing(value):
    element = encode_value("line", value)
    reparsed = ET.fromstring(ET.tostring(element, encoding="unicode"))
    assert decode_value(reparsed) == value


def test_control_characters_use_json_text():
    element = encode_value("line", "a\rb")
    assert element.get("kind") == "json"
    assert element.text == '"a\\rb"'


def test_bad_json_string():
    with pytest.raises(MalformedDataError):
        decode_value(ET.fromstring('<line kind="json">"open</line>'))


def test_unexpected_dialog_element():
    with pytest.raises(MalformedDataError):
        from_xml("<dialog><start/><extra/></dialog>")
